import os
import tempfile
from pathlib import Path

from flight_booking.booking.domain.entity import BookingSystem
from flight_booking.booking.domain.repository import BookingSystemRepository
from flight_booking.booking.infrastructure.snapshot import BookingSystemSnapshot

DEFAULT_SNAPSHOT_PATH = "flight_booking.json"


class FileBookingSystemRepository(BookingSystemRepository):
    """JSON ファイルを使用した BookingSystemRepository の具象実装

    同じディレクトリの一時ファイルに書いてから置き換えるため、
    保存は全体が反映されるか何も反映されないかのどちらか。
    """

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self.path = Path(path or os.getenv("SNAPSHOT_PATH", DEFAULT_SNAPSHOT_PATH))

    def save(self, system: BookingSystem) -> None:
        payload = BookingSystemSnapshot.from_domain(system).model_dump_json(indent=2)

        directory = self.path.parent
        directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=directory, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def load(self) -> BookingSystem | None:
        """保存済みの予約システムを読み込む（ファイルがなければ None）"""
        if not self.path.exists():
            return None
        snapshot = BookingSystemSnapshot.model_validate_json(
            self.path.read_text(encoding="utf-8")
        )
        return snapshot.to_domain()
