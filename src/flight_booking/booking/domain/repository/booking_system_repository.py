from abc import abstractmethod

from flight_booking.booking.domain.entity import BookingSystem
from flight_booking.shared.domain import Repository


class BookingSystemRepository(Repository[BookingSystem]):
    """予約システム全体のリポジトリ

    Domain 層で定義し、具象実装は Infrastructure 層で行う。
    save が例外を送出した場合、呼び出し側はメモリ上の変更を巻き戻す。
    """

    @abstractmethod
    def save(self, system: BookingSystem) -> None:
        """モデル全体を保存する（全件成功か全件失敗）"""
        raise NotImplementedError

    @abstractmethod
    def load(self) -> BookingSystem | None:
        """保存済みのモデルを読み込む"""
        raise NotImplementedError
