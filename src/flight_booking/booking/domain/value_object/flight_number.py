import re
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class FlightNumber:
    """便名

    前後の空白を除去して大文字に正規化する。
    例: BA123, U21234, EZY8011
    """

    value: str

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^[A-Z0-9]{2,3}\d{1,4}[A-Z]?$")

    def __post_init__(self) -> None:
        normalized = self.value.strip().upper()
        if not self.PATTERN.match(normalized):
            raise ValueError(
                f"Invalid flight number format: {self.value!r}. "
                "Expected an airline code followed by 1-4 digits (e.g. BA123)"
            )
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
