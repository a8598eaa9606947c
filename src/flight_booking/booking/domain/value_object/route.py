from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Route:
    """路線（出発地 → 到着地）

    都市名の比較は大文字・小文字を区別しない。
    """

    origin: str
    destination: str

    def __post_init__(self) -> None:
        origin = self.origin.strip()
        destination = self.destination.strip()
        if not origin or not destination:
            raise ValueError("Origin and destination must not be empty")
        object.__setattr__(self, "origin", origin)
        object.__setattr__(self, "destination", destination)

    def __str__(self) -> str:
        return f"{self.origin} to {self.destination}"

    def same_as(self, other: Route) -> bool:
        return (
            self.origin.casefold() == other.origin.casefold()
            and self.destination.casefold() == other.destination.casefold()
        )

