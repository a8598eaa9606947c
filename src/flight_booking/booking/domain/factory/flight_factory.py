from datetime import date
from decimal import Decimal
from typing import NotRequired, TypedDict

from flight_booking.booking.domain.entity import Flight
from flight_booking.booking.domain.entity.flight import (
    DEFAULT_BASE_PRICE,
    DEFAULT_CAPACITY,
)
from flight_booking.booking.domain.value_object import FlightNumber, Route


class FlightDetails(TypedDict):
    """フライトの入力データ構造"""

    flight_number: str
    origin: str
    destination: str
    departure_date: date
    capacity: NotRequired[int]
    base_price: NotRequired[Decimal]


class FlightFactory:
    """フライトエンティティのファクトリ

    プリミティブ型から Value Object へ変換する。
    """

    def create(self, flight_id: int, details: FlightDetails) -> Flight:
        return Flight(
            id=flight_id,
            flight_number=FlightNumber(details["flight_number"]),
            route=Route(origin=details["origin"], destination=details["destination"]),
            departure_date=details["departure_date"],
            capacity=details.get("capacity", DEFAULT_CAPACITY),
            base_price=details.get("base_price", DEFAULT_BASE_PRICE),
        )
