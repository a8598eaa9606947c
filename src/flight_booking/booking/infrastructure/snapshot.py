"""予約システム全体のスナップショット（永続化用のスキーマ）

ファイル・DynamoDB どちらのリポジトリもこのモデルを JSON にして保存する。
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from flight_booking.booking.domain.entity import (
    Booking,
    BookingSystem,
    Customer,
    Flight,
)
from flight_booking.booking.domain.enum import BookingStatus
from flight_booking.booking.domain.value_object import FlightNumber, Route
from flight_booking.shared.utils import to_decimal

SCHEMA_VERSION = 1


class FlightRecord(BaseModel):
    id: int
    flight_number: str
    origin: str
    destination: str
    departure_date: date
    capacity: int = Field(..., ge=0)
    base_price: Decimal
    deleted: bool = False
    passengers: list[int] = Field(default_factory=list)

    @field_validator("base_price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        return to_decimal(v)

    @classmethod
    def from_domain(cls, flight: Flight) -> FlightRecord:
        return cls(
            id=flight.id,
            flight_number=str(flight.flight_number),
            origin=flight.origin,
            destination=flight.destination,
            departure_date=flight.departure_date,
            capacity=flight.capacity,
            base_price=flight.base_price,
            deleted=flight.deleted,
            passengers=sorted(flight.passengers),
        )

    def to_domain(self) -> Flight:
        return Flight(
            id=self.id,
            flight_number=FlightNumber(self.flight_number),
            route=Route(origin=self.origin, destination=self.destination),
            departure_date=self.departure_date,
            capacity=self.capacity,
            base_price=self.base_price,
            deleted=self.deleted,
            passengers=self.passengers,
        )


class BookingRecord(BaseModel):
    id: int
    customer_id: int
    outbound_flight_id: int
    return_flight_id: int | None = None
    booking_date: date
    action_date: date
    price: Decimal
    cancellation_fee: Decimal
    status: BookingStatus
    partial_cancellation: bool = False

    @field_validator("price", "cancellation_fee", mode="before")
    @classmethod
    def convert_amount_to_decimal(cls, v):
        return to_decimal(v)

    @classmethod
    def from_domain(cls, booking: Booking) -> BookingRecord:
        return cls(
            id=booking.id,
            customer_id=booking.customer_id,
            outbound_flight_id=booking.outbound_flight_id,
            return_flight_id=booking.return_flight_id,
            booking_date=booking.booking_date,
            action_date=booking.action_date,
            price=booking.price,
            cancellation_fee=booking.cancellation_fee,
            status=booking.status,
            partial_cancellation=booking.partial_cancellation,
        )

    def to_domain(self) -> Booking:
        return Booking(
            id=self.id,
            customer_id=self.customer_id,
            outbound_flight_id=self.outbound_flight_id,
            return_flight_id=self.return_flight_id,
            booking_date=self.booking_date,
            action_date=self.action_date,
            price=self.price,
            cancellation_fee=self.cancellation_fee,
            status=self.status,
            partial_cancellation=self.partial_cancellation,
        )


class CustomerRecord(BaseModel):
    id: int
    name: str
    phone: str
    email: str
    deleted: bool = False
    bookings: list[BookingRecord] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, customer: Customer) -> CustomerRecord:
        return cls(
            id=customer.id,
            name=customer.name,
            phone=customer.phone,
            email=customer.email,
            deleted=customer.deleted,
            bookings=[BookingRecord.from_domain(b) for b in customer.bookings],
        )

    def to_domain(self) -> Customer:
        return Customer(
            id=self.id,
            name=self.name,
            phone=self.phone,
            email=self.email,
            deleted=self.deleted,
            bookings=[b.to_domain() for b in self.bookings],
        )


class BookingSystemSnapshot(BaseModel):
    """予約システムの全データ（予約は顧客ごとに追加順で保持）"""

    schema_version: int = SCHEMA_VERSION
    next_booking_id: int = Field(default=1, ge=1)
    flights: list[FlightRecord] = Field(default_factory=list)
    customers: list[CustomerRecord] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, system: BookingSystem) -> BookingSystemSnapshot:
        return cls(
            next_booking_id=system.next_booking_id,
            flights=[FlightRecord.from_domain(f) for f in system.flights],
            customers=[CustomerRecord.from_domain(c) for c in system.customers],
        )

    def to_domain(self) -> BookingSystem:
        return BookingSystem(
            flights=[f.to_domain() for f in self.flights],
            customers=[c.to_domain() for c in self.customers],
            next_booking_id=self.next_booking_id,
        )
