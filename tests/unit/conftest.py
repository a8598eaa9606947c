from datetime import date, timedelta
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from flight_booking.booking.applications import UnitOfWork
from flight_booking.booking.domain.entity import (
    Booking,
    BookingSystem,
    Customer,
    Flight,
)
from flight_booking.booking.domain.enum import BookingStatus
from flight_booking.booking.domain.value_object import FlightNumber, Route
from flight_booking.shared.domain import FixedClock

TODAY = date(2026, 1, 10)


@pytest.fixture
def today():
    """全テスト共通の「今日」"""
    return TODAY


@pytest.fixture
def clock():
    return FixedClock(TODAY)


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    repository = MagicMock()
    repository.load.return_value = None
    return repository


@pytest.fixture
def create_flight():
    """Flight を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        flight_id: int = 1,
        flight_number: str = "BA123",
        origin: str = "London",
        destination: str = "Paris",
        days_ahead: int = 40,
        capacity: int = 100,
        base_price: Decimal = Decimal("100.00"),
        passengers: tuple[int, ...] = (),
        deleted: bool = False,
    ) -> Flight:
        return Flight(
            id=flight_id,
            flight_number=FlightNumber(flight_number),
            route=Route(origin=origin, destination=destination),
            departure_date=TODAY + timedelta(days=days_ahead),
            capacity=capacity,
            base_price=base_price,
            passengers=passengers,
            deleted=deleted,
        )

    return _factory


@pytest.fixture
def create_customer():
    """Customer を生成する Factory fixture"""

    def _factory(
        customer_id: int = 1,
        name: str = "Ada Lovelace",
        phone: str | None = None,
        email: str | None = None,
        deleted: bool = False,
    ) -> Customer:
        return Customer(
            id=customer_id,
            name=name,
            phone=phone or f"0700000{customer_id:04d}",
            email=email or f"customer{customer_id}@example.com",
            deleted=deleted,
        )

    return _factory


@pytest.fixture
def create_booking():
    """Booking を生成する Factory fixture"""

    def _factory(
        booking_id: int = 1,
        customer_id: int = 1,
        outbound_flight_id: int = 1,
        return_flight_id: int | None = None,
        price: Decimal = Decimal("300.00"),
        cancellation_fee: Decimal = Decimal("0.00"),
        status: BookingStatus = BookingStatus.BOOKED,
        booking_date: date = TODAY,
    ) -> Booking:
        return Booking(
            id=booking_id,
            customer_id=customer_id,
            outbound_flight_id=outbound_flight_id,
            return_flight_id=return_flight_id,
            booking_date=booking_date,
            price=price,
            cancellation_fee=cancellation_fee,
            status=status,
        )

    return _factory


@pytest.fixture
def system(create_flight, create_customer):
    """往復できる 2 便（London ⇄ Paris）と顧客 2 人を持つ予約システム"""
    return BookingSystem(
        flights=[
            create_flight(flight_id=1, flight_number="BA123", days_ahead=40),
            create_flight(
                flight_id=2,
                flight_number="BA124",
                origin="Paris",
                destination="London",
                days_ahead=47,
            ),
        ],
        customers=[create_customer(customer_id=1), create_customer(customer_id=2)],
    )


@pytest.fixture
def uow(system, mock_repository):
    return UnitOfWork(system, mock_repository)
