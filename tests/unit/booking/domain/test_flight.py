from datetime import timedelta
from decimal import Decimal

import pytest

from flight_booking.shared.domain.exception import (
    BusinessRuleViolationException,
    CapacityExceededException,
)


class TestFlight:
    """Flight Entity のテスト"""

    def test_available_seats(self, create_flight):
        flight = create_flight(capacity=3, passengers=(1, 2))

        assert flight.occupied == 2
        assert flight.available_seats == 1
        assert not flight.is_full

    def test_negative_capacity_raises_error(self, create_flight):
        with pytest.raises(BusinessRuleViolationException, match="capacity"):
            create_flight(capacity=-1)

    def test_negative_base_price_raises_error(self, create_flight):
        with pytest.raises(BusinessRuleViolationException, match="base price"):
            create_flight(base_price=Decimal("-1"))

    def test_more_passengers_than_seats_raises_error(self, create_flight):
        with pytest.raises(CapacityExceededException):
            create_flight(capacity=1, passengers=(1, 2))

    def test_departure_today_is_not_departed(self, create_flight, today):
        flight = create_flight(days_ahead=0)

        assert not flight.has_departed(today)
        assert flight.has_departed(today + timedelta(days=1))

    def test_current_price_reflects_occupancy(self, create_flight, today):
        """搭乗率 50%・40 日前なら 1.20 倍"""
        flight = create_flight(capacity=4, passengers=(1, 2), base_price=Decimal("100"))

        assert flight.current_price(today) == Decimal("120.00")

    def test_add_passenger(self, create_flight):
        flight = create_flight()

        assert flight.add_passenger(7) is True
        assert flight.add_passenger(7) is False
        assert flight.passengers == frozenset({7})

    def test_add_passenger_to_full_flight_raises_error(self, create_flight):
        """満席のフライトに追加すると CapacityExceededException が発生し、搭乗者は変わらない"""
        flight = create_flight(capacity=2, passengers=(1, 2))

        with pytest.raises(CapacityExceededException, match=r"\(2/2 seats booked\)"):
            flight.add_passenger(3)
        assert flight.passengers == frozenset({1, 2})

    def test_zero_capacity_flight_is_full(self, create_flight):
        flight = create_flight(capacity=0)

        assert flight.is_full
        with pytest.raises(CapacityExceededException):
            flight.ensure_seat_available()

    def test_remove_passenger(self, create_flight):
        flight = create_flight(passengers=(1,))

        assert flight.remove_passenger(1) is True
        assert flight.remove_passenger(1) is False
        assert flight.occupied == 0

    def test_cannot_delete_twice(self, create_flight):
        flight = create_flight()
        flight.mark_deleted()

        with pytest.raises(BusinessRuleViolationException, match="already been deleted"):
            flight.mark_deleted()

        flight.restore()
        assert not flight.deleted
