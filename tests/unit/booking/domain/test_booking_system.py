from datetime import timedelta

import pytest

from flight_booking.booking.domain.entity import BookingSystem
from flight_booking.booking.domain.value_object import FlightNumber, Route
from flight_booking.shared.domain.exception import DuplicateResourceException


class TestBookingSystem:
    """BookingSystem（ID → エンティティのレジストリ）のテスト"""

    def test_find_returns_none_when_absent(self, system):
        assert system.find_flight(99) is None
        assert system.find_customer(99) is None

    def test_next_ids(self, system):
        assert system.next_flight_id() == 3
        assert system.next_customer_id() == 3
        assert BookingSystem().next_flight_id() == 1

    def test_booking_ids_continue_after_restored_bookings(
        self, create_customer, create_booking
    ):
        customer = create_customer()
        customer.add_booking(create_booking(booking_id=7))

        system = BookingSystem(customers=[customer])

        assert system.allocate_booking_id() == 8
        assert system.allocate_booking_id() == 9

    def test_duplicate_ids_raise_error(self, create_flight):
        with pytest.raises(DuplicateResourceException, match="Duplicate flight ID"):
            BookingSystem(flights=[create_flight(flight_id=1), create_flight(flight_id=1)])

    def test_add_customer_rejects_duplicate_email(self, system, create_customer):
        duplicate = create_customer(customer_id=3, email="CUSTOMER1@example.com")

        with pytest.raises(DuplicateResourceException, match="email"):
            system.add_customer(duplicate)
        assert system.find_customer(3) is None

    def test_add_customer_rejects_duplicate_phone(self, system, create_customer):
        duplicate = create_customer(customer_id=3, phone="07000000001")

        with pytest.raises(DuplicateResourceException, match="phone"):
            system.add_customer(duplicate)

    def test_deleted_customer_contact_details_can_be_reused(self, system, create_customer):
        system.find_customer(1).mark_deleted()

        system.add_customer(create_customer(customer_id=3, email="customer1@example.com"))

        assert system.find_customer(3) is not None

    def test_find_duplicate_flight_ignores_case_and_deleted_flights(self, system, today):
        departure = today + timedelta(days=40)
        route = Route(origin="LONDON", destination="paris")

        assert system.find_duplicate_flight(FlightNumber("ba123"), route, departure).id == 1

        system.find_flight(1).mark_deleted()
        assert system.find_duplicate_flight(FlightNumber("BA123"), route, departure) is None

    def test_active_bookings_on_scans_every_customer(self, system, create_booking):
        system.find_customer(1).add_booking(create_booking(booking_id=1, customer_id=1))
        system.find_customer(2).add_booking(
            create_booking(booking_id=2, customer_id=2, outbound_flight_id=2)
        )
        system.find_customer(2).mark_deleted()

        assert [b.id for b in system.active_bookings_on(1)] == [1]
        assert [b.id for b in system.active_bookings_on(2)] == [2]
