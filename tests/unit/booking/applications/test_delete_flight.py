from datetime import timedelta
from decimal import Decimal

import pytest

from flight_booking.booking.applications import (
    CreateBookingService,
    DeleteFlightService,
    RebookBookingService,
    UnitOfWork,
)
from flight_booking.booking.domain.entity import BookingSystem
from flight_booking.booking.domain.enum import BookingStatus, CancellationKind
from flight_booking.shared.domain.exception import (
    BusinessRuleViolationException,
    PersistenceFailureException,
    ResourceNotFoundException,
)


class TestDeleteFlightService:
    """DeleteFlightService（論理削除と連鎖キャンセル）のテスト"""

    @pytest.fixture
    def book(self, uow, clock):
        return CreateBookingService(unit_of_work=uow, clock=clock).book

    @pytest.fixture
    def service(self, uow, clock):
        return DeleteFlightService(unit_of_work=uow, clock=clock)

    def test_delete_flight_without_bookings(self, service, system, mock_repository):
        result = service.delete(1)

        assert system.find_flight(1).deleted
        assert result.cancellations == ()
        mock_repository.save.assert_called_once_with(system)

    def test_one_way_booking_is_fully_refunded(self, service, book, system):
        booking = book(customer_id=1, outbound_flight_id=1)

        result = service.delete(1)

        assert booking.status == BookingStatus.CANCELLED
        assert booking.cancellation_fee == Decimal("0.00")
        assert booking.refund_amount == Decimal("100.00")
        assert [(n.booking_id, n.kind, n.refund) for n in result.cancellations] == [
            (booking.id, CancellationKind.ONE_WAY, Decimal("100.00"))
        ]
        # 削除されたフライトの搭乗者は変更しない
        assert system.find_flight(1).passengers == frozenset({1})

    def test_deleting_outbound_cancels_whole_round_trip(self, service, book, system):
        booking = book(customer_id=1, outbound_flight_id=1, return_flight_id=2)

        result = service.delete(1)

        assert booking.refund_amount == Decimal("200.00")
        assert not booking.partial_cancellation
        assert result.cancellations[0].kind == CancellationKind.ROUND_TRIP
        # 復路の座席は空き、削除された往路の搭乗者はそのまま
        assert system.find_flight(2).passengers == frozenset()
        assert system.find_flight(1).passengers == frozenset({1})

    def test_vacated_return_seat_can_be_booked_again(
        self, service, book, system, create_flight
    ):
        """定員 1 の復路は、往路削除で空いた座席を別の顧客が予約できる"""

        # Arrange
        system.add_flight(
            create_flight(
                flight_id=3,
                flight_number="BA9",
                origin="Paris",
                destination="London",
                days_ahead=47,
                capacity=1,
            )
        )
        book(customer_id=1, outbound_flight_id=1, return_flight_id=3)

        # Act
        service.delete(1)
        booking = book(customer_id=2, outbound_flight_id=3)

        # Assert
        assert booking.is_active
        assert system.find_flight(3).passengers == frozenset({2})

    def test_deleting_return_leg_splits_price(
        self, clock, mock_repository, create_flight, create_customer, create_booking, today
    ):
        """往路 180 : 復路 220 の往復 400.00 は往路分 180.00 を保持し 220.00 を返金"""

        # Arrange
        customer = create_customer()
        booking = create_booking(
            outbound_flight_id=1,
            return_flight_id=2,
            price=Decimal("400.00"),
            booking_date=today,
        )
        customer.add_booking(booking)
        system = BookingSystem(
            flights=[
                create_flight(flight_id=1, base_price=Decimal("180.00"), days_ahead=40),
                create_flight(
                    flight_id=2,
                    flight_number="BA124",
                    origin="Paris",
                    destination="London",
                    base_price=Decimal("220.00"),
                    days_ahead=47,
                ),
            ],
            customers=[customer],
        )
        service = DeleteFlightService(UnitOfWork(system, mock_repository), clock)

        # Act
        result = service.delete(2)

        # Assert
        assert booking.status == BookingStatus.CANCELLED
        assert booking.partial_cancellation
        assert booking.price == Decimal("400.00")
        assert booking.cancellation_fee == Decimal("180.00")
        assert booking.refund_amount == Decimal("220.00")
        notice = result.cancellations[0]
        assert notice.kind == CancellationKind.RETURN_LEG
        assert notice.retained == Decimal("180.00")
        assert result.total_refund == Decimal("220.00")

    def test_rebooked_booking_refunds_rebooking_fee(self, service, book, uow, clock):
        book(customer_id=1, outbound_flight_id=2)
        rebooked = RebookBookingService(unit_of_work=uow, clock=clock).rebook(
            customer_id=1, old_flight_id=2, new_flight_id=1
        )

        result = service.delete(1)

        assert rebooked.cancellation_fee == Decimal("-15.00")
        assert result.cancellations[0].refund == rebooked.price + Decimal("15.00")

    def test_bookings_of_deleted_customers_are_cancelled(self, service, book, system):
        booking = book(customer_id=2, outbound_flight_id=1)
        system.find_customer(2).mark_deleted()

        service.delete(1)

        assert booking.is_cancelled

    def test_unknown_flight_raises_not_found(self, service):
        with pytest.raises(ResourceNotFoundException, match="Flight with ID 9 not found"):
            service.delete(9)

    def test_already_deleted_flight_raises_error(self, service):
        service.delete(1)

        with pytest.raises(BusinessRuleViolationException, match="already been deleted"):
            service.delete(1)

    def test_departed_outbound_of_round_trip_cannot_be_deleted(self, service, book, clock):
        book(customer_id=1, outbound_flight_id=1, return_flight_id=2)
        clock.advance(days=41)

        with pytest.raises(BusinessRuleViolationException, match="trip in progress"):
            service.delete(1)

    def test_departed_flight_cannot_be_deleted(self, service, clock, today):
        clock.set(today + timedelta(days=41))

        with pytest.raises(BusinessRuleViolationException, match="can no longer be deleted"):
            service.delete(1)

    def test_save_failure_restores_bookings_and_flight(
        self, service, book, system, mock_repository
    ):
        one_way = book(customer_id=1, outbound_flight_id=1)
        round_trip = book(customer_id=2, outbound_flight_id=1, return_flight_id=2)
        mock_repository.save.side_effect = OSError("disk full")

        with pytest.raises(PersistenceFailureException, match="Error saving flight deletion"):
            service.delete(1)

        assert not system.find_flight(1).deleted
        assert one_way.status == BookingStatus.BOOKED
        assert round_trip.status == BookingStatus.BOOKED
        assert round_trip.cancellation_fee == Decimal("0.00")
        assert system.find_flight(2).passengers == frozenset({2})
