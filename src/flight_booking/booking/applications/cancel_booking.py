from decimal import Decimal

from flight_booking.booking.applications.lookups import require_customer, require_flight
from flight_booking.booking.applications.unit_of_work import (
    RemovePassenger,
    TransitionBooking,
    UnitOfWork,
)
from flight_booking.booking.domain.entity import Booking
from flight_booking.shared.domain import Clock
from flight_booking.shared.domain.exception import (
    BusinessRuleViolationException,
    ResourceNotFoundException,
)
from flight_booking.shared.utils import get_logger

logger = get_logger()

ONE_WAY_CANCELLATION_FEE = Decimal("25.00")
ROUND_TRIP_CANCELLATION_FEE = Decimal("50.00")


class CancelBookingService:
    """予約キャンセルのユースケース

    手数料は片道 25.00、往復 50.00（区間ごとではなく一律）。
    往復は往路の出発後はキャンセルできない。
    """

    def __init__(self, unit_of_work: UnitOfWork, clock: Clock) -> None:
        self._uow = unit_of_work
        self._clock = clock

    def cancel(
        self,
        customer_id: int,
        outbound_flight_id: int,
        return_flight_id: int | None = None,
    ) -> Booking:
        """予約をキャンセルする

        往復予約の場合は return_flight_id が必須で、予約の復路と一致しなければならない。
        """
        with self._uow.transaction("cancellation") as changes:
            system = self._uow.system
            today = self._clock.today()

            customer = require_customer(system, customer_id)
            require_flight(system, outbound_flight_id)

            booking = customer.find_active_booking_by_outbound(outbound_flight_id)
            if booking is None:
                hint = customer.find_active_booking_on(outbound_flight_id)
                if hint is not None and hint.is_round_trip:
                    raise BusinessRuleViolationException(
                        f"Flight #{outbound_flight_id} is the return flight of a round-trip "
                        f"booking. To cancel this round-trip booking, please provide both "
                        f"outbound flight ID #{hint.outbound_flight_id} and return flight "
                        f"ID #{outbound_flight_id}."
                    )
                raise ResourceNotFoundException(
                    f"No active booking found for customer #{customer_id} "
                    f"on flight #{outbound_flight_id}."
                )

            if booking.is_round_trip:
                if return_flight_id is None:
                    raise BusinessRuleViolationException(
                        f"Booking #{booking.id} is a round-trip booking. Please provide both "
                        f"outbound flight #{booking.outbound_flight_id} and return flight "
                        f"#{booking.return_flight_id} to cancel."
                    )
                if return_flight_id != booking.return_flight_id:
                    raise BusinessRuleViolationException(
                        f"Return flight ID mismatch. Expected flight "
                        f"#{booking.return_flight_id} but got #{return_flight_id}."
                    )
            elif return_flight_id is not None:
                raise BusinessRuleViolationException(
                    f"Booking #{booking.id} is a one-way booking. "
                    "Please provide only the outbound flight ID."
                )

            outbound = require_flight(system, booking.outbound_flight_id)
            return_flight = (
                require_flight(system, booking.return_flight_id)
                if booking.return_flight_id is not None
                else None
            )

            if outbound.deleted:
                raise BusinessRuleViolationException(
                    f"Outbound {outbound.describe()} has been deleted."
                )
            if return_flight is not None and return_flight.deleted:
                raise BusinessRuleViolationException(
                    f"Return {return_flight.describe()} has been deleted."
                )
            if outbound.has_departed(today):
                if booking.is_round_trip:
                    raise BusinessRuleViolationException(
                        "Cancellation of a round trip is not possible after the outbound "
                        f"{outbound.describe()} departed on {outbound.departure_date}."
                    )
                raise BusinessRuleViolationException(
                    f"{outbound.describe()} departed on {outbound.departure_date} "
                    "and can no longer be cancelled."
                )

            fee = (
                ROUND_TRIP_CANCELLATION_FEE
                if booking.is_round_trip
                else ONE_WAY_CANCELLATION_FEE
            )
            changes.apply(
                TransitionBooking(booking, lambda b: b.cancel(fee=fee, on=today))
            )
            changes.apply(RemovePassenger(outbound, customer.id))
            if return_flight is not None:
                changes.apply(RemovePassenger(return_flight, customer.id))

        logger.info(
            "Booking cancelled",
            extra={
                "booking_id": booking.id,
                "customer_id": customer_id,
                "fee": str(booking.cancellation_fee),
                "refund": str(booking.refund_amount),
            },
        )
        return booking
