from flight_booking.booking.applications.lookups import require_customer, require_flight
from flight_booking.booking.applications.unit_of_work import (
    AddPassenger,
    AllocateBookingId,
    AppendBooking,
    RemovePassenger,
    TransitionBooking,
    UnitOfWork,
)
from flight_booking.booking.domain.entity import Booking, Customer
from flight_booking.booking.domain.factory import BookingFactory
from flight_booking.shared.domain import Clock
from flight_booking.shared.domain.exception import (
    BusinessRuleViolationException,
    DuplicateResourceException,
    ResourceNotFoundException,
)
from flight_booking.shared.utils import get_logger

logger = get_logger()


class RebookBookingService:
    """片道予約の振替のユースケース

    旧予約は CANCELLED（価格・手数料はそのまま）、新しい便に REBOOKED の
    後継予約（振替手数料 15.00）を作る。往復予約は振替できない。
    """

    def __init__(
        self,
        unit_of_work: UnitOfWork,
        clock: Clock,
        factory: BookingFactory | None = None,
    ) -> None:
        self._uow = unit_of_work
        self._clock = clock
        self._factory = factory or BookingFactory()

    def rebook(self, customer_id: int, old_flight_id: int, new_flight_id: int) -> Booking:
        """予約を別の便へ振り替え、後継予約を返す"""
        with self._uow.transaction("rebooking") as changes:
            system = self._uow.system
            today = self._clock.today()

            customer = require_customer(system, customer_id)
            old_flight = require_flight(system, old_flight_id, label="Old flight")
            new_flight = require_flight(system, new_flight_id, label="New flight")

            if old_flight_id == new_flight_id:
                raise BusinessRuleViolationException(
                    f"Cannot rebook to the same flight. The new flight ID ({new_flight_id}) "
                    f"is the same as the current flight ID ({old_flight_id})."
                )

            existing = customer.find_active_booking_on(old_flight_id)
            if existing is None:
                raise ResourceNotFoundException(
                    f"No active booking found for customer #{customer_id} "
                    f"on the old flight #{old_flight_id}."
                )
            if existing.is_round_trip:
                raise BusinessRuleViolationException(
                    f"Flight #{old_flight_id} is the {existing.leg_of(old_flight_id)} flight "
                    f"of round-trip booking #{existing.id}. Rebooking is not allowed for "
                    "round-trip bookings. Please cancel and book again if changes are needed."
                )

            if old_flight.deleted:
                raise BusinessRuleViolationException(
                    f"Old {old_flight.describe()} has been deleted."
                )
            if old_flight.has_departed(today):
                raise BusinessRuleViolationException(
                    f"Old {old_flight.describe()} departed on {old_flight.departure_date} "
                    "and cannot be rebooked."
                )
            if new_flight.deleted:
                raise BusinessRuleViolationException(
                    f"New {new_flight.describe()} has been deleted."
                )
            if new_flight.has_departed(today):
                raise BusinessRuleViolationException(
                    f"New {new_flight.describe()} departed on {new_flight.departure_date} "
                    "and can no longer be booked."
                )

            self._ensure_not_already_booked(customer, new_flight_id, existing)
            new_flight.ensure_seat_available()

            allocation = changes.apply(AllocateBookingId(system))
            replacement = self._factory.create_rebooking(
                booking_id=allocation.booking_id,
                customer=customer,
                flight=new_flight,
                booking_date=today,
            )

            changes.apply(RemovePassenger(old_flight, customer.id))
            # 失敗時は transaction が旧便からの削除も取り消す
            changes.apply(AddPassenger(new_flight, customer.id))
            changes.apply(TransitionBooking(existing, lambda b: b.supersede(on=today)))
            changes.apply(AppendBooking(customer, replacement))

        logger.info(
            "Booking rebooked",
            extra={
                "customer_id": customer_id,
                "old_booking_id": existing.id,
                "new_booking_id": replacement.id,
                "old_flight_id": old_flight_id,
                "new_flight_id": new_flight_id,
                "price": str(replacement.price),
            },
        )
        return replacement

    @staticmethod
    def _ensure_not_already_booked(
        customer: Customer, flight_id: int, rebooked: Booking
    ) -> None:
        other = customer.find_active_booking_on(flight_id, exclude=rebooked)
        if other is None:
            return
        raise DuplicateResourceException(
            f"Customer #{customer.id} already has an active booking for flight "
            f"#{flight_id} (booking #{other.id}, booked as {other.leg_of(flight_id)} flight)."
        )
