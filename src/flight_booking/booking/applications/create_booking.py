from flight_booking.booking.applications.lookups import require_customer, require_flight
from flight_booking.booking.applications.unit_of_work import (
    AddPassenger,
    AllocateBookingId,
    AppendBooking,
    UnitOfWork,
)
from flight_booking.booking.domain.entity import Booking, Customer, Flight
from flight_booking.booking.domain.factory import BookingFactory
from flight_booking.shared.domain import Clock
from flight_booking.shared.domain.exception import (
    BusinessRuleViolationException,
    DuplicateResourceException,
)
from flight_booking.shared.utils import get_logger

logger = get_logger()


class CreateBookingService:
    """予約作成のユースケース（片道・往復）

    検証はすべて変更前に行い、最初に失敗した条件で例外を送出する。
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

    def book(
        self,
        customer_id: int,
        outbound_flight_id: int,
        return_flight_id: int | None = None,
    ) -> Booking:
        """予約を作成する"""
        with self._uow.transaction("booking") as changes:
            system = self._uow.system
            today = self._clock.today()

            customer = require_customer(system, customer_id)
            if customer.deleted:
                raise BusinessRuleViolationException(
                    f"Customer #{customer_id} has been deleted and cannot make bookings."
                )

            outbound = require_flight(system, outbound_flight_id)
            return_flight: Flight | None = None
            if return_flight_id is not None:
                return_flight = require_flight(
                    system, return_flight_id, label="Return flight"
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
                raise BusinessRuleViolationException(
                    f"Outbound {outbound.describe()} departed on "
                    f"{outbound.departure_date} and can no longer be booked (today is {today})."
                )
            if return_flight is not None and return_flight.has_departed(today):
                raise BusinessRuleViolationException(
                    f"Return {return_flight.describe()} departed on "
                    f"{return_flight.departure_date} and can no longer be booked (today is {today})."
                )

            self._ensure_not_already_booked(customer, outbound_flight_id)
            if return_flight_id is not None:
                self._ensure_not_already_booked(customer, return_flight_id)

            if return_flight is not None:
                self._validate_round_trip(outbound, return_flight)

            outbound.ensure_seat_available()
            if return_flight is not None:
                return_flight.ensure_seat_available()

            allocation = changes.apply(AllocateBookingId(system))
            booking = self._factory.create(
                booking_id=allocation.booking_id,
                customer=customer,
                outbound=outbound,
                return_flight=return_flight,
                booking_date=today,
            )

            changes.apply(AddPassenger(outbound, customer.id))
            if return_flight is not None:
                # 失敗時は transaction が往路の追加も取り消す
                changes.apply(AddPassenger(return_flight, customer.id))
            changes.apply(AppendBooking(customer, booking))

        logger.info(
            "Booking created",
            extra={
                "booking_id": booking.id,
                "customer_id": customer_id,
                "outbound_flight_id": outbound_flight_id,
                "return_flight_id": return_flight_id,
                "price": str(booking.price),
            },
        )
        return booking

    @staticmethod
    def _ensure_not_already_booked(customer: Customer, flight_id: int) -> None:
        existing = customer.find_active_booking_on(flight_id)
        if existing is None:
            return
        raise DuplicateResourceException(
            f"Customer #{customer.id} already has an active booking for flight "
            f"#{flight_id} (booking #{existing.id}, currently booked as "
            f"{existing.leg_of(flight_id)} flight)."
        )

    @staticmethod
    def _validate_round_trip(outbound: Flight, return_flight: Flight) -> None:
        if outbound.id == return_flight.id:
            raise BusinessRuleViolationException(
                f"Invalid round-trip booking: outbound and return are the same flight #{outbound.id}."
            )
        if outbound.destination.casefold() != return_flight.origin.casefold():
            raise BusinessRuleViolationException(
                f"Invalid round-trip route: outbound destination '{outbound.destination}' "
                f"must match return origin '{return_flight.origin}'."
            )
        if outbound.origin.casefold() != return_flight.destination.casefold():
            raise BusinessRuleViolationException(
                f"Invalid round-trip route: outbound origin '{outbound.origin}' "
                f"must match return destination '{return_flight.destination}'."
            )
        if return_flight.departure_date < outbound.departure_date:
            raise BusinessRuleViolationException(
                "Invalid round-trip booking: return flight cannot depart before outbound flight. "
                f"Outbound departs on {outbound.departure_date}, "
                f"but return departs on {return_flight.departure_date}."
            )
