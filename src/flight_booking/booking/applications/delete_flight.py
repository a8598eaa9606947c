from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from flight_booking.booking.applications.lookups import require_flight
from flight_booking.booking.applications.unit_of_work import (
    ChangeSet,
    MarkFlightDeleted,
    RemovePassenger,
    TransitionBooking,
    UnitOfWork,
)
from flight_booking.booking.domain.entity import Booking, BookingSystem, Flight
from flight_booking.booking.domain.enum import CancellationKind
from flight_booking.booking.domain.service import split_round_trip_price
from flight_booking.shared.domain import Clock
from flight_booking.shared.domain.exception import BusinessRuleViolationException
from flight_booking.shared.utils import get_logger

logger = get_logger()


@dataclass(frozen=True)
class CancellationNotice:
    """フライト削除で影響を受けた予約 1 件分の結果"""

    customer_id: int
    booking_id: int
    kind: CancellationKind
    refund: Decimal
    retained: Decimal


@dataclass(frozen=True)
class FlightDeletionResult:
    flight_id: int
    cancellations: tuple[CancellationNotice, ...]

    @property
    def total_refund(self) -> Decimal:
        return sum((c.refund for c in self.cancellations), Decimal("0.00"))


class DeleteFlightService:
    """フライト削除（論理削除）と影響する予約の連鎖キャンセル

    - 片道 / 往路が削除された往復: 全額返金（振替予約は振替手数料も返金）
    - 復路だけが削除された往復: 予約日基準で区間ごとに再計算した価格比で按分し、
      往路分を保持、復路分を返金する（部分キャンセル）
    """

    def __init__(self, unit_of_work: UnitOfWork, clock: Clock) -> None:
        self._uow = unit_of_work
        self._clock = clock

    def delete(self, flight_id: int) -> FlightDeletionResult:
        with self._uow.transaction("flight deletion") as changes:
            system = self._uow.system
            today = self._clock.today()

            flight = require_flight(system, flight_id)
            if flight.deleted:
                raise BusinessRuleViolationException(
                    f"{flight.describe()} has already been deleted."
                )

            affected = system.active_bookings_on(flight_id)
            for booking in affected:
                if (
                    booking.is_round_trip
                    and booking.outbound_flight_id == flight_id
                    and flight.has_departed(today)
                ):
                    raise BusinessRuleViolationException(
                        f"{flight.describe()} is the outbound flight of round-trip booking "
                        f"#{booking.id} and departed on {flight.departure_date}; "
                        "deleting it would break a trip in progress."
                    )
            if flight.has_departed(today):
                raise BusinessRuleViolationException(
                    f"{flight.describe()} departed on {flight.departure_date} "
                    "and can no longer be deleted."
                )

            notices = tuple(
                self._cancel(changes, system, booking, flight, today)
                for booking in affected
            )
            changes.apply(MarkFlightDeleted(flight))

        logger.info(
            "Flight deleted",
            extra={
                "flight_id": flight_id,
                "cancelled_bookings": len(notices),
                "partial_cancellations": sum(
                    1 for n in notices if n.kind == CancellationKind.RETURN_LEG
                ),
            },
        )
        return FlightDeletionResult(flight_id=flight_id, cancellations=notices)

    def _cancel(
        self,
        changes: ChangeSet,
        system: BookingSystem,
        booking: Booking,
        deleted_flight: Flight,
        today: date,
    ) -> CancellationNotice:
        if booking.outbound_flight_id == deleted_flight.id:
            kind = (
                CancellationKind.ROUND_TRIP
                if booking.is_round_trip
                else CancellationKind.ONE_WAY
            )
            changes.apply(
                TransitionBooking(booking, lambda b: b.cancel_for_deleted_flight(on=today))
            )
            if booking.is_round_trip:
                # 往路が消えた往復は復路の座席も空ける
                return_flight = require_flight(system, booking.return_flight_id)
                changes.apply(RemovePassenger(return_flight, booking.customer_id))
        else:
            kind = CancellationKind.RETURN_LEG
            retained = self._outbound_value(system, booking)
            changes.apply(
                TransitionBooking(
                    booking, lambda b: b.cancel_return_leg(retained=retained, on=today)
                )
            )

        return CancellationNotice(
            customer_id=booking.customer_id,
            booking_id=booking.id,
            kind=kind,
            refund=booking.refund_amount,
            retained=booking.price - booking.refund_amount,
        )

    @staticmethod
    def _outbound_value(system: BookingSystem, booking: Booking) -> Decimal:
        """往復運賃のうち往路に帰属する金額（予約日を基準日に再計算して按分）"""
        outbound = require_flight(system, booking.outbound_flight_id)
        return_flight = require_flight(system, booking.return_flight_id)
        return split_round_trip_price(
            price=booking.price,
            outbound_share=outbound.current_price(booking.booking_date),
            return_share=return_flight.current_price(booking.booking_date),
        )
