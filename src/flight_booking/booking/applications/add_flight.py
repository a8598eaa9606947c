from datetime import date

from flight_booking.booking.applications.unit_of_work import RegisterFlight, UnitOfWork
from flight_booking.booking.domain.entity import Flight
from flight_booking.booking.domain.factory import FlightDetails, FlightFactory
from flight_booking.shared.domain import Clock
from flight_booking.shared.domain.exception import (
    BusinessRuleViolationException,
    DuplicateFlightException,
)
from flight_booking.shared.utils import get_logger

logger = get_logger()

BOOKING_HORIZON_MONTHS = 12


def booking_horizon(today: date) -> date:
    """today から 12 か月後の日付（2/29 起点なら翌年の 2/28）"""
    try:
        return today.replace(year=today.year + BOOKING_HORIZON_MONTHS // 12)
    except ValueError:
        return today.replace(year=today.year + BOOKING_HORIZON_MONTHS // 12, day=28)


class AddFlightService:
    """フライト登録のユースケース"""

    def __init__(
        self,
        unit_of_work: UnitOfWork,
        clock: Clock,
        factory: FlightFactory | None = None,
    ) -> None:
        self._uow = unit_of_work
        self._clock = clock
        self._factory = factory or FlightFactory()

    def add(self, details: FlightDetails, allow_duplicate: bool = False) -> Flight:
        """フライトを登録する

        同じ便名・路線・出発日の未削除フライトがある場合は DuplicateFlightException。
        確認の上で allow_duplicate=True を指定すれば登録できる。
        """
        with self._uow.transaction("flight") as changes:
            system = self._uow.system
            today = self._clock.today()

            departure_date = details["departure_date"]
            if departure_date < today:
                raise BusinessRuleViolationException(
                    f"Departure date {departure_date} is in the past (today is {today})."
                )
            horizon = booking_horizon(today)
            if departure_date > horizon:
                raise BusinessRuleViolationException(
                    f"Departure date {departure_date} is too far in the future. "
                    f"Flights can be scheduled up to {horizon} "
                    f"({BOOKING_HORIZON_MONTHS} months ahead)."
                )

            flight = self._factory.create(system.next_flight_id(), details)

            duplicate = system.find_duplicate_flight(
                flight.flight_number, flight.route, flight.departure_date
            )
            if duplicate is not None and not allow_duplicate:
                raise DuplicateFlightException(
                    f"A flight with the same number, route and date already exists: "
                    f"{duplicate.describe()} {duplicate.route} on {duplicate.departure_date}.",
                    existing_flight=duplicate,
                )

            changes.apply(RegisterFlight(system, flight))

        logger.info(
            "Flight added",
            extra={
                "flight_id": flight.id,
                "flight_number": str(flight.flight_number),
                "departure_date": flight.departure_date.isoformat(),
                "duplicate_confirmed": duplicate is not None,
            },
        )
        return flight

