from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from flight_booking.booking.domain.service.pricing import calculate_dynamic_price
from flight_booking.booking.domain.value_object import FlightNumber, Route
from flight_booking.shared.domain import Entity
from flight_booking.shared.domain.exception import (
    BusinessRuleViolationException,
    CapacityExceededException,
)
from flight_booking.shared.utils import to_money

DEFAULT_CAPACITY = 100
DEFAULT_BASE_PRICE = Decimal("150.00")


class Flight(Entity[int]):
    """フライト（1 区間）

    搭乗者は顧客 ID の集合で保持し、件数は常に 0 以上 capacity 以下。
    deleted は論理削除フラグで、フライト自体は物理削除しない。
    """

    def __init__(
        self,
        id: int,
        flight_number: FlightNumber,
        route: Route,
        departure_date: date,
        capacity: int = DEFAULT_CAPACITY,
        base_price: Decimal = DEFAULT_BASE_PRICE,
        deleted: bool = False,
        passengers: Iterable[int] = (),
    ) -> None:
        super().__init__(id)

        self._flight_number = flight_number
        self._route = route
        self._departure_date = departure_date
        self._capacity = capacity
        self._base_price = to_money(base_price)
        self._deleted = deleted
        self._passengers: set[int] = set(passengers)

        self._validate()

    def _validate(self) -> None:
        if self._capacity < 0:
            raise BusinessRuleViolationException(
                f"Flight capacity cannot be negative, got {self._capacity}"
            )
        if self._base_price < 0:
            raise BusinessRuleViolationException(
                f"Flight base price cannot be negative, got {self._base_price}"
            )
        if len(self._passengers) > self._capacity:
            raise CapacityExceededException(
                f"Flight #{self.id} has {len(self._passengers)} passengers "
                f"but only {self._capacity} seats"
            )

    @property
    def flight_number(self) -> FlightNumber:
        return self._flight_number

    @property
    def route(self) -> Route:
        return self._route

    @property
    def origin(self) -> str:
        return self._route.origin

    @property
    def destination(self) -> str:
        return self._route.destination

    @property
    def departure_date(self) -> date:
        return self._departure_date

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def base_price(self) -> Decimal:
        return self._base_price

    @property
    def deleted(self) -> bool:
        return self._deleted

    @property
    def passengers(self) -> frozenset[int]:
        return frozenset(self._passengers)

    @property
    def occupied(self) -> int:
        return len(self._passengers)

    @property
    def available_seats(self) -> int:
        return self._capacity - len(self._passengers)

    @property
    def is_full(self) -> bool:
        return len(self._passengers) >= self._capacity

    def describe(self) -> str:
        return f"Flight #{self.id} ({self._flight_number})"

    def has_departed(self, today: date) -> bool:
        """出発日が今日より前なら出発済み（当日はまだ出発前とみなす）"""
        return self._departure_date < today

    def current_price(self, reference_date: date) -> Decimal:
        """基準日時点の搭乗率で計算した 1 区間の価格"""
        return calculate_dynamic_price(
            base_price=self._base_price,
            departure_date=self._departure_date,
            reference_date=reference_date,
            occupied=len(self._passengers),
            capacity=self._capacity,
        )

    def ensure_seat_available(self) -> None:
        if self.is_full:
            raise CapacityExceededException(
                f"{self.describe()} is at full capacity "
                f"({len(self._passengers)}/{self._capacity} seats booked). "
                "Cannot add more passengers."
            )

    def add_passenger(self, customer_id: int) -> bool:
        """搭乗者を追加する

        Returns:
            bool: 新たに追加した場合 True（既に搭乗者なら False）
        """
        if customer_id in self._passengers:
            return False
        self.ensure_seat_available()
        self._passengers.add(customer_id)
        return True

    def remove_passenger(self, customer_id: int) -> bool:
        """搭乗者を外す

        Returns:
            bool: 実際に外した場合 True
        """
        if customer_id not in self._passengers:
            return False
        self._passengers.remove(customer_id)
        return True

    def mark_deleted(self) -> None:
        if self._deleted:
            raise BusinessRuleViolationException(
                f"{self.describe()} has already been deleted."
            )
        self._deleted = True

    def restore(self) -> None:
        """論理削除を取り消す（ロールバック用）"""
        self._deleted = False
