"""変更の記録・永続化・ロールバック

各ユースケースはメモリ上のモデルを Change 経由で変更し、最後にモデル全体を
リポジトリへ保存する。途中の例外・保存失敗のどちらでも、適用済みの Change を
逆順に取り消してから呼び出し元へ伝える。
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import TypeVar

from flight_booking.booking.domain.entity import (
    Booking,
    BookingSystem,
    Customer,
    Flight,
)
from flight_booking.booking.domain.repository import BookingSystemRepository
from flight_booking.booking.domain.value_object import BookingState
from flight_booking.shared.domain.exception import PersistenceFailureException
from flight_booking.shared.utils import get_logger

logger = get_logger()

C = TypeVar("C", bound="Change")


class Change(ABC):
    """取り消し可能な 1 つの変更"""

    @abstractmethod
    def apply(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def revert(self) -> None:
        raise NotImplementedError


@dataclass
class AddPassenger(Change):
    flight: Flight
    customer_id: int
    _added: bool = field(default=False, init=False)

    def apply(self) -> None:
        self._added = self.flight.add_passenger(self.customer_id)

    def revert(self) -> None:
        if self._added:
            self.flight.remove_passenger(self.customer_id)


@dataclass
class RemovePassenger(Change):
    flight: Flight
    customer_id: int
    _removed: bool = field(default=False, init=False)

    def apply(self) -> None:
        self._removed = self.flight.remove_passenger(self.customer_id)

    def revert(self) -> None:
        if self._removed:
            self.flight.add_passenger(self.customer_id)


@dataclass
class AppendBooking(Change):
    customer: Customer
    booking: Booking

    def apply(self) -> None:
        self.customer.add_booking(self.booking)

    def revert(self) -> None:
        self.customer.remove_booking(self.booking)


@dataclass
class TransitionBooking(Change):
    """予約の状態遷移（適用前の状態を保持して戻せるようにする）"""

    booking: Booking
    transition: Callable[[Booking], None]
    before: BookingState | None = field(default=None, init=False)

    def apply(self) -> None:
        self.before = self.booking.state
        self.transition(self.booking)

    def revert(self) -> None:
        if self.before is not None:
            self.booking.restore(self.before)


@dataclass
class MarkFlightDeleted(Change):
    flight: Flight

    def apply(self) -> None:
        self.flight.mark_deleted()

    def revert(self) -> None:
        self.flight.restore()


@dataclass
class MarkCustomerDeleted(Change):
    customer: Customer

    def apply(self) -> None:
        self.customer.mark_deleted()

    def revert(self) -> None:
        self.customer.restore()


@dataclass
class AllocateBookingId(Change):
    """予約 ID の採番（取り消すと採番前の値に戻す）"""

    system: BookingSystem
    booking_id: int | None = field(default=None, init=False)

    def apply(self) -> None:
        self.booking_id = self.system.allocate_booking_id()

    def revert(self) -> None:
        if self.booking_id is not None:
            self.system.release_booking_id(self.booking_id)


@dataclass
class RegisterFlight(Change):
    system: BookingSystem
    flight: Flight

    def apply(self) -> None:
        self.system.add_flight(self.flight)

    def revert(self) -> None:
        self.system.remove_flight(self.flight.id)


@dataclass
class RegisterCustomer(Change):
    system: BookingSystem
    customer: Customer

    def apply(self) -> None:
        self.system.add_customer(self.customer)

    def revert(self) -> None:
        self.system.remove_customer(self.customer.id)


class ChangeSet:
    """1 操作分の適用済み変更（取り消しリスト）"""

    def __init__(self) -> None:
        self._applied: list[Change] = []

    def __len__(self) -> int:
        return len(self._applied)

    def apply(self, change: C) -> C:
        """変更を適用して記録する（apply が失敗した変更は記録しない）"""
        change.apply()
        self._applied.append(change)
        return change

    def revert(self) -> None:
        while self._applied:
            self._applied.pop().revert()


class UnitOfWork:
    """予約システムへの書き込みを 1 件ずつ直列に実行する

    - transaction の間はロックを保持する（検証・変更・保存・ロールバックまで）
    - 保存に失敗したら変更を巻き戻し PersistenceFailureException を送出する
    """

    def __init__(
        self, system: BookingSystem, repository: BookingSystemRepository
    ) -> None:
        self._system = system
        self._repository = repository
        self._lock = threading.RLock()

    @property
    def system(self) -> BookingSystem:
        return self._system

    @contextmanager
    def transaction(self, operation: str) -> Iterator[ChangeSet]:
        with self._lock:
            changes = ChangeSet()
            try:
                yield changes
            except Exception:
                if changes:
                    logger.warning(
                        "Rolling back in-memory changes",
                        extra={"operation": operation, "changes": len(changes)},
                    )
                changes.revert()
                raise

            try:
                self._repository.save(self._system)
            except Exception as e:
                logger.exception(
                    "Failed to persist booking system",
                    extra={"operation": operation, "changes": len(changes)},
                )
                changes.revert()
                raise PersistenceFailureException(
                    f"Error saving {operation}. Changes have been rolled back: {e}"
                ) from e
