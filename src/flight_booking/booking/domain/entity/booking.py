from datetime import date
from decimal import Decimal

from flight_booking.booking.domain.enum import BookingStatus
from flight_booking.booking.domain.value_object import BookingState
from flight_booking.shared.domain import Entity
from flight_booking.shared.domain.exception import BusinessRuleViolationException
from flight_booking.shared.utils import to_money

ZERO = Decimal("0.00")


class Booking(Entity[int]):
    """フライト予約

    顧客・フライトは ID で参照する。return_flight_id があれば往復予約。
    予約は削除されず、price / cancellation_fee / status / action_date のみ変化する。

    cancellation_fee は通常「請求した手数料」だが、往路のみ残る部分キャンセルでは
    「往路分として保持する金額」を表す。
    """

    def __init__(
        self,
        id: int,
        customer_id: int,
        outbound_flight_id: int,
        booking_date: date,
        price: Decimal,
        return_flight_id: int | None = None,
        cancellation_fee: Decimal = ZERO,
        status: BookingStatus = BookingStatus.BOOKED,
        action_date: date | None = None,
        partial_cancellation: bool = False,
    ) -> None:
        super().__init__(id)

        self._customer_id = customer_id
        self._outbound_flight_id = outbound_flight_id
        self._return_flight_id = return_flight_id
        self._booking_date = booking_date
        self._price = to_money(price)
        self._cancellation_fee = to_money(cancellation_fee)
        self._status = status
        self._action_date = action_date or booking_date
        self._partial_cancellation = partial_cancellation

        self._validate()

    def _validate(self) -> None:
        if self._price < 0:
            raise BusinessRuleViolationException(
                f"Booking price cannot be negative, got {self._price}"
            )
        if self._return_flight_id == self._outbound_flight_id:
            raise BusinessRuleViolationException(
                f"Return flight must differ from outbound flight #{self._outbound_flight_id}"
            )

    @property
    def customer_id(self) -> int:
        return self._customer_id

    @property
    def outbound_flight_id(self) -> int:
        return self._outbound_flight_id

    @property
    def return_flight_id(self) -> int | None:
        return self._return_flight_id

    @property
    def booking_date(self) -> date:
        return self._booking_date

    @property
    def price(self) -> Decimal:
        return self._price

    @property
    def cancellation_fee(self) -> Decimal:
        return self._cancellation_fee

    @property
    def status(self) -> BookingStatus:
        return self._status

    @property
    def action_date(self) -> date:
        return self._action_date

    @property
    def partial_cancellation(self) -> bool:
        return self._partial_cancellation

    @property
    def is_round_trip(self) -> bool:
        return self._return_flight_id is not None

    @property
    def is_cancelled(self) -> bool:
        return self._status == BookingStatus.CANCELLED

    @property
    def is_active(self) -> bool:
        return self._status.is_active

    @property
    def flight_ids(self) -> tuple[int, ...]:
        if self._return_flight_id is None:
            return (self._outbound_flight_id,)
        return (self._outbound_flight_id, self._return_flight_id)

    def references_flight(self, flight_id: int) -> bool:
        return flight_id in self.flight_ids

    def leg_of(self, flight_id: int) -> str | None:
        """flight_id がこの予約のどの区間か（"outbound" / "return" / None）"""
        if flight_id == self._outbound_flight_id:
            return "outbound"
        if flight_id == self._return_flight_id:
            return "return"
        return None

    @property
    def refund_amount(self) -> Decimal:
        """返金額（キャンセル済みのときのみ。負にはならない）"""
        if self._status != BookingStatus.CANCELLED:
            return ZERO
        return max(ZERO, self._price - self._cancellation_fee)

    @property
    def total_cost(self) -> Decimal:
        return self._price + self._cancellation_fee

    @property
    def amount_paid(self) -> Decimal:
        """ステータスに応じた支払済み金額"""
        if self._status == BookingStatus.CANCELLED:
            return self._cancellation_fee
        if self._status == BookingStatus.REBOOKED:
            return self._price + self._cancellation_fee
        return self._price

    @property
    def state(self) -> BookingState:
        return BookingState(
            price=self._price,
            cancellation_fee=self._cancellation_fee,
            status=self._status,
            action_date=self._action_date,
            partial_cancellation=self._partial_cancellation,
        )

    def restore(self, state: BookingState) -> None:
        """スナップショットの状態に戻す（ロールバック用）"""
        self._price = state.price
        self._cancellation_fee = state.cancellation_fee
        self._status = state.status
        self._action_date = state.action_date
        self._partial_cancellation = state.partial_cancellation

    def _ensure_active(self) -> None:
        if self.is_cancelled:
            raise BusinessRuleViolationException(
                f"Booking #{self.id} has already been cancelled on {self._action_date}."
            )

    def cancel(self, fee: Decimal, on: date) -> None:
        """顧客都合でキャンセルする（手数料を請求）"""
        self._ensure_active()
        self._cancellation_fee = to_money(fee)
        self._status = BookingStatus.CANCELLED
        self._action_date = on

    def supersede(self, on: date) -> None:
        """振替によって後継予約に置き換えられた

        価格・手数料は後継予約側で管理するため変更しない。
        """
        self._ensure_active()
        self._status = BookingStatus.CANCELLED
        self._action_date = on

    def cancel_for_deleted_flight(self, on: date) -> None:
        """区間（往路・片道）のフライト削除による全額返金キャンセル

        振替済み予約は振替手数料も返金するため、手数料を負の値にする。
        """
        self._ensure_active()
        if self._status == BookingStatus.REBOOKED and self._cancellation_fee > 0:
            self._cancellation_fee = -self._cancellation_fee
        else:
            self._cancellation_fee = ZERO
        self._status = BookingStatus.CANCELLED
        self._action_date = on

    def cancel_return_leg(self, retained: Decimal, on: date) -> None:
        """復路のフライト削除による部分キャンセル

        価格は据え置き、往路分 retained を手数料欄に保持する。
        返金額 = price - retained（復路の取り分）。
        """
        self._ensure_active()
        if not self.is_round_trip:
            raise BusinessRuleViolationException(
                f"Booking #{self.id} is one-way and has no return leg to cancel."
            )
        self._cancellation_fee = to_money(retained)
        self._status = BookingStatus.CANCELLED
        self._partial_cancellation = True
        self._action_date = on
