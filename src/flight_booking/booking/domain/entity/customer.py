from collections.abc import Iterable

from flight_booking.booking.domain.entity.booking import Booking
from flight_booking.shared.domain import Entity
from flight_booking.shared.domain.exception import (
    BusinessRuleViolationException,
    ResourceNotFoundException,
)


class Customer(Entity[int]):
    """顧客

    予約は追加順（＝履歴順）に保持する。キャンセルしても一覧からは外さない。
    """

    def __init__(
        self,
        id: int,
        name: str,
        phone: str,
        email: str,
        deleted: bool = False,
        bookings: Iterable[Booking] = (),
    ) -> None:
        super().__init__(id)

        self._name = name.strip()
        self._phone = phone.strip()
        self._email = email.strip()
        self._deleted = deleted
        self._bookings: list[Booking] = list(bookings)

        if not self._name:
            raise BusinessRuleViolationException("Customer name cannot be empty.")

    @property
    def name(self) -> str:
        return self._name

    @property
    def phone(self) -> str:
        return self._phone

    @property
    def email(self) -> str:
        return self._email

    @property
    def deleted(self) -> bool:
        return self._deleted

    @property
    def bookings(self) -> tuple[Booking, ...]:
        return tuple(self._bookings)

    @property
    def active_bookings(self) -> list[Booking]:
        return [booking for booking in self._bookings if booking.is_active]

    def has_email(self, email: str) -> bool:
        return self._email.casefold() == email.strip().casefold()

    def has_phone(self, phone: str) -> bool:
        return self._phone == phone.strip()

    def find_active_booking_by_outbound(self, flight_id: int) -> Booking | None:
        """往路（片道ならその便）が flight_id の有効な予約"""
        for booking in self._bookings:
            if booking.is_active and booking.outbound_flight_id == flight_id:
                return booking
        return None

    def find_active_booking_on(
        self, flight_id: int, exclude: Booking | None = None
    ) -> Booking | None:
        """往路・復路を問わず flight_id を含む有効な予約"""
        for booking in self._bookings:
            if booking is exclude or not booking.is_active:
                continue
            if booking.references_flight(flight_id):
                return booking
        return None

    def add_booking(self, booking: Booking) -> None:
        if booking.customer_id != self.id:
            raise BusinessRuleViolationException(
                f"Booking #{booking.id} belongs to customer #{booking.customer_id}, "
                f"not customer #{self.id}."
            )
        self._bookings.append(booking)

    def remove_booking(self, booking: Booking) -> None:
        """予約を一覧から外す（作成のロールバック専用）"""
        try:
            self._bookings.remove(booking)
        except ValueError:
            raise ResourceNotFoundException(
                f"Booking #{booking.id} not found for customer #{self.id}."
            ) from None

    def mark_deleted(self) -> None:
        if self._deleted:
            raise BusinessRuleViolationException(
                f"Customer #{self.id} has already been deleted."
            )
        self._deleted = True

    def restore(self) -> None:
        """論理削除を取り消す（ロールバック用）"""
        self._deleted = False
