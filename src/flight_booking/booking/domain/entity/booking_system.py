from collections.abc import Iterable, Iterator
from datetime import date

from flight_booking.booking.domain.entity.booking import Booking
from flight_booking.booking.domain.entity.customer import Customer
from flight_booking.booking.domain.entity.flight import Flight
from flight_booking.booking.domain.value_object import FlightNumber, Route
from flight_booking.shared.domain.exception import DuplicateResourceException


class BookingSystem:
    """フライト・顧客のレジストリ（ID → エンティティ）

    - find_* は見つからなければ None を返す（例外にするかは呼び出し側が決める）
    - ID は一意。電話番号・メールは未削除の顧客の間で一意
    """

    def __init__(
        self,
        flights: Iterable[Flight] = (),
        customers: Iterable[Customer] = (),
        next_booking_id: int = 1,
    ) -> None:
        self._flights: dict[int, Flight] = {}
        self._customers: dict[int, Customer] = {}
        self._next_booking_id = next_booking_id

        # 保存済みデータの復元では ID の重複のみ検査する
        for flight in flights:
            self._register_flight(flight)
        for customer in customers:
            self._register_customer(customer)

        highest = max((b.id for b in self.bookings()), default=0)
        self._next_booking_id = max(self._next_booking_id, highest + 1)

    @property
    def flights(self) -> list[Flight]:
        return [self._flights[k] for k in sorted(self._flights)]

    @property
    def customers(self) -> list[Customer]:
        return [self._customers[k] for k in sorted(self._customers)]

    @property
    def next_booking_id(self) -> int:
        return self._next_booking_id

    def find_flight(self, flight_id: int) -> Flight | None:
        return self._flights.get(flight_id)

    def find_customer(self, customer_id: int) -> Customer | None:
        return self._customers.get(customer_id)

    def bookings(self) -> Iterator[Booking]:
        for customer in self.customers:
            yield from customer.bookings

    def active_bookings_on(self, flight_id: int) -> list[Booking]:
        """flight_id を往路・復路のいずれかに含む有効な予約（全顧客）"""
        return [
            booking
            for booking in self.bookings()
            if booking.is_active and booking.references_flight(flight_id)
        ]

    def next_flight_id(self) -> int:
        return max(self._flights, default=0) + 1

    def next_customer_id(self) -> int:
        return max(self._customers, default=0) + 1

    def allocate_booking_id(self) -> int:
        booking_id = self._next_booking_id
        self._next_booking_id += 1
        return booking_id

    def release_booking_id(self, booking_id: int) -> None:
        """最後に採番した ID を返却する（採番のロールバック専用）"""
        if booking_id + 1 == self._next_booking_id:
            self._next_booking_id = booking_id

    def find_duplicate_flight(
        self, flight_number: FlightNumber, route: Route, departure_date: date
    ) -> Flight | None:
        """便名・路線・出発日が一致する未削除のフライト"""
        for flight in self.flights:
            if (
                not flight.deleted
                and flight.flight_number == flight_number
                and flight.route.same_as(route)
                and flight.departure_date == departure_date
            ):
                return flight
        return None

    def add_flight(self, flight: Flight) -> None:
        self._register_flight(flight)

    def add_customer(self, customer: Customer) -> None:
        for existing in self._customers.values():
            if existing.deleted:
                continue
            if existing.has_phone(customer.phone):
                raise DuplicateResourceException(
                    f"A customer with phone number '{customer.phone}' already exists "
                    f"(customer #{existing.id})."
                )
            if existing.has_email(customer.email):
                raise DuplicateResourceException(
                    f"A customer with email '{customer.email}' already exists "
                    f"(customer #{existing.id})."
                )
        self._register_customer(customer)

    def remove_flight(self, flight_id: int) -> None:
        """登録を取り消す（追加のロールバック専用。通常の削除は論理削除）"""
        self._flights.pop(flight_id, None)

    def remove_customer(self, customer_id: int) -> None:
        """登録を取り消す（追加のロールバック専用。通常の削除は論理削除）"""
        self._customers.pop(customer_id, None)

    def _register_flight(self, flight: Flight) -> None:
        if flight.id in self._flights:
            raise DuplicateResourceException(f"Duplicate flight ID: {flight.id}")
        self._flights[flight.id] = flight

    def _register_customer(self, customer: Customer) -> None:
        if customer.id in self._customers:
            raise DuplicateResourceException(f"Duplicate customer ID: {customer.id}")
        self._customers[customer.id] = customer
