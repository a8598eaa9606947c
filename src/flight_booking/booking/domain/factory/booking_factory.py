from datetime import date
from decimal import Decimal

from flight_booking.booking.domain.entity import Booking, Customer, Flight
from flight_booking.booking.domain.enum import BookingStatus

REBOOKING_FEE = Decimal("15.00")


class BookingFactory:
    """予約エンティティのファクトリ

    - 予約日時点の各区間の動的価格を合算して価格を確定する
    - 価格は作成後、フライト削除時の按分以外では再計算しない
    """

    def create(
        self,
        booking_id: int,
        customer: Customer,
        outbound: Flight,
        booking_date: date,
        return_flight: Flight | None = None,
    ) -> Booking:
        """新規予約（BOOKED、手数料 0）を生成する

        価格は搭乗者を追加する前の搭乗率で計算する。
        """
        price = outbound.current_price(booking_date)
        if return_flight is not None:
            price += return_flight.current_price(booking_date)

        return Booking(
            id=booking_id,
            customer_id=customer.id,
            outbound_flight_id=outbound.id,
            return_flight_id=return_flight.id if return_flight is not None else None,
            booking_date=booking_date,
            price=price,
            status=BookingStatus.BOOKED,
        )

    def create_rebooking(
        self,
        booking_id: int,
        customer: Customer,
        flight: Flight,
        booking_date: date,
    ) -> Booking:
        """振替先の片道予約（REBOOKED、振替手数料 15.00）を生成する"""
        return Booking(
            id=booking_id,
            customer_id=customer.id,
            outbound_flight_id=flight.id,
            booking_date=booking_date,
            price=flight.current_price(booking_date),
            cancellation_fee=REBOOKING_FEE,
            status=BookingStatus.REBOOKED,
            action_date=booking_date,
        )
