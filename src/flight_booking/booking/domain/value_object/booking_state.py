from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from flight_booking.booking.domain.enum import BookingStatus


@dataclass(frozen=True)
class BookingState:
    """予約の可変部分のスナップショット

    ロールバック時にこの状態へ戻す。
    """

    price: Decimal
    cancellation_fee: Decimal
    status: BookingStatus
    action_date: date
    partial_cancellation: bool
