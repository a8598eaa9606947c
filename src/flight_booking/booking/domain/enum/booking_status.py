from enum import Enum


class BookingStatus(str, Enum):
    """予約ステータス

    BOOKED と REBOOKED はどちらも有効（未キャンセル）な予約を表す。
    REBOOKED は振替で作られた後継予約であり、BOOKED の別名ではない
    （振替手数料を cancellation_fee に保持する）。
    """

    BOOKED = "BOOKED"
    CANCELLED = "CANCELLED"
    REBOOKED = "REBOOKED"

    @property
    def is_active(self) -> bool:
        return self is not BookingStatus.CANCELLED
