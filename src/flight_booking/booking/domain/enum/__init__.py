from .booking_status import BookingStatus
from .cancellation_kind import CancellationKind

__all__ = ["BookingStatus", "CancellationKind"]
