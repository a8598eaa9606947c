from .booking_system_repository import BookingSystemRepository

__all__ = ["BookingSystemRepository"]
