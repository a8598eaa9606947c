from .booking import Booking
from .booking_system import BookingSystem
from .customer import Customer
from .flight import Flight

__all__ = ["Booking", "BookingSystem", "Customer", "Flight"]
