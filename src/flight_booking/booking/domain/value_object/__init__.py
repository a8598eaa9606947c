from .booking_state import BookingState
from .flight_number import FlightNumber
from .route import Route

__all__ = ["BookingState", "FlightNumber", "Route"]
