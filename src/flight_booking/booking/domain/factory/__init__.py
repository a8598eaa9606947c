from .booking_factory import REBOOKING_FEE, BookingFactory
from .flight_factory import FlightDetails, FlightFactory

__all__ = ["REBOOKING_FEE", "BookingFactory", "FlightDetails", "FlightFactory"]
