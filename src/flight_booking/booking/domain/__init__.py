from .entity import Booking, BookingSystem, Customer, Flight
from .enum import BookingStatus, CancellationKind
from .value_object import BookingState, FlightNumber, Route

__all__ = [
    "Booking",
    "BookingSystem",
    "Customer",
    "Flight",
    "BookingStatus",
    "CancellationKind",
    "BookingState",
    "FlightNumber",
    "Route",
]
