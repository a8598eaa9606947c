from flight_booking.booking.domain.entity import BookingSystem, Customer, Flight
from flight_booking.shared.domain.exception import ResourceNotFoundException


def require_customer(system: BookingSystem, customer_id: int) -> Customer:
    customer = system.find_customer(customer_id)
    if customer is None:
        raise ResourceNotFoundException(f"Customer with ID {customer_id} not found.")
    return customer


def require_flight(system: BookingSystem, flight_id: int, label: str = "Flight") -> Flight:
    flight = system.find_flight(flight_id)
    if flight is None:
        raise ResourceNotFoundException(f"{label} with ID {flight_id} not found.")
    return flight
