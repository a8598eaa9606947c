from __future__ import annotations

from pydantic import BaseModel

from flight_booking.booking.applications import FlightDeletionResult
from flight_booking.booking.domain.entity import Booking, Customer, Flight


class FlightData(BaseModel):
    """フライトのレスポンスモデル"""

    flight_id: int
    flight_number: str
    origin: str
    destination: str
    departure_date: str
    capacity: int
    available_seats: int
    base_price: str
    deleted: bool


class CustomerData(BaseModel):
    customer_id: int
    name: str
    phone: str
    email: str
    deleted: bool


class BookingData(BaseModel):
    """予約データのレスポンスモデル"""

    booking_id: int
    customer_id: int
    outbound_flight_id: int
    return_flight_id: int | None
    booking_date: str
    action_date: str
    price: str
    cancellation_fee: str
    refund_amount: str
    status: str


class CancellationData(BaseModel):
    customer_id: int
    booking_id: int
    kind: str
    refund: str
    retained: str


class FlightDeletionData(BaseModel):
    flight_id: int
    total_refund: str
    cancellations: list[CancellationData]


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: FlightData | CustomerData | BookingData | FlightDeletionData


class ErrorResponse(BaseModel):
    """失敗レスポンスモデル"""

    status: str = "error"
    error_code: str
    message: str


def flight_data(flight: Flight) -> FlightData:
    return FlightData(
        flight_id=flight.id,
        flight_number=str(flight.flight_number),
        origin=flight.origin,
        destination=flight.destination,
        departure_date=flight.departure_date.isoformat(),
        capacity=flight.capacity,
        available_seats=flight.available_seats,
        base_price=str(flight.base_price),
        deleted=flight.deleted,
    )


def customer_data(customer: Customer) -> CustomerData:
    return CustomerData(
        customer_id=customer.id,
        name=customer.name,
        phone=customer.phone,
        email=customer.email,
        deleted=customer.deleted,
    )


def booking_data(booking: Booking) -> BookingData:
    return BookingData(
        booking_id=booking.id,
        customer_id=booking.customer_id,
        outbound_flight_id=booking.outbound_flight_id,
        return_flight_id=booking.return_flight_id,
        booking_date=booking.booking_date.isoformat(),
        action_date=booking.action_date.isoformat(),
        price=str(booking.price),
        cancellation_fee=str(booking.cancellation_fee),
        refund_amount=str(booking.refund_amount),
        status=booking.status.value,
    )


def deletion_data(result: FlightDeletionResult) -> FlightDeletionData:
    return FlightDeletionData(
        flight_id=result.flight_id,
        total_refund=str(result.total_refund),
        cancellations=[
            CancellationData(
                customer_id=c.customer_id,
                booking_id=c.booking_id,
                kind=c.kind.value,
                refund=str(c.refund),
                retained=str(c.retained),
            )
            for c in result.cancellations
        ],
    )


def to_response(
    data: FlightData | CustomerData | BookingData | FlightDeletionData,
) -> SuccessResponse:
    return SuccessResponse(data=data)
