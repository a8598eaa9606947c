from aws_lambda_powertools.utilities.parser import event_parser
from aws_lambda_powertools.utilities.typing import LambdaContext

from flight_booking import bootstrap
from flight_booking.booking.domain.factory import FlightDetails
from flight_booking.booking.handlers.errors import handle_errors
from flight_booking.booking.handlers.request_models import AddFlightRequest
from flight_booking.booking.handlers.response_models import flight_data, to_response
from flight_booking.shared.utils import api_response, get_logger

logger = get_logger()


@logger.inject_lambda_context
@handle_errors
@event_parser(model=AddFlightRequest)
def lambda_handler(event: AddFlightRequest, context: LambdaContext) -> dict:
    """フライト登録 Lambda ハンドラ"""
    logger.info("Received add flight request")

    details: FlightDetails = {
        "flight_number": event.flight_number,
        "origin": event.origin,
        "destination": event.destination,
        "departure_date": event.departure_date,
        "capacity": event.capacity,
        "base_price": event.base_price,
    }
    app = bootstrap.load_application()
    flight = app.add_flight.add(details, allow_duplicate=event.allow_duplicate)
    return api_response(201, to_response(flight_data(flight)))
