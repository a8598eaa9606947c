from aws_lambda_powertools.utilities.parser import event_parser
from aws_lambda_powertools.utilities.typing import LambdaContext

from flight_booking import bootstrap
from flight_booking.booking.handlers.errors import handle_errors
from flight_booking.booking.handlers.request_models import BookFlightRequest
from flight_booking.booking.handlers.response_models import booking_data, to_response
from flight_booking.shared.utils import api_response, get_logger

logger = get_logger()


@logger.inject_lambda_context
@handle_errors
@event_parser(model=BookFlightRequest)
def lambda_handler(event: BookFlightRequest, context: LambdaContext) -> dict:
    """フライト予約 Lambda ハンドラ

    return_flight_id を指定した場合は往復予約になる。
    """
    logger.info("Received book flight request")

    app = bootstrap.load_application()
    booking = app.create_booking.book(
        customer_id=event.customer_id,
        outbound_flight_id=event.outbound_flight_id,
        return_flight_id=event.return_flight_id,
    )
    return api_response(201, to_response(booking_data(booking)))
