from aws_lambda_powertools.utilities.parser import event_parser
from aws_lambda_powertools.utilities.typing import LambdaContext

from flight_booking import bootstrap
from flight_booking.booking.handlers.errors import handle_errors
from flight_booking.booking.handlers.request_models import CancelBookingRequest
from flight_booking.booking.handlers.response_models import booking_data, to_response
from flight_booking.shared.utils import api_response, get_logger

logger = get_logger()


@logger.inject_lambda_context
@handle_errors
@event_parser(model=CancelBookingRequest)
def lambda_handler(event: CancelBookingRequest, context: LambdaContext) -> dict:
    """予約キャンセル Lambda ハンドラ"""
    logger.info("Received cancel booking request")

    app = bootstrap.load_application()
    booking = app.cancel_booking.cancel(
        customer_id=event.customer_id,
        outbound_flight_id=event.outbound_flight_id,
        return_flight_id=event.return_flight_id,
    )
    return api_response(200, to_response(booking_data(booking)))
