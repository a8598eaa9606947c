from aws_lambda_powertools.utilities.parser import event_parser
from aws_lambda_powertools.utilities.typing import LambdaContext

from flight_booking import bootstrap
from flight_booking.booking.handlers.errors import handle_errors
from flight_booking.booking.handlers.request_models import RebookRequest
from flight_booking.booking.handlers.response_models import booking_data, to_response
from flight_booking.shared.utils import api_response, get_logger

logger = get_logger()


@logger.inject_lambda_context
@handle_errors
@event_parser(model=RebookRequest)
def lambda_handler(event: RebookRequest, context: LambdaContext) -> dict:
    """振替 Lambda ハンドラ（後継予約を返す）"""
    logger.info("Received rebook request")

    app = bootstrap.load_application()
    booking = app.rebook_booking.rebook(
        customer_id=event.customer_id,
        old_flight_id=event.old_flight_id,
        new_flight_id=event.new_flight_id,
    )
    return api_response(201, to_response(booking_data(booking)))
