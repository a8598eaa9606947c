from aws_lambda_powertools.utilities.parser import event_parser
from aws_lambda_powertools.utilities.typing import LambdaContext

from flight_booking import bootstrap
from flight_booking.booking.handlers.errors import handle_errors
from flight_booking.booking.handlers.request_models import DeleteFlightRequest
from flight_booking.booking.handlers.response_models import deletion_data, to_response
from flight_booking.shared.utils import api_response, get_logger

logger = get_logger()


@logger.inject_lambda_context
@handle_errors
@event_parser(model=DeleteFlightRequest)
def lambda_handler(event: DeleteFlightRequest, context: LambdaContext) -> dict:
    """フライト削除 Lambda ハンドラ

    影響を受けた予約と返金額の一覧を返す。
    """
    logger.info("Received delete flight request", extra={"flight_id": event.flight_id})

    app = bootstrap.load_application()
    result = app.delete_flight.delete(event.flight_id)
    return api_response(200, to_response(deletion_data(result)))
