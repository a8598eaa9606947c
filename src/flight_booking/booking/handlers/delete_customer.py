from aws_lambda_powertools.utilities.parser import event_parser
from aws_lambda_powertools.utilities.typing import LambdaContext

from flight_booking import bootstrap
from flight_booking.booking.handlers.errors import handle_errors
from flight_booking.booking.handlers.request_models import DeleteCustomerRequest
from flight_booking.booking.handlers.response_models import customer_data, to_response
from flight_booking.shared.utils import api_response, get_logger

logger = get_logger()


@logger.inject_lambda_context
@handle_errors
@event_parser(model=DeleteCustomerRequest)
def lambda_handler(event: DeleteCustomerRequest, context: LambdaContext) -> dict:
    logger.info("Received delete customer request", extra={"customer_id": event.customer_id})

    app = bootstrap.load_application()
    customer = app.delete_customer.delete(event.customer_id)
    return api_response(200, to_response(customer_data(customer)))
