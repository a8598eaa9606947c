from aws_lambda_powertools.utilities.parser import event_parser
from aws_lambda_powertools.utilities.typing import LambdaContext

from flight_booking import bootstrap
from flight_booking.booking.handlers.errors import handle_errors
from flight_booking.booking.handlers.request_models import AddCustomerRequest
from flight_booking.booking.handlers.response_models import customer_data, to_response
from flight_booking.shared.utils import api_response, get_logger

logger = get_logger()


@logger.inject_lambda_context
@handle_errors
@event_parser(model=AddCustomerRequest)
def lambda_handler(event: AddCustomerRequest, context: LambdaContext) -> dict:
    """顧客登録 Lambda ハンドラ"""
    logger.info("Received add customer request")

    app = bootstrap.load_application()
    customer = app.add_customer.add(
        name=event.name, phone=event.phone, email=event.email
    )
    return api_response(201, to_response(customer_data(customer)))
