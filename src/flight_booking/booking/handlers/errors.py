import functools
from collections.abc import Callable

from pydantic import ValidationError

from flight_booking.booking.handlers.response_models import ErrorResponse
from flight_booking.shared.domain.exception import (
    BusinessRuleViolationException,
    DuplicateResourceException,
    PersistenceFailureException,
    ResourceNotFoundException,
)
from flight_booking.shared.utils import api_response, get_logger

logger = get_logger()


def error_response(status_code: int, error_code: str, message: str) -> dict:
    return api_response(
        status_code, ErrorResponse(error_code=error_code, message=message)
    )


def handle_errors(handler: Callable[..., dict]) -> Callable[..., dict]:
    """ドメイン例外を HTTP 形式のレスポンスへ変換する

    想定外の例外はそのまま送出する（Lambda のエラーとして扱う）。
    """

    @functools.wraps(handler)
    def wrapper(event, context) -> dict:
        try:
            return handler(event, context)
        except ValidationError as e:
            logger.warning("Invalid request", extra={"errors": e.errors()})
            return error_response(400, "INVALID_REQUEST", str(e))
        except ResourceNotFoundException as e:
            logger.info("Resource not found", extra={"reason": str(e)})
            return error_response(404, "NOT_FOUND", str(e))
        except DuplicateResourceException as e:
            logger.info("Duplicate resource", extra={"reason": str(e)})
            return error_response(409, "DUPLICATE", str(e))
        except BusinessRuleViolationException as e:
            logger.info("Business rule violation", extra={"reason": str(e)})
            return error_response(422, "BUSINESS_RULE_VIOLATION", str(e))
        except PersistenceFailureException as e:
            return error_response(503, "NOT_SAVED", str(e))
        except ValueError as e:
            logger.warning("Invalid value", extra={"reason": str(e)})
            return error_response(400, "INVALID_REQUEST", str(e))

    return wrapper
