from flight_booking.booking.applications.lookups import require_customer
from flight_booking.booking.applications.unit_of_work import (
    MarkCustomerDeleted,
    UnitOfWork,
)
from flight_booking.booking.domain.entity import Customer
from flight_booking.shared.utils import get_logger

logger = get_logger()


class DeleteCustomerService:
    """顧客の論理削除

    既存の予約には手を付けない（フライト削除の連鎖キャンセルの対象にも残る）。
    """

    def __init__(self, unit_of_work: UnitOfWork) -> None:
        self._uow = unit_of_work

    def delete(self, customer_id: int) -> Customer:
        with self._uow.transaction("customer deletion") as changes:
            customer = require_customer(self._uow.system, customer_id)
            changes.apply(MarkCustomerDeleted(customer))

        logger.info("Customer deleted", extra={"customer_id": customer_id})
        return customer
