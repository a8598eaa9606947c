from flight_booking.booking.applications.unit_of_work import RegisterCustomer, UnitOfWork
from flight_booking.booking.domain.entity import Customer
from flight_booking.shared.utils import get_logger

logger = get_logger()


class AddCustomerService:
    """顧客登録のユースケース

    電話番号・メール（大文字小文字を区別しない）は未削除の顧客の間で一意。
    """

    def __init__(self, unit_of_work: UnitOfWork) -> None:
        self._uow = unit_of_work

    def add(self, name: str, phone: str, email: str) -> Customer:
        with self._uow.transaction("customer") as changes:
            system = self._uow.system
            customer = Customer(
                id=system.next_customer_id(),
                name=name,
                phone=phone,
                email=email,
            )
            changes.apply(RegisterCustomer(system, customer))

        logger.info("Customer added", extra={"customer_id": customer.id})
        return customer
