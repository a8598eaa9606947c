import pytest

from flight_booking.booking.applications import (
    AddCustomerService,
    CreateBookingService,
    DeleteCustomerService,
)
from flight_booking.shared.domain.exception import (
    BusinessRuleViolationException,
    DuplicateResourceException,
    PersistenceFailureException,
    ResourceNotFoundException,
)


class TestAddCustomerService:
    """AddCustomerService のテスト"""

    @pytest.fixture
    def service(self, uow):
        return AddCustomerService(unit_of_work=uow)

    def test_add_customer(self, service, system, mock_repository):
        customer = service.add(name="Grace Hopper", phone="0800", email="grace@example.com")

        assert customer.id == 3
        assert system.find_customer(3) is customer
        mock_repository.save.assert_called_once_with(system)

    def test_duplicate_email_raises_error(self, service):
        with pytest.raises(DuplicateResourceException, match="email"):
            service.add(name="Grace", phone="0800", email="Customer1@Example.com")

    def test_blank_name_raises_error(self, service):
        with pytest.raises(BusinessRuleViolationException):
            service.add(name=" ", phone="0800", email="grace@example.com")

    def test_save_failure_unregisters_customer(self, service, system, mock_repository):
        mock_repository.save.side_effect = OSError("disk full")

        with pytest.raises(PersistenceFailureException, match="Error saving customer"):
            service.add(name="Grace", phone="0800", email="grace@example.com")

        assert system.find_customer(3) is None


class TestDeleteCustomerService:
    """DeleteCustomerService のテスト"""

    @pytest.fixture
    def service(self, uow):
        return DeleteCustomerService(unit_of_work=uow)

    def test_delete_customer_keeps_bookings(self, service, uow, clock, system):
        booking = CreateBookingService(unit_of_work=uow, clock=clock).book(
            customer_id=1, outbound_flight_id=1
        )

        customer = service.delete(1)

        assert customer.deleted
        assert customer.bookings == (booking,)
        assert booking.is_active

    def test_unknown_customer_raises_not_found(self, service):
        with pytest.raises(ResourceNotFoundException):
            service.delete(9)

    def test_already_deleted_customer_raises_error(self, service):
        service.delete(1)

        with pytest.raises(BusinessRuleViolationException, match="already been deleted"):
            service.delete(1)

    def test_save_failure_restores_customer(self, service, system, mock_repository):
        mock_repository.save.side_effect = OSError("disk full")

        with pytest.raises(PersistenceFailureException):
            service.delete(1)

        assert not system.find_customer(1).deleted
