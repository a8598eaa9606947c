from flight_booking import bootstrap
from flight_booking.booking.infrastructure import (
    DynamoDBBookingSystemRepository,
    FileBookingSystemRepository,
)


class TestBuildApplication:
    """アプリケーション組み立てのテスト"""

    def test_starts_empty_when_nothing_stored(self, mock_repository, clock):
        app = bootstrap.build_application(mock_repository, clock)

        assert app.system.flights == []
        mock_repository.load.assert_called_once()

    def test_services_share_one_unit_of_work(self, mock_repository, system, clock):
        mock_repository.load.return_value = system

        app = bootstrap.build_application(mock_repository, clock)
        booking = app.create_booking.book(customer_id=1, outbound_flight_id=1)
        app.cancel_booking.cancel(customer_id=1, outbound_flight_id=1)

        assert app.system is system
        assert booking.is_cancelled
        assert mock_repository.save.call_count == 2


class TestDefaultRepository:
    def test_uses_dynamodb_when_table_configured(self, monkeypatch):
        monkeypatch.setenv("TABLE_NAME", "bookings")
        bootstrap.default_repository.cache_clear()

        try:
            repository = bootstrap.default_repository()
        finally:
            bootstrap.default_repository.cache_clear()

        assert isinstance(repository, DynamoDBBookingSystemRepository)
        assert repository.table_name == "bookings"

    def test_uses_file_otherwise(self, monkeypatch):
        monkeypatch.delenv("TABLE_NAME", raising=False)
        bootstrap.default_repository.cache_clear()

        try:
            repository = bootstrap.default_repository()
        finally:
            bootstrap.default_repository.cache_clear()

        assert isinstance(repository, FileBookingSystemRepository)
