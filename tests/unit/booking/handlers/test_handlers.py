import json
from dataclasses import dataclass
from datetime import timedelta

import pytest

from flight_booking import bootstrap
from flight_booking.booking.handlers import add_flight, book, cancel, delete_flight


@dataclass
class LambdaContext:
    function_name: str = "test"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:eu-west-1:123456789012:function:test"
    aws_request_id: str = "da658bd3-2d6f-4e7b-8ec2-937234644fdc"


@pytest.fixture
def lambda_context():
    return LambdaContext()


@pytest.fixture
def app(monkeypatch, mock_repository, system, clock):
    """ハンドラが使うアプリケーションをモックリポジトリで差し替える"""
    mock_repository.load.return_value = system
    application = bootstrap.build_application(mock_repository, clock)
    monkeypatch.setattr(bootstrap, "load_application", lambda: application)
    return application


class TestHandlers:
    """Lambda ハンドラのテスト"""

    def test_book_returns_created_booking(self, app, lambda_context):
        response = book.lambda_handler(
            {"customer_id": 1, "outbound_flight_id": 1, "return_flight_id": 2},
            lambda_context,
        )

        assert response["statusCode"] == 201
        body = json.loads(response["body"])
        assert body["status"] == "success"
        assert body["data"]["price"] == "200.00"
        assert body["data"]["status"] == "BOOKED"

    def test_invalid_request_returns_400(self, app, lambda_context):
        response = book.lambda_handler({"customer_id": "abc"}, lambda_context)

        assert response["statusCode"] == 400
        assert json.loads(response["body"])["error_code"] == "INVALID_REQUEST"

    def test_not_found_returns_404(self, app, lambda_context):
        response = cancel.lambda_handler(
            {"customer_id": 1, "outbound_flight_id": 1}, lambda_context
        )

        assert response["statusCode"] == 404

    def test_business_rule_violation_returns_422(self, app, lambda_context, system):
        system.find_customer(1).mark_deleted()

        response = book.lambda_handler(
            {"customer_id": 1, "outbound_flight_id": 1}, lambda_context
        )

        assert response["statusCode"] == 422
        assert json.loads(response["body"])["error_code"] == "BUSINESS_RULE_VIOLATION"

    def test_duplicate_flight_returns_409(self, app, lambda_context, today):
        event = {
            "flight_number": "BA123",
            "origin": "London",
            "destination": "Paris",
            "departure_date": (today + timedelta(days=40)).isoformat(),
        }

        response = add_flight.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 409

    def test_persistence_failure_returns_503(self, app, lambda_context, mock_repository):
        mock_repository.save.side_effect = OSError("disk full")

        response = book.lambda_handler(
            {"customer_id": 1, "outbound_flight_id": 1}, lambda_context
        )

        assert response["statusCode"] == 503
        assert json.loads(response["body"])["error_code"] == "NOT_SAVED"

    def test_delete_flight_reports_cancellations(self, app, lambda_context):
        book.lambda_handler({"customer_id": 2, "outbound_flight_id": 1}, lambda_context)

        response = delete_flight.lambda_handler({"flight_id": 1}, lambda_context)

        assert response["statusCode"] == 200
        data = json.loads(response["body"])["data"]
        assert data["total_refund"] == "100.00"
        assert data["cancellations"][0]["kind"] == "ONE_WAY"
