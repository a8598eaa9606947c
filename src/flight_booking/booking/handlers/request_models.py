from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from flight_booking.shared.utils import to_decimal


class AddFlightRequest(BaseModel):
    """フライト登録リクエストスキーマ"""

    flight_number: str = Field(
        ...,
        min_length=2,
        max_length=10,
        description="便名",
        examples=["BA123", "U21234"],
    )
    origin: str = Field(..., min_length=1, description="出発地", examples=["London"])
    destination: str = Field(
        ..., min_length=1, description="到着地", examples=["Paris"]
    )
    departure_date: date = Field(
        ..., description="出発日（ISO 8601形式）", examples=["2026-11-01"]
    )
    capacity: int = Field(default=100, ge=0, description="座席数")
    base_price: Decimal = Field(
        default=Decimal("150.00"), ge=0, description="基本運賃", examples=[150]
    )
    allow_duplicate: bool = Field(
        default=False, description="同一便名・路線・日付の重複登録を許可する"
    )

    @field_validator("base_price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        return to_decimal(v)


class AddCustomerRequest(BaseModel):
    """顧客登録リクエストスキーマ"""

    name: str = Field(..., min_length=1, examples=["Ada Lovelace"])
    phone: str = Field(..., min_length=1, examples=["+44 20 7946 0000"])
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+$", examples=["ada@example.com"])


class DeleteCustomerRequest(BaseModel):
    customer_id: int = Field(..., ge=1)


class BookFlightRequest(BaseModel):
    """予約リクエストスキーマ（return_flight_id を指定すると往復）"""

    customer_id: int = Field(..., ge=1)
    outbound_flight_id: int = Field(..., ge=1)
    return_flight_id: int | None = Field(default=None, ge=1)


class CancelBookingRequest(BaseModel):
    """予約キャンセルリクエストスキーマ"""

    customer_id: int = Field(..., ge=1)
    outbound_flight_id: int = Field(..., ge=1)
    return_flight_id: int | None = Field(default=None, ge=1)


class RebookRequest(BaseModel):
    """振替リクエストスキーマ"""

    customer_id: int = Field(..., ge=1)
    old_flight_id: int = Field(..., ge=1)
    new_flight_id: int = Field(..., ge=1)


class DeleteFlightRequest(BaseModel):
    flight_id: int = Field(..., ge=1)
