"""動的価格の計算

価格 = 基本運賃 × (1 + 緊急度係数 + 搭乗率係数)

フライト自身の現在価格表示、新規予約の確定価格、フライト削除時の
往復運賃の按分のすべてで同じ関数を使う。
"""

from datetime import date
from decimal import Decimal

from flight_booking.shared.utils import to_money

LAST_WEEK_SURCHARGE = Decimal("0.50")
TWO_WEEKS_SURCHARGE = Decimal("0.30")
LAST_MONTH_SURCHARGE = Decimal("0.15")
CAPACITY_WEIGHT = Decimal("0.40")


def urgency_factor(days_until_departure: int) -> Decimal:
    """出発までの日数による割増率

    0 日以下（当日・出発済み）でも最大割増を返す。日付の制約は呼び出し側で検証する。
    """
    if days_until_departure <= 7:
        return LAST_WEEK_SURCHARGE
    if days_until_departure <= 14:
        return TWO_WEEKS_SURCHARGE
    if days_until_departure < 30:
        return LAST_MONTH_SURCHARGE
    return Decimal("0")


def capacity_factor(occupied: int, capacity: int) -> Decimal:
    """搭乗率による割増率（満席で最大 40%）"""
    if capacity <= 0:
        raise ValueError(f"Capacity must be positive to price a flight, got {capacity}")
    return Decimal(occupied) / Decimal(capacity) * CAPACITY_WEIGHT


def calculate_dynamic_price(
    base_price: Decimal,
    departure_date: date,
    reference_date: date,
    occupied: int,
    capacity: int,
) -> Decimal:
    """基準日時点の 1 区間の価格を計算する"""
    days_until_departure = (departure_date - reference_date).days
    multiplier = (
        Decimal("1")
        + urgency_factor(days_until_departure)
        + capacity_factor(occupied, capacity)
    )
    return to_money(base_price * multiplier)


def split_round_trip_price(
    price: Decimal, outbound_share: Decimal, return_share: Decimal
) -> Decimal:
    """往復運賃のうち往路に帰属する金額を返す

    各区間を予約日基準で再計算した価格の比で按分する。
    両区間とも 0 の場合は半額ずつとみなす。
    """
    total = outbound_share + return_share
    if total == 0:
        return to_money(price / 2)
    return to_money(price * outbound_share / total)
