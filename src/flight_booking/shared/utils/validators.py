from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def to_decimal(v: object) -> Decimal:
    """任意の値を Decimal に変換する

    Pydantic の field_validator (mode="before") からも呼び出す。
    すでに Decimal の場合はそのまま返し、それ以外は str 経由で変換する
    （float の 2 進誤差を持ち込まないため）。
    """
    if isinstance(v, Decimal):
        return v
    return Decimal(str(v))


def to_money(v: object) -> Decimal:
    """金額として小数第 2 位に丸める（四捨五入）"""
    return to_decimal(v).quantize(CENT, rounding=ROUND_HALF_UP)
