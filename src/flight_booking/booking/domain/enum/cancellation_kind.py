from enum import Enum


class CancellationKind(str, Enum):
    """フライト削除によって予約がどうキャンセルされたか"""

    ONE_WAY = "ONE_WAY"
    ROUND_TRIP = "ROUND_TRIP"
    RETURN_LEG = "RETURN_LEG"
