from .pricing import (
    calculate_dynamic_price,
    capacity_factor,
    split_round_trip_price,
    urgency_factor,
)

__all__ = [
    "calculate_dynamic_price",
    "capacity_factor",
    "split_round_trip_price",
    "urgency_factor",
]
