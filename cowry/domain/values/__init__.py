from .currency import Currency
from .money import MAX_AMOUNT, MIN_AMOUNT, Money
from .rounding_mode import RoundingMode

__all__ = [
    "Currency",
    "Money",
    "RoundingMode",
    "MIN_AMOUNT",
    "MAX_AMOUNT",
]
