"""
cowry: fixed-point money in integer minor units, with explicit rounding.

    from cowry import Currency, Money, RoundingMode, to_json

    ngn = Currency("NGN", "₦", 2)
    Money(105, ngn).multiply_with_mode(2.5, RoundingMode.FLOOR)  # ₦2.62
    to_json(Money(500, ngn))  # {"amount":500,"currency":{...}}
"""

from cowry.adapters.serialization import from_dict, from_json, to_dict, to_json
from cowry.domain.exceptions import (
    AmountOverflowError,
    CurrencyMismatchError,
    DivisionByZeroError,
    DomainException,
    MoneyError,
    SerializationError,
)
from cowry.domain.services import (
    BatchOperations,
    divide_all,
    multiply_all,
    percentage_all,
)
from cowry.domain.values import Currency, Money, RoundingMode

__version__ = "0.1.0"

__all__ = [
    "Currency",
    "Money",
    "RoundingMode",
    "BatchOperations",
    "multiply_all",
    "divide_all",
    "percentage_all",
    "to_json",
    "from_json",
    "to_dict",
    "from_dict",
    "DomainException",
    "MoneyError",
    "CurrencyMismatchError",
    "DivisionByZeroError",
    "AmountOverflowError",
    "SerializationError",
]
