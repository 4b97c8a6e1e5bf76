from .base import DomainException
from .money import (
    AmountOverflowError,
    CurrencyMismatchError,
    DivisionByZeroError,
    MoneyError,
    SerializationError,
)

__all__ = [
    "DomainException",
    "MoneyError",
    "CurrencyMismatchError",
    "DivisionByZeroError",
    "AmountOverflowError",
    "SerializationError",
]
