from .base import DomainException


class MoneyError(DomainException):
    """Base exception for monetary value errors."""

    pass


class CurrencyMismatchError(MoneyError):
    """Raised when two values of different currencies are combined."""

    def __init__(self, left_code: str, right_code: str):
        self.left_code = left_code
        self.right_code = right_code

        super().__init__(f"Currency mismatch: {left_code} vs {right_code}")


class DivisionByZeroError(MoneyError, ZeroDivisionError):
    def __init__(self, operation: str = "divide"):
        self.operation = operation

        super().__init__(f"Division by zero is not allowed ({operation})")


class AmountOverflowError(MoneyError, OverflowError):
    """Raised when an amount does not fit into a signed 64-bit minor-unit count."""

    def __init__(self, value: object, reason: str = "out of the signed 64-bit range"):
        self.value = value

        super().__init__(f"Amount {value} is {reason}")


class SerializationError(MoneyError):
    """Raised when a value cannot be encoded to or decoded from its JSON record."""

    def __init__(self, operation: str, reason: str):
        self.operation = operation

        super().__init__(f"Invalid JSON during {operation}: {reason}")
