import math
from dataclasses import dataclass
from typing import Any, Callable, Optional

from cowry.domain.exceptions import (
    AmountOverflowError,
    CurrencyMismatchError,
    DivisionByZeroError,
)

from .currency import Currency
from .rounding_mode import RoundingMode

MIN_AMOUNT = -(2**63)
MAX_AMOUNT = 2**63 - 1


def _checked(amount: int) -> int:
    if amount < MIN_AMOUNT or amount > MAX_AMOUNT:
        raise AmountOverflowError(amount)
    return amount


def _saturated(amount: int) -> int:
    # float -> minor units clamps to the 64-bit bounds instead of failing.
    return max(MIN_AMOUNT, min(MAX_AMOUNT, amount))


def _truncating_div(numerator: int, denominator: int) -> int:
    # Floor division rounds toward negative infinity; minor units truncate toward zero.
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True, eq=False)
class Money:
    """
    An amount of money stored as an integer count of minor units (cents, kobo...).

    Money(500, Currency("NGN", "₦", 2)) is ₦5.00.

    Scaling by a float (multiply, divide, percentage) goes through a
    floating-point major-unit value and is rounded back to minor units with
    a RoundingMode. Everything else is exact integer arithmetic.
    """

    amount: int
    currency: Currency

    def __post_init__(self) -> None:
        if not _is_int(self.amount):
            raise TypeError(
                f"Money amount must be an integer number of minor units: {self.amount!r}"
            )
        if not isinstance(self.currency, Currency):
            raise TypeError(
                f"Money currency must be a Currency instance: {self.currency!r}"
            )
        _checked(self.amount)

    @classmethod
    def zero(cls, currency: Currency) -> "Money":
        return cls(0, currency)

    @property
    def currency_code(self) -> str:
        return self.currency.code

    @property
    def precision(self) -> int:
        return self.currency.precision

    def is_zero(self) -> bool:
        return self.amount == 0

    def is_positive(self) -> bool:
        return self.amount > 0

    def is_negative(self) -> bool:
        return self.amount < 0

    def _with_amount(self, amount: int) -> "Money":
        return Money(amount, self.currency)

    def _scale(
        self, transform: Callable[[float], float], mode: RoundingMode
    ) -> "Money":
        """
        Scale through a major-unit float and round back to minor units.

        :param transform: Function applied to the major-unit value
        :param mode: Rounding mode used to collapse the result
        :return: New Money in the same currency
        """
        factor = float(self.currency.minor_units_per_major)
        major = self.amount / factor
        scaled = transform(major) * factor

        if not math.isfinite(scaled):
            raise AmountOverflowError(scaled, "not a finite number")

        return self._with_amount(_saturated(mode.apply(scaled)))

    def multiply(self, scalar: float) -> "Money":
        return self.multiply_with_mode(scalar, RoundingMode.NEAREST)

    def divide(self, scalar: float) -> "Money":
        return self.divide_with_mode(scalar, RoundingMode.NEAREST)

    def percentage(self, percent: float) -> "Money":
        return self.percentage_with_mode(percent, RoundingMode.NEAREST)

    def multiply_with_mode(self, scalar: float, mode: RoundingMode) -> "Money":
        """
        Multiply by a scalar.

        Money(105, NGN).multiply_with_mode(2.5, RoundingMode.FLOOR) is 262 (₦2.62).
        """
        return self._scale(lambda major: major * scalar, mode)

    def divide_with_mode(self, scalar: float, mode: RoundingMode) -> "Money":
        """
        Divide by a scalar.

        :raises DivisionByZeroError: If scalar is zero
        """
        if scalar == 0:
            raise DivisionByZeroError("divide")

        return self._scale(lambda major: major / scalar, mode)

    def percentage_with_mode(self, percent: float, mode: RoundingMode) -> "Money":
        """
        Take a percentage of the amount, e.g. percent=2.8 for 2.8%.
        """
        return self._scale(lambda major: major * (percent / 100.0), mode)

    def round_to_precision(self) -> None:
        """
        Re-normalize the amount to the currency precision, in place.

        This is the only operation that mutates a Money; don't call it on a
        value shared between threads. Amounts near the 64-bit bounds that
        drift past them through the float round trip are clamped back.
        """
        factor = float(self.currency.minor_units_per_major)
        raw = self.amount / factor
        object.__setattr__(
            self, "amount", _saturated(RoundingMode.NEAREST.apply(raw * factor))
        )

    def _require_same_currency(self, other: "Money") -> None:
        if self.currency != other.currency:
            raise CurrencyMismatchError(self.currency.code, other.currency.code)

    def add(self, other: "Money") -> "Money":
        self._require_same_currency(other)
        return self._with_amount(self.amount + other.amount)

    def subtract(self, other: "Money") -> "Money":
        self._require_same_currency(other)
        return self._with_amount(self.amount - other.amount)

    def negate(self) -> "Money":
        return self._with_amount(-self.amount)

    def abs(self) -> "Money":
        return self._with_amount(abs(self.amount))

    def compare_to(self, other: "Money") -> Optional[int]:
        """
        Three-way comparison within one currency.

        :return: -1, 0 or 1, or None when the currencies differ (no order)
        :raises TypeError: If other is not a Money
        """
        if not isinstance(other, Money):
            raise TypeError(f"Cannot compare Money with {type(other).__name__}")
        if self.currency != other.currency:
            return None

        return (self.amount > other.amount) - (self.amount < other.amount)

    def format(self) -> str:
        """
        Render as <symbol><whole>[.<fraction>], e.g. "₦5.00", "¥200", "₿0.00000200".
        """
        precision = self.currency.precision
        divisor = self.currency.minor_units_per_major

        whole = _truncating_div(self.amount, divisor)
        if precision == 0:
            return f"{self.currency.symbol}{whole}"

        fraction = abs(self.amount) % divisor
        return f"{self.currency.symbol}{whole}.{fraction:0{precision}d}"

    def __add__(self, other: Any) -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: Any) -> "Money":
        # Exact integer scaling only; floats go through multiply().
        if not _is_int(other):
            return NotImplemented
        return self._with_amount(self.amount * other)

    def __rmul__(self, other: Any) -> "Money":
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> "Money":
        """Integer division of the amount, truncating toward zero."""
        if not _is_int(other):
            return NotImplemented
        if other == 0:
            raise DivisionByZeroError("integer division")
        return self._with_amount(_truncating_div(self.amount, other))

    def __neg__(self) -> "Money":
        return self.negate()

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.currency == other.currency and self.amount == other.amount

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) == -1

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) in (-1, 0)

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) == 1

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) in (0, 1)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Money(amount={self.amount}, currency={self.currency!r})"
