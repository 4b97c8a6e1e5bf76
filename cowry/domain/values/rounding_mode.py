import math
from enum import Enum


class RoundingMode(Enum):
    """
    Strategy used to collapse a real-valued amount into whole minor units.

    NEAREST: ties away from zero, 2.625 -> 2.63 and -2.625 -> -2.63
    FLOOR:   toward negative infinity, 2.625 -> 2.62 and -2.625 -> -2.63
    CEIL:    toward positive infinity, 2.625 -> 2.63 and -2.625 -> -2.62
    """

    NEAREST = "nearest"
    FLOOR = "floor"
    CEIL = "ceil"

    def __str__(self) -> str:
        return self.value

    def apply(self, value: float) -> int:
        """
        Round a float to an integer according to this mode.

        :param value: Finite float, already scaled to minor units
        :return: Rounded integer
        :raises ValueError: If value is NaN or infinite
        """
        if not math.isfinite(value):
            raise ValueError(f"Cannot round a non-finite value: {value}")

        if self is RoundingMode.FLOOR:
            return math.floor(value)

        if self is RoundingMode.CEIL:
            return math.ceil(value)

        # Python's round() breaks ties to even, so this is done by hand.
        magnitude = abs(value)
        whole = math.floor(magnitude)
        if magnitude - whole >= 0.5:
            whole += 1

        return whole if value >= 0 else -whole

    @classmethod
    def from_str(cls, name: str) -> "RoundingMode":
        if isinstance(name, cls):
            return name

        try:
            return cls(str(name).strip().lower())
        except ValueError:
            valid = ", ".join(mode.value for mode in cls)
            raise ValueError(
                f"Unknown rounding mode '{name}'. Must be one of: {valid}"
            ) from None
