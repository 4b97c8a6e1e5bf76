from dataclasses import dataclass

MAX_PRECISION = 255


@dataclass(frozen=True)
class Currency:
    """
    A currency descriptor, such as USD or NGN.

    Equality covers all three fields, so two descriptors sharing a code
    but not a symbol are different currencies.
    """

    code: str
    symbol: str
    precision: int

    def __post_init__(self) -> None:
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise ValueError(
                f"Currency precision must be an integer: {self.precision!r}"
            )
        if self.precision < 0 or self.precision > MAX_PRECISION:
            raise ValueError(
                f"Currency precision must be 0-{MAX_PRECISION}: {self.precision}"
            )

    def __str__(self) -> str:
        return self.code

    @property
    def minor_units_per_major(self) -> int:
        """Number of minor units in one major unit (100 for a 2-digit currency)."""
        return 10**self.precision
