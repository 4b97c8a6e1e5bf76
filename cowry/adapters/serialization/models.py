from pydantic import BaseModel, ConfigDict, Field

from cowry.domain.values import MAX_AMOUNT, MIN_AMOUNT
from cowry.domain.values.currency import MAX_PRECISION


class CurrencyRecord(BaseModel):
    """
    The "currency" object of a serialized money value.

    Field order is part of the wire format: code, symbol, precision.
    """

    model_config = ConfigDict(strict=True, frozen=True, extra="ignore")

    code: str = Field(..., description="Currency code.", examples=["NGN"])
    symbol: str = Field(..., description="Display symbol.", examples=["₦"])
    precision: int = Field(
        ...,
        ge=0,
        le=MAX_PRECISION,
        description="Number of fractional digits of the minor unit.",
        examples=[2],
    )


class MoneyRecord(BaseModel):
    """
    Flat structural record of a money value.

    Example::
        {"amount":500,"currency":{"code":"NGN","symbol":"₦","precision":2}}
    """

    model_config = ConfigDict(strict=True, frozen=True, extra="ignore")

    amount: int = Field(
        ...,
        ge=MIN_AMOUNT,
        le=MAX_AMOUNT,
        description="Amount in minor units.",
        examples=[500],
    )
    currency: CurrencyRecord
