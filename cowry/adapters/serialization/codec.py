import json
from typing import Any, Union

from pydantic import ValidationError

from cowry.domain.exceptions import SerializationError
from cowry.domain.values import Currency, Money
from cowry.shared.logging import get_logger

from .models import CurrencyRecord, MoneyRecord

logger = get_logger(__name__)


class MoneyJsonCodec:
    """Maps Money values to and from their JSON record."""

    @staticmethod
    def map_money_to_record(money: Money) -> MoneyRecord:
        try:
            return MoneyRecord(
                amount=money.amount,
                currency=CurrencyRecord(
                    code=money.currency.code,
                    symbol=money.currency.symbol,
                    precision=money.currency.precision,
                ),
            )
        except ValidationError as e:
            raise SerializationError("encode", str(e)) from e

    @staticmethod
    def map_record_to_money(record: MoneyRecord) -> Money:
        currency = Currency(
            code=record.currency.code,
            symbol=record.currency.symbol,
            precision=record.currency.precision,
        )
        return Money(record.amount, currency)

    def encode(self, money: Money) -> str:
        """
        Serialize to compact JSON, non-ASCII symbols are kept as-is.

        :raises SerializationError: If the value doesn't fit the record
        """
        return self.map_money_to_record(money).model_dump_json()

    def decode(self, json_str: Union[str, bytes]) -> Money:
        """
        Parse a JSON record into Money.

        :raises SerializationError: On malformed JSON, wrong types or missing fields
        """
        try:
            record = MoneyRecord.model_validate_json(json_str)
        except ValidationError as e:
            logger.warning("money_decode_failed", error_count=e.error_count())
            raise SerializationError("decode", str(e)) from e

        return self.map_record_to_money(record)

    def to_dict(self, money: Money) -> dict[str, Any]:
        return self.map_money_to_record(money).model_dump()

    def from_dict(self, data: Any) -> Money:
        # Round-trip through JSON so dicts obey the same strict JSON typing as text.
        try:
            json_str = json.dumps(data, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise SerializationError("decode", f"not a JSON record: {e}") from e

        return self.decode(json_str)

    def encode_many(self, items: list[Money]) -> str:
        return "[" + ",".join(self.encode(money) for money in items) + "]"

    def decode_many(self, json_str: Union[str, bytes]) -> list[Money]:
        try:
            data = json.loads(json_str)
        except ValueError as e:
            logger.warning("money_list_decode_failed", error=str(e))
            raise SerializationError("decode", f"malformed JSON: {e}") from e

        if not isinstance(data, list):
            raise SerializationError("decode", "expected a JSON array of money records")

        return [self.from_dict(record) for record in data]


default_codec = MoneyJsonCodec()


def to_json(money: Money) -> str:
    return default_codec.encode(money)


def from_json(json_str: Union[str, bytes]) -> Money:
    return default_codec.decode(json_str)


def to_dict(money: Money) -> dict[str, Any]:
    return default_codec.to_dict(money)


def from_dict(data: Any) -> Money:
    return default_codec.from_dict(data)
