import pytest
from pydantic import ValidationError

from cowry.adapters.serialization import CurrencyRecord, MoneyRecord


def test_money_record_dump_order():
    record = MoneyRecord(
        amount=200,
        currency=CurrencyRecord(code="BTC", symbol="₿", precision=8),
    )

    assert record.model_dump_json() == (
        '{"amount":200,"currency":{"code":"BTC","symbol":"₿","precision":8}}'
    )


def test_currency_record_validation():
    with pytest.raises(ValidationError):
        CurrencyRecord(code="X", symbol="x", precision=256)

    with pytest.raises(ValidationError):
        CurrencyRecord(code="X", symbol="x", precision="2")


def test_records_are_frozen():
    record = CurrencyRecord(code="X", symbol="x", precision=0)

    with pytest.raises(ValidationError):
        record.code = "Y"
