import pytest

from cowry.domain.values import Currency


def test_currency_keeps_fields_as_given():
    c = Currency("NGN", "₦", 2)

    assert c.code == "NGN"
    assert c.symbol == "₦"
    assert c.precision == 2
    assert str(c) == "NGN"


def test_currency_allows_empty_code_and_symbol():
    c = Currency("", "", 0)

    assert c.code == ""
    assert c.symbol == ""


def test_currency_equality_includes_symbol():
    a = Currency("USD", "$", 2)
    b = Currency("USD", "$", 2)
    c = Currency("USD", "US$", 2)
    d = Currency("USD", "$", 3)

    assert a == b
    assert a != c
    assert a != d
    assert {a, b, c} == {Currency("USD", "$", 2), Currency("USD", "US$", 2)}


def test_currency_is_immutable():
    c = Currency("JPY", "¥", 0)

    with pytest.raises(AttributeError):
        c.precision = 2  # type: ignore[misc]


def test_currency_precision_bounds():
    Currency("XXX", "x", 255)  # ok

    with pytest.raises(ValueError):
        Currency("XXX", "x", 256)
    with pytest.raises(ValueError):
        Currency("XXX", "x", -1)
    with pytest.raises(ValueError):
        Currency("XXX", "x", 2.0)  # type: ignore[arg-type]


def test_minor_units_per_major():
    assert Currency("JPY", "¥", 0).minor_units_per_major == 1
    assert Currency("NGN", "₦", 2).minor_units_per_major == 100
    assert Currency("BTC", "₿", 8).minor_units_per_major == 100_000_000
