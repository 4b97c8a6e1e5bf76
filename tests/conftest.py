import pytest

from cowry.domain.values import Currency


@pytest.fixture(autouse=True)
def test_settings(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("JSON_LOGS", "false")
    monkeypatch.setenv("DEFAULT_ROUNDING_MODE", "nearest")

    from cowry.shared.config import get_settings

    get_settings.cache_clear()


@pytest.fixture
def ngn() -> Currency:
    return Currency("NGN", "₦", 2)


@pytest.fixture
def usd() -> Currency:
    return Currency("USD", "$", 2)
