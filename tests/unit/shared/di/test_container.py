from cowry.adapters.serialization import MoneyJsonCodec
from cowry.domain.services import BatchOperations
from cowry.domain.values import Money, RoundingMode
from cowry.shared.di import get_container


def test_container_provides_codec_singleton():
    container = get_container()

    codec = container.money_codec()

    assert isinstance(codec, MoneyJsonCodec)
    assert container.money_codec() is codec


def test_container_builds_batch_operations(ngn):
    container = get_container()

    batch = container.batch_operations([Money(100, ngn)])

    assert isinstance(batch, BatchOperations)
    assert batch.multiply_all(2.0) == [Money(200, ngn)]


def test_container_config_follows_settings(monkeypatch):
    from cowry.shared.config import get_settings

    monkeypatch.setenv("DEFAULT_ROUNDING_MODE", "ceil")
    get_settings.cache_clear()

    container = get_container()

    assert container.config.default_rounding_mode() is RoundingMode.CEIL
    assert container.config.log_level() == "DEBUG"
    assert container.config.json_logs() is False


def test_container_exposes_only_wired_providers():
    container = get_container()

    assert set(container.providers) == {"config", "money_codec", "batch_operations"}
