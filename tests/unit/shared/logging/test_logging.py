import io
import json
import logging

import pytest

from cowry.shared.logging import LIBRARY_LOGGER, configure_logging, get_logger


@pytest.fixture
def log_stream():
    stream = io.StringIO()
    handler = logging.getLogger(LIBRARY_LOGGER).handlers[0]
    previous = handler.setStream(stream)

    yield stream

    handler.setStream(previous)
    configure_logging(log_level="DEBUG")


def test_json_logs_render_one_object_per_event(log_stream):
    # Given
    configure_logging(log_level="DEBUG", json_logs=True)

    # When
    get_logger("cowry.tests").info("money_scaled", amount=105, symbol="₦")

    # Then
    record = json.loads(log_stream.getvalue().splitlines()[-1])
    assert record["event"] == "money_scaled"
    assert record["amount"] == 105
    assert record["symbol"] == "₦"
    assert record["level"] == "info"
    assert record["logger"] == "cowry.tests"


def test_level_filters_library_events(log_stream):
    configure_logging(log_level="warning", json_logs=True)

    get_logger("cowry.tests").debug("hidden")
    get_logger("cowry.tests").warning("shown")

    events = [json.loads(line)["event"] for line in log_stream.getvalue().splitlines()]
    assert events == ["shown"]


def test_reconfiguring_keeps_one_handler_and_leaves_root_alone():
    root_handlers = list(logging.getLogger().handlers)

    configure_logging(log_level="DEBUG")
    configure_logging(log_level="DEBUG", json_logs=True)
    configure_logging(log_level="DEBUG")

    library_logger = logging.getLogger(LIBRARY_LOGGER)
    assert len(library_logger.handlers) == 1
    assert library_logger.propagate is False
    assert logging.getLogger().handlers == root_handlers
