import logging
import sys
from typing import Optional

import structlog
from structlog.types import Processor

LIBRARY_LOGGER = "cowry"

_handler: Optional[logging.StreamHandler] = None


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)  # type: ignore [no-any-return]


def configure_logging(
    log_level: str = "INFO",
    json_logs: bool = False,
) -> None:
    """
    Configure structlog and the "cowry" stdlib logger tree.

    Only the library's own loggers get a handler, writing to stderr so stdout
    is left to command output. The root logger and handlers installed by the
    host application are not touched. Calling it again swaps the renderer and
    level in place, loggers cached on first use pick the change up.

    :param log_level: Logging level [DEBUG, INFO, WARNING, ERROR, CRITICAL]
    :param json_logs: Logging output format will be JSON if set to True
    """
    global _handler

    log_level_int = getattr(logging, log_level.upper())

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    structlog.configure(
        processors=shared_processors
        + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    renderer: Processor
    if json_logs:
        renderer = structlog.processors.JSONRenderer(ensure_ascii=False)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            renderer,
        ],
    )

    library_logger = logging.getLogger(LIBRARY_LOGGER)
    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        library_logger.addHandler(_handler)

    _handler.setFormatter(formatter)
    library_logger.setLevel(log_level_int)
    library_logger.propagate = False


configure_logging()

__all__ = ["LIBRARY_LOGGER", "configure_logging", "get_logger"]
