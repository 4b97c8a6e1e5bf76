from dependency_injector import containers, providers

from cowry.adapters.serialization import MoneyJsonCodec
from cowry.domain.services import BatchOperations
from cowry.shared.config import get_settings
from cowry.shared.logging import get_logger

logger = get_logger(__name__)


class Container(containers.DeclarativeContainer):
    config = providers.Configuration()

    money_codec = providers.Singleton(MoneyJsonCodec)

    batch_operations = providers.Factory(BatchOperations)


def get_container() -> Container:
    settings = get_settings()

    container = Container()
    container.config.from_dict(
        {
            "log_level": settings.LOG_LEVEL,
            "json_logs": settings.JSON_LOGS,
            "default_rounding_mode": settings.DEFAULT_ROUNDING_MODE,
        }
    )

    logger.debug("container_initialized")
    return container
