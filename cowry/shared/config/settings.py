from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cowry.domain.values import RoundingMode


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )

    LOG_LEVEL: str = Field(
        default="INFO", description="Logging level [DEBUG, INFO, WARNING, ERROR]"
    )

    JSON_LOGS: bool = Field(
        default=False,
        description="Should logs be in JSON format?",
    )

    DEFAULT_ROUNDING_MODE: RoundingMode = Field(
        default=RoundingMode.NEAREST,
        description="Rounding mode used when a command doesn't ask for one",
        examples=["nearest", "floor", "ceil"],
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        valid_levels = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        if value.upper() not in valid_levels:
            raise ValueError(
                f"Invalid LOG_LEVEL '{value}'. Must be one of {valid_levels}"
            )
        return value.upper()

    @field_validator("DEFAULT_ROUNDING_MODE", mode="before")
    @classmethod
    def parse_rounding_mode(cls, value: object) -> RoundingMode:
        return RoundingMode.from_str(value)


@lru_cache()
def get_settings() -> Settings:
    from cowry.shared.logging import get_logger

    logger = get_logger(__name__)

    try:
        settings = Settings()
        logger.debug("settings_loaded", log_level=settings.LOG_LEVEL)
        return settings

    except Exception as e:
        logger.error("settings_load_failed", error=str(e), exc_info=True)
        raise
