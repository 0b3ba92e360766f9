from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import copy
import logging
import logging.config

from src.chatline.logging_config import LOGGING_CONFIG


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

settings = Settings()



def setup_logging(config: Settings = settings):
    """Configure global logging level and format based on settings."""
    log_config = copy.deepcopy(LOGGING_CONFIG)
    log_level = "DEBUG" if config.DEBUG else config.LOG_LEVEL
    log_config["loggers"][""]["level"] = log_level

    logging.config.dictConfig(log_config)
