from __future__ import annotations

import logging
import logging.config
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CALLER_HEADER = "X-Caller"


class Settings(BaseSettings):
    """Runtime settings, read from `LIGHTNET_*` environment variables.

    Keyword arguments take precedence over the environment.
    """

    model_config = SettingsConfigDict(env_prefix="LIGHTNET_", case_sensitive=False, frozen=True)

    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "info"
    caller_header: str = DEFAULT_CALLER_HEADER
    url: str = ""

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: Any) -> str:
        return str(v).strip().lower() or "info"

    @field_validator("caller_header", mode="before")
    @classmethod
    def validate_caller_header(cls, v: Any) -> str:
        header = str(v).strip()
        if not header:
            raise ValueError("caller_header cannot be empty")
        return header

    @field_validator("url", mode="before")
    @classmethod
    def validate_url(cls, v: Any) -> str:
        return str(v).strip()


def get_logging_config(level: str = "info") -> dict[str, Any]:
    lvl = str(level).strip().upper() or "INFO"
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            },
        },
        "handlers": {
            "console": {
                "level": lvl,
                "formatter": "standard",
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            "lightnet": {
                "handlers": ["console"],
                "level": lvl,
                "propagate": False,
            },
        },
    }


def setup_logging(level: str = "info") -> logging.Logger:
    logging.config.dictConfig(get_logging_config(level))
    logger = logging.getLogger("lightnet")
    logger.debug("Logging configured at level %s", level)
    return logger
