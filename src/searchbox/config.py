"""Runtime configuration for the search box.

Values come from the environment (optionally a ``.env`` file) and are
validated by pydantic.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from searchbox.logger import (
    DEFAULT_COMPRESSION,
    DEFAULT_LOG_FILE,
    DEFAULT_RETENTION,
    DEFAULT_ROTATION,
    get_logger,
    setup_logger,
)
from searchbox.utils import env_flag

logger = get_logger("config")

DEFAULT_SEARCH_PATH = "/search"

_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


class SearchBoxConfig(BaseModel):
    """Configuration for a search box session."""

    search_path: str = Field(DEFAULT_SEARCH_PATH, description="Path of the search results page")
    log_level: str = Field("INFO", description="loguru level name")
    log_file: str = Field(DEFAULT_LOG_FILE, description="Log file, relative paths resolve to the project root")
    console_logging: bool = Field(False, description="Mirror log records to stderr")
    log_rotation: str = Field(DEFAULT_ROTATION, description="loguru rotation condition")
    log_retention: str = Field(DEFAULT_RETENTION, description="loguru retention period")
    log_compression: str = Field(DEFAULT_COMPRESSION, description="Archive format of rotated logs")

    model_config = {"frozen": True}

    @field_validator("search_path")
    @classmethod
    def _absolute_path(cls, value: str) -> str:
        value = value.strip()
        if not value.startswith("/"):
            raise ValueError(f"search_path must start with '/': {value!r}")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value!r}")
        return level


def load_config() -> SearchBoxConfig:
    """Load configuration from environment variables.

    Reads ``SEARCHBOX_SEARCH_PATH``, ``SEARCHBOX_LOG_LEVEL``,
    ``SEARCHBOX_LOG_FILE``, ``SEARCHBOX_LOG_ROTATION``,
    ``SEARCHBOX_LOG_RETENTION`` and ``SEARCHBOX_CONSOLE_LOGGING``.
    """
    load_dotenv()

    values: dict[str, object] = {}
    search_path = os.getenv("SEARCHBOX_SEARCH_PATH")
    if search_path:
        values["search_path"] = search_path
    log_level = os.getenv("SEARCHBOX_LOG_LEVEL")
    if log_level:
        values["log_level"] = log_level
    log_file = os.getenv("SEARCHBOX_LOG_FILE")
    if log_file:
        values["log_file"] = log_file
    rotation = os.getenv("SEARCHBOX_LOG_ROTATION")
    if rotation:
        values["log_rotation"] = rotation
    retention = os.getenv("SEARCHBOX_LOG_RETENTION")
    if retention:
        values["log_retention"] = retention
    values["console_logging"] = env_flag(os.getenv("SEARCHBOX_CONSOLE_LOGGING"))

    config = SearchBoxConfig(**values)
    logger.debug("Loaded config: {}", config)
    return config


def configure_logging(config: SearchBoxConfig) -> None:
    """Point the loguru sinks at the configured file, level and rotation policy."""
    setup_logger(
        config.log_file,
        log_level=config.log_level,
        rotation=config.log_rotation,
        retention=config.log_retention,
        compression=config.log_compression,
        console_output=config.console_logging,
    )
