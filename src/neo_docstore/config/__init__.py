"""Configuration for neo-docstore."""

from .settings import DocstoreSettings, get_settings
from .logging_config import (
    setup_logging,
    get_logger,
    LogVerbosity,
    LogFormat,
    LoggingConfig,
)

__all__ = [
    "DocstoreSettings",
    "get_settings",
    "setup_logging",
    "get_logger",
    "LogVerbosity",
    "LogFormat",
    "LoggingConfig",
]
