"""Core configuration, logging and error types for the Iterable API client."""

from .config_manager import ClientConfig, ConfigManager, DEFAULT_BASE_URL, load_config
from .error_handler import ConfigurationError, IterableError
from .logging_manager import LoggingManager, configure_logging

__all__ = [
    "ClientConfig",
    "ConfigManager",
    "ConfigurationError",
    "DEFAULT_BASE_URL",
    "IterableError",
    "LoggingManager",
    "configure_logging",
    "load_config",
]
