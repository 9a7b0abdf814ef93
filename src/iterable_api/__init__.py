"""iterable-api - Python client for the Iterable REST API

A thin request wrapper plus per-resource endpoint classes.
"""

__version__ = "0.1.0"
__description__ = "Python client for the Iterable marketing automation API"

from .api.client import Request
from .api.response_codes import ResponseCode
from .core.config_manager import ClientConfig, load_config
from .core.error_handler import ConfigurationError, IterableError
from .core.logging_manager import configure_logging
from .iterable_client import IterableClient, create_client

__all__ = [
    "ClientConfig",
    "ConfigurationError",
    "IterableClient",
    "IterableError",
    "Request",
    "ResponseCode",
    "configure_logging",
    "create_client",
    "load_config",
]
