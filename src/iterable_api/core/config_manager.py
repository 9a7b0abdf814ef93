"""Configuration Management for the Iterable API client

Loads client settings from an optional YAML file, overlays environment
variables and validates the result into an immutable ``ClientConfig``.
"""

import os
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError, field_validator

from .error_handler import ConfigurationError

DEFAULT_BASE_URL = "https://api.iterable.com/api"

# Environment variable -> ClientConfig field
ENV_OVERRIDES = {
    "ITERABLE_API_KEY": "api_key",
    "ITERABLE_BASE_URL": "base_url",
    "ITERABLE_KEEP_ALIVE": "keep_alive",
    "ITERABLE_POOL_CONNECTIONS": "pool_connections",
    "ITERABLE_POOL_MAXSIZE": "pool_maxsize",
}


class ClientConfig(BaseModel):
    """Settings for one ``Request`` wrapper. Immutable once built."""
    model_config = ConfigDict(frozen=True)

    api_key: SecretStr
    base_url: str = Field(default=DEFAULT_BASE_URL)
    keep_alive: bool = Field(default=True)
    pool_connections: int = Field(default=10, ge=1)
    pool_maxsize: int = Field(default=10, ge=1)

    @field_validator('api_key')
    @classmethod
    def validate_api_key(cls, v):
        """Reject blank keys"""
        if not v.get_secret_value().strip():
            raise ValueError("api_key must not be empty")
        return v

    @field_validator('base_url')
    @classmethod
    def validate_base_url(cls, v):
        """Require an http(s) URL and drop any trailing slash"""
        if not v.startswith(('http://', 'https://')):
            raise ValueError("base_url must start with http:// or https://")
        return v.rstrip('/')

    @property
    def headers(self) -> Dict[str, str]:
        """Headers sent with every request"""
        return {
            'Api-Key': self.api_key.get_secret_value(),
            'Content-Type': 'application/json'
        }


class ConfigManager:
    """Builds a ``ClientConfig`` from a YAML file and the environment.

    Precedence, lowest first: model defaults, YAML file, environment
    variables, explicit overrides passed to ``load_config``.
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        self.config_path = Path(config_path) if config_path else None
        self.logger = logging.getLogger(__name__)

    def load_config(self, **overrides) -> ClientConfig:
        """Load and validate configuration.

        Args:
            **overrides: Field values that win over file and environment

        Returns:
            Validated client configuration

        Raises:
            ConfigurationError: If the file is unreadable or validation fails
        """
        config_data: Dict[str, Any] = {}

        if self.config_path is not None:
            self.logger.debug(f"Loading config from {self.config_path}")
            config_data.update(self._load_yaml_file(self.config_path))

        env_overrides = self._get_env_overrides()
        if env_overrides:
            self.logger.debug(f"Applying environment overrides: {sorted(env_overrides)}")
            config_data.update(env_overrides)

        config_data.update({k: v for k, v in overrides.items() if v is not None})

        if not config_data.get('api_key'):
            raise ConfigurationError("api_key is required")

        try:
            return ClientConfig(**config_data)
        except ValidationError as e:
            self.logger.error(f"Configuration validation failed: {e}")
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """Load YAML configuration file.

        Returns:
            Configuration dictionary
        """
        try:
            with open(file_path, 'r') as f:
                data = yaml.safe_load(f) or {}
        except OSError as e:
            raise ConfigurationError(f"Cannot read config file {file_path}: {e}") from e
        except yaml.YAMLError as e:
            self.logger.error(f"Failed to parse YAML file {file_path}: {e}")
            raise ConfigurationError(f"Invalid YAML in {file_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {file_path} must contain a mapping")
        return data

    def _get_env_overrides(self) -> Dict[str, Any]:
        """Get configuration overrides from environment variables.

        Values stay strings; pydantic converts them to the field types.
        """
        overrides = {}
        for env_name, field_name in ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value:
                overrides[field_name] = value
        return overrides


def load_config(config_path: Optional[Union[str, Path]] = None, **overrides) -> ClientConfig:
    """Shortcut for ``ConfigManager(config_path).load_config(**overrides)``."""
    return ConfigManager(config_path).load_config(**overrides)
