"""
Request wrapper for the Iterable REST API

Owns one configured ``requests`` session per instance and exposes the HTTP
verbs used by the resource endpoints. Responses are returned as decoded
bodies; HTTP and transport errors propagate unmodified.
"""

import logging
from typing import Dict, Any, Optional

import requests
from requests.adapters import HTTPAdapter
from requests.exceptions import HTTPError, RequestException
from pydantic import ValidationError

from ..core.config_manager import ClientConfig, DEFAULT_BASE_URL
from ..core.error_handler import ConfigurationError


class ResponseParser:
    """Decodes response bodies based on content type"""

    @staticmethod
    def parse_response(response: requests.Response) -> Any:
        """Return JSON for JSON bodies, text for everything else, None when empty"""
        if not response.content:
            return None

        content_type = response.headers.get('content-type', '').lower()
        if 'json' in content_type:
            return response.json()
        return response.text


class Request:
    """
    Thin HTTP wrapper bound to the Iterable API.

    Every call issues exactly one HTTP request: no retries, no pagination,
    no caching. The session keeps connections alive between calls unless
    ``keep_alive`` is disabled.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
        keep_alive: bool = True,
        pool_connections: int = 10,
        pool_maxsize: int = 10
    ):
        """
        Initialize the wrapper

        Args:
            api_key: Iterable API key, sent as the ``Api-Key`` header
            base_url: API root every path is appended to
            keep_alive: Whether to reuse connections between requests
            pool_connections: Number of connection pools to cache
            pool_maxsize: Maximum connections kept per pool

        Raises:
            ConfigurationError: If the API key is missing or the settings are invalid
        """
        if not api_key:
            raise ConfigurationError("api_key is required")

        try:
            self.config = ClientConfig(
                api_key=api_key,
                base_url=base_url,
                keep_alive=keep_alive,
                pool_connections=pool_connections,
                pool_maxsize=pool_maxsize
            )
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

        self.logger = logging.getLogger(__name__)
        self.session = requests.Session()
        self._configure_session()

    @classmethod
    def from_config(cls, config: ClientConfig) -> 'Request':
        """Build a wrapper from a loaded ``ClientConfig``"""
        return cls(
            config.api_key.get_secret_value(),
            base_url=config.base_url,
            keep_alive=config.keep_alive,
            pool_connections=config.pool_connections,
            pool_maxsize=config.pool_maxsize
        )

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def _configure_session(self):
        """Set auth headers and mount the pooled adapters"""
        self.session.headers.update(self.config.headers)
        if not self.config.keep_alive:
            self.session.headers['Connection'] = 'close'

        # Retries stay off; failures surface to the caller on the first attempt
        adapter = HTTPAdapter(
            pool_connections=self.config.pool_connections,
            pool_maxsize=self.config.pool_maxsize,
            max_retries=0
        )
        for scheme in ['http', 'https']:
            self.session.mount(f'{scheme}://', adapter)

    def _build_url(self, path: str) -> str:
        """Append path to the base URL, keeping the base URL's own path"""
        return f"{self.config.base_url}/{path.lstrip('/')}"

    def request(self, method: str, path: str, **kwargs) -> Any:
        """
        Issue one HTTP request and return the decoded body

        Args:
            method: HTTP method
            path: API path, relative to the base URL
            **kwargs: Passed through to ``requests.Session.request``

        Returns:
            Parsed response body

        Raises:
            requests.HTTPError: On non-2xx responses; ``.response`` holds status and body
            requests.RequestException: On transport failures
        """
        url = self._build_url(path)
        self.logger.debug(f"{method} {path}")

        try:
            response = self.session.request(method, url, **kwargs)
            response.raise_for_status()
        except HTTPError as e:
            self.logger.error(f"{method} {path} failed with status {e.response.status_code}")
            raise
        except RequestException as e:
            self.logger.error(f"{method} {path} failed: {e}")
            raise

        return ResponseParser.parse_response(response)

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Make GET request"""
        return self.request('GET', path, params=params if params is not None else {})

    def post(self, path: str, data: Any = None) -> Any:
        """Make POST request"""
        return self.request('POST', path, json=data)

    def put(self, path: str, data: Any = None) -> Any:
        """Make PUT request"""
        return self.request('PUT', path, json=data)

    def patch(self, path: str, data: Any = None) -> Any:
        """Make PATCH request"""
        return self.request('PATCH', path, json=data)

    def delete(self, path: str) -> Any:
        """Make DELETE request"""
        return self.request('DELETE', path)

    def close(self):
        """Close the session and release pooled connections"""
        self.session.close()
        self.logger.debug("HTTP session closed")

    def __enter__(self) -> 'Request':
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
