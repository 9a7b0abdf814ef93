"""
Base Endpoint Class for the Iterable API client

Every resource group binds fixed URL templates to a ``Request`` wrapper.
Endpoint objects hold no state besides that wrapper.
"""

from abc import ABC, abstractmethod
from urllib.parse import quote

from ..client import Request


def _quote_segment(value) -> str:
    """Percent-encode a value so it stays inside one path segment"""
    segment = quote(str(value), safe="@")
    # Dot segments are collapsed by URL normalization, even when escaped
    if segment in ("", ".", ".."):
        raise ValueError(f"{value!r} cannot be used as a path segment")
    return segment


class BaseEndpoint(ABC):
    """
    Abstract base class for Iterable resource endpoints.

    Subclasses return their resource root from ``_get_base_path`` and forward
    each method to one wrapper verb.
    """

    def __init__(self, request: Request):
        """
        Bind the endpoint to a wrapper

        Args:
            request: Configured Request wrapper (or anything with the same verbs)
        """
        self.request = request
        self.base_path = self._get_base_path()

    @abstractmethod
    def _get_base_path(self) -> str:
        """Return the base API path for this endpoint (e.g., '/lists')"""
        pass

    def _build_endpoint(self, path: str = '', **path_params) -> str:
        """
        Build full endpoint path with optional parameters

        Args:
            path: Additional path segments, may contain ``{name}`` placeholders
            **path_params: Path parameters to substitute

        Returns:
            Complete endpoint path
        """
        endpoint = self.base_path

        if path:
            endpoint = endpoint.rstrip('/') + '/' + path.lstrip('/')

        if path_params:
            endpoint = endpoint.format(**{
                name: _quote_segment(value) for name, value in path_params.items()
            })

        return endpoint

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base_path={self.base_path!r})"
