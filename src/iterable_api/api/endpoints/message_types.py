"""
Message Type Endpoints for the Iterable API client
"""

from typing import Dict, Any

from .base_endpoint import BaseEndpoint


class MessageTypesEndpoints(BaseEndpoint):
    """Message type API endpoints."""

    def _get_base_path(self) -> str:
        return '/messageTypes'

    def get(self) -> Dict[str, Any]:
        """Get all message types (``{"messageTypes": [...]}``)"""
        return self.request.get(self._build_endpoint())
