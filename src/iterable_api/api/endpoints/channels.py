"""
Channel Endpoints for the Iterable API client
"""

from typing import Dict, Any

from .base_endpoint import BaseEndpoint


class ChannelsEndpoints(BaseEndpoint):
    """Messaging channel API endpoints."""

    def _get_base_path(self) -> str:
        return '/channels'

    def get(self) -> Dict[str, Any]:
        """Get all messaging channels (``{"channels": [...]}``)"""
        return self.request.get(self._build_endpoint())
