"""
Push Endpoints for the Iterable API client
"""

from typing import Dict, Any

from .base_endpoint import BaseEndpoint


class PushEndpoints(BaseEndpoint):
    """Mobile push API endpoints."""

    def _get_base_path(self) -> str:
        return '/push'

    def target(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Send a push campaign to a single recipient"""
        return self.request.post(self._build_endpoint('target'), data)
