"""
In-App Message Endpoints for the Iterable API client
"""

from typing import Dict, Any, Optional

from .base_endpoint import BaseEndpoint


class InAppEndpoints(BaseEndpoint):
    """In-app messaging API endpoints."""

    def _get_base_path(self) -> str:
        return '/inApp'

    def get_messages(self, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Get the in-app messages queued for a user

        Args:
            params: ``email`` or ``userId`` and ``count``, plus optional
                ``platform`` and ``SDKVersion``
        """
        return self.request.get(self._build_endpoint('getMessages'), params)

    def target(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Send an in-app campaign to a single recipient"""
        return self.request.post(self._build_endpoint('target'), data)
