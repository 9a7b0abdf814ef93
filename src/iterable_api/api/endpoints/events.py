"""
Event Endpoints for the Iterable API client

Custom event tracking and event history lookups.
"""

from typing import Dict, Any, Optional

from .base_endpoint import BaseEndpoint


class EventsEndpoints(BaseEndpoint):
    """Event tracking API endpoints."""

    def _get_base_path(self) -> str:
        return '/events'

    def get(self, email: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Get the events recorded for a user

        Args:
            email: User email address
            params: Optional query parameters such as ``limit``
        """
        return self.request.get(self._build_endpoint('{email}', email=email), params)

    def track(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Track a custom event"""
        return self.request.post(self._build_endpoint('track'), data)

    def track_bulk(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Track a batch of custom events (``{"events": [...]}``)"""
        return self.request.post(self._build_endpoint('trackBulk'), data)

    def track_push_open(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.request.post(self._build_endpoint('trackPushOpen'), data)

    def track_in_app_open(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.request.post(self._build_endpoint('trackInAppOpen'), data)

    def track_in_app_click(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.request.post(self._build_endpoint('trackInAppClick'), data)
