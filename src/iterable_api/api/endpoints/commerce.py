"""
Commerce Endpoints for the Iterable API client

Purchase tracking and shopping cart updates.
"""

from typing import Dict, Any

from .base_endpoint import BaseEndpoint


class CommerceEndpoints(BaseEndpoint):
    """Commerce API endpoints."""

    def _get_base_path(self) -> str:
        return '/commerce'

    def track_purchase(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Track a purchase

        Args:
            data: ``user``, ``items`` and ``total`` plus optional
                ``campaignId``, ``templateId`` and ``dataFields``
        """
        return self.request.post(self._build_endpoint('trackPurchase'), data)

    def update_cart(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Replace a user's shopping cart (``user`` and ``items``)"""
        return self.request.post(self._build_endpoint('updateCart'), data)
