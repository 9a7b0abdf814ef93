"""
Email Endpoints for the Iterable API client
"""

from typing import Dict, Any, Optional

from .base_endpoint import BaseEndpoint


class EmailEndpoints(BaseEndpoint):
    """Email messaging API endpoints."""

    def _get_base_path(self) -> str:
        return '/email'

    def target(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Send an email campaign to a single recipient

        Args:
            data: ``campaignId`` and ``recipientEmail`` plus optional
                ``dataFields``, ``sendAt`` and ``allowRepeatMarketingSends``
        """
        return self.request.post(self._build_endpoint('target'), data)

    def view_in_browser(self, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Get the rendered HTML of a sent email (``email`` and ``messageId``)"""
        return self.request.get(self._build_endpoint('viewInBrowser'), params)
