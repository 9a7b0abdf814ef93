"""
SMS Endpoints for the Iterable API client
"""

from typing import Dict, Any

from .base_endpoint import BaseEndpoint


class SmsEndpoints(BaseEndpoint):
    """SMS messaging API endpoints."""

    def _get_base_path(self) -> str:
        return '/sms'

    def target(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Send an SMS campaign to a single recipient

        Args:
            data: ``campaignId`` and ``recipientEmail`` (or ``recipientUserId``),
                plus optional ``dataFields`` and ``sendAt``

        Returns:
            Response envelope
        """
        return self.request.post(self._build_endpoint('target'), data)
