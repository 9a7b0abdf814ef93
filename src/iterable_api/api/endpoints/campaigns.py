"""
Campaign Endpoints for the Iterable API client
"""

from typing import Dict, Any, Optional

from .base_endpoint import BaseEndpoint


class CampaignsEndpoints(BaseEndpoint):
    """Campaign API endpoints."""

    def _get_base_path(self) -> str:
        return '/campaigns'

    def get(self) -> Dict[str, Any]:
        """Get all campaigns (``{"campaigns": [...]}``)"""
        return self.request.get(self._build_endpoint())

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a blast campaign from an existing template

        Args:
            data: ``name``, ``listIds`` and ``templateId`` plus optional
                ``sendAt`` and ``dataFields``

        Returns:
            ``{"campaignId": ...}``
        """
        return self.request.post(self._build_endpoint('create'), data)

    def metrics(self, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        Export campaign metrics

        Args:
            params: ``campaignId`` (repeatable) and optional date range

        Returns:
            CSV text
        """
        return self.request.get(self._build_endpoint('metrics'), params)

    def child_campaigns(self, campaign_id: int,
                        params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Get the child campaigns of a recurring campaign"""
        endpoint = self._build_endpoint('recurring/{campaign_id}/childCampaigns',
                                        campaign_id=campaign_id)
        return self.request.get(endpoint, params)
