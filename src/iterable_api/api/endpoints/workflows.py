"""
Workflow Endpoints for the Iterable API client
"""

from typing import Dict, Any, Optional

from .base_endpoint import BaseEndpoint


class WorkflowsEndpoints(BaseEndpoint):
    """Journey (workflow) API endpoints."""

    def _get_base_path(self) -> str:
        return '/workflows'

    def get(self, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """List journeys, optionally paged with ``page`` and ``pageSize``"""
        return self.request.get(self._build_endpoint(), params)

    def trigger(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Trigger a journey for a user or a list

        Args:
            data: ``workflowId`` and ``email`` or ``listId``, plus optional ``dataFields``
        """
        return self.request.post(self._build_endpoint('triggerWorkflow'), data)
