"""
Experiment Endpoints for the Iterable API client
"""

from typing import Any, Dict, Optional

from .base_endpoint import BaseEndpoint


class ExperimentsEndpoints(BaseEndpoint):
    """Experiment API endpoints."""

    def _get_base_path(self) -> str:
        return '/experiments'

    def metrics(self, params: Optional[Dict[str, Any]] = None) -> Any:
        """Export experiment metrics as CSV text"""
        return self.request.get(self._build_endpoint('metrics'), params)
