"""
Export Endpoints for the Iterable API client

Synchronous exports return their payload directly (newline-delimited JSON
or CSV text). Asynchronous export jobs are started, polled and cancelled
by job id.
"""

from typing import Dict, Any, Optional

from .base_endpoint import BaseEndpoint


class ExportEndpoints(BaseEndpoint):
    """
    Data export API endpoints.

    Provides methods for:
    - Synchronous JSON, CSV and per-user event exports
    - Asynchronous export job management
    """

    def _get_base_path(self) -> str:
        return '/export'

    def data_json(self, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        Export data as newline-delimited JSON

        Args:
            params: ``dataTypeName`` plus ``range`` or ``startDateTime``/``endDateTime``

        Returns:
            Export body as text
        """
        return self.request.get(self._build_endpoint('data.json'), params)

    def data_csv(self, params: Optional[Dict[str, Any]] = None) -> Any:
        """Export data as CSV text; takes the same parameters as ``data_json``"""
        return self.request.get(self._build_endpoint('data.csv'), params)

    def user_events(self, params: Optional[Dict[str, Any]] = None) -> Any:
        """Export every event of one user (``email`` or ``userId``)"""
        return self.request.get(self._build_endpoint('userEvents'), params)

    def start(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Start an asynchronous export job

        Args:
            data: ``dataTypeName``, ``outputFormat`` and a date range

        Returns:
            ``{"jobId": ...}``
        """
        return self.request.post(self._build_endpoint('start'), data)

    def status(self, job_id: int) -> Dict[str, Any]:
        """Get the state of an export job"""
        return self.request.get(self._build_endpoint('{job_id}', job_id=job_id))

    def files(self, job_id: int, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Get download links for the files of an export job

        Args:
            job_id: Export job id
            params: Optional ``startAfter`` to page through files
        """
        return self.request.get(self._build_endpoint('{job_id}/files', job_id=job_id), params)

    def cancel(self, job_id: int) -> Dict[str, Any]:
        """Cancel a queued or running export job"""
        return self.request.delete(self._build_endpoint('{job_id}', job_id=job_id))
