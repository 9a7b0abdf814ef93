"""
List Endpoints for the Iterable API client

Static list management: listing, creation, deletion and (un)subscription.
"""

from typing import Dict, Any, Optional

from .base_endpoint import BaseEndpoint


class ListsEndpoints(BaseEndpoint):
    """List management API endpoints."""

    def _get_base_path(self) -> str:
        return '/lists'

    def get(self) -> Dict[str, Any]:
        """
        Get all lists in the project

        Returns:
            ``{"lists": [...]}``
        """
        return self.request.get(self._build_endpoint())

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a new static list

        Args:
            data: List definition, e.g. ``{"name": "Newsletter"}``

        Returns:
            ``{"listId": ...}``
        """
        return self.request.post(self._build_endpoint(), data)

    def delete(self, list_id: int) -> Dict[str, Any]:
        """Delete a static list"""
        return self.request.delete(self._build_endpoint('{list_id}', list_id=list_id))

    def get_users(self, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        Get the users of a list

        Args:
            params: Query parameters, ``listId`` is required by the API

        Returns:
            Newline-separated user identifiers as text
        """
        return self.request.get(self._build_endpoint('getUsers'), params)

    def subscribe(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Add subscribers to a list"""
        return self.request.post(self._build_endpoint('subscribe'), data)

    def unsubscribe(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Remove subscribers from a list"""
        return self.request.post(self._build_endpoint('unsubscribe'), data)
