"""
Catalog Endpoints for the Iterable API client

Handles catalog lifecycle, field mappings and catalog item CRUD.
Items are created/replaced with PUT and partially updated with PATCH.
"""

from typing import Dict, Any, Optional

from .base_endpoint import BaseEndpoint


class CatalogsEndpoints(BaseEndpoint):
    """
    Catalog API endpoints.

    Provides methods for:
    - Catalog creation, listing and deletion
    - Field mapping (schema) management
    - Item retrieval, creation, update and deletion
    """

    def _get_base_path(self) -> str:
        return '/catalogs'

    def get(self, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        List the catalogs in the project

        Args:
            params: Optional ``page`` and ``pageSize``
        """
        return self.request.get(self._build_endpoint(), params)

    def create(self, name: str) -> Dict[str, Any]:
        """
        Create a catalog

        Args:
            name: Catalog name, used as the path segment

        Returns:
            Response envelope
        """
        return self.request.post(self._build_endpoint('{name}', name=name), {})

    def delete(self, name: str) -> Dict[str, Any]:
        """Delete a catalog and all its items"""
        return self.request.delete(self._build_endpoint('{name}', name=name))

    def get_field_mappings(self, name: str) -> Dict[str, Any]:
        """Get the field type definitions of a catalog"""
        return self.request.get(self._build_endpoint('{name}/fieldMappings', name=name))

    def update_field_mappings(self, name: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Set field type definitions for a catalog

        Args:
            name: Catalog name
            data: ``{"mappingsUpdates": [{"fieldName": ..., "fieldType": ...}]}``
        """
        return self.request.put(self._build_endpoint('{name}/fieldMappings', name=name), data)

    def get_items(self, name: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        List the items of a catalog

        Args:
            name: Catalog name
            params: Optional ``page``, ``pageSize``, ``orderBy`` and ``sortAscending``
        """
        return self.request.get(self._build_endpoint('{name}/items', name=name), params)

    def get_item(self, name: str, item_id: str) -> Dict[str, Any]:
        """Get a single catalog item"""
        return self.request.get(self._item_endpoint(name, item_id))

    def create_item(self, name: str, item_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create or replace a catalog item

        Args:
            name: Catalog name
            item_id: Item identifier
            data: ``{"value": {...}}``
        """
        return self.request.put(self._item_endpoint(name, item_id), data)

    def update_item(self, name: str, item_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge fields into a catalog item, creating it if missing

        Args:
            name: Catalog name
            item_id: Item identifier
            data: ``{"update": {...}}``
        """
        return self.request.patch(self._item_endpoint(name, item_id), data)

    def delete_item(self, name: str, item_id: str) -> Dict[str, Any]:
        """Delete a catalog item"""
        return self.request.delete(self._item_endpoint(name, item_id))

    def _item_endpoint(self, name: str, item_id: str) -> str:
        return self._build_endpoint('{name}/items/{item_id}', name=name, item_id=item_id)
