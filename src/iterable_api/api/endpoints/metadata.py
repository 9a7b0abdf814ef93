"""
Metadata Endpoints for the Iterable API client

Key/value storage grouped in named tables.
"""

from typing import Dict, Any

from .base_endpoint import BaseEndpoint


class MetadataEndpoints(BaseEndpoint):
    """Metadata table API endpoints."""

    def _get_base_path(self) -> str:
        return '/metadata'

    def get_tables(self) -> Dict[str, Any]:
        """List metadata tables"""
        return self.request.get(self._build_endpoint())

    def get_table(self, table: str) -> Dict[str, Any]:
        """List the keys of a table"""
        return self.request.get(self._build_endpoint('{table}', table=table))

    def delete_table(self, table: str) -> Dict[str, Any]:
        return self.request.delete(self._build_endpoint('{table}', table=table))

    def get_key(self, table: str, key: str) -> Dict[str, Any]:
        """Get the value stored under a key"""
        return self.request.get(self._key_endpoint(table, key))

    def put_key(self, table: str, key: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create or replace the value stored under a key

        Args:
            table: Table name
            key: Key name
            data: ``{"value": {...}}``
        """
        return self.request.put(self._key_endpoint(table, key), data)

    def delete_key(self, table: str, key: str) -> Dict[str, Any]:
        return self.request.delete(self._key_endpoint(table, key))

    def _key_endpoint(self, table: str, key: str) -> str:
        return self._build_endpoint('{table}/{key}', table=table, key=key)
