"""
Template Endpoints for the Iterable API client

Template listing plus get/update/upsert for each message medium.
Each medium lives under ``/templates/<kind>/``.
"""

from typing import Dict, Any, Optional

from .base_endpoint import BaseEndpoint

TEMPLATE_KINDS = ('email', 'push', 'sms', 'inapp')


class TemplatesEndpoints(BaseEndpoint):
    """
    Template API endpoints.

    Provides methods for:
    - Listing templates and lookup by client template id
    - Reading, updating and upserting email, push, SMS and in-app templates
    """

    def _get_base_path(self) -> str:
        return '/templates'

    def get(self, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        List templates

        Args:
            params: Optional ``templateType``, ``messageMedium``,
                ``startDateTime`` and ``endDateTime``
        """
        return self.request.get(self._build_endpoint(), params)

    def get_by_client_template_id(self, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Look up templates by ``clientTemplateId``"""
        return self.request.get(self._build_endpoint('getByClientTemplateId'), params)

    # Email

    def get_email(self, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Get an email template (``templateId``)"""
        return self._get_template('email', params)

    def update_email(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._update_template('email', data)

    def upsert_email(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Create or update an email template keyed by ``clientTemplateId``"""
        return self._upsert_template('email', data)

    # Push

    def get_push(self, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self._get_template('push', params)

    def update_push(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._update_template('push', data)

    def upsert_push(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._upsert_template('push', data)

    # SMS

    def get_sms(self, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self._get_template('sms', params)

    def update_sms(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._update_template('sms', data)

    def upsert_sms(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._upsert_template('sms', data)

    # In-app

    def get_inapp(self, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self._get_template('inapp', params)

    def update_inapp(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._update_template('inapp', data)

    def upsert_inapp(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._upsert_template('inapp', data)

    def _get_template(self, kind: str, params: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        return self.request.get(self._build_endpoint('{kind}/get', kind=kind), params)

    def _update_template(self, kind: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.request.post(self._build_endpoint('{kind}/update', kind=kind), data)

    def _upsert_template(self, kind: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.request.post(self._build_endpoint('{kind}/upsert', kind=kind), data)
