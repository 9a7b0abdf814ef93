"""
User Endpoints for the Iterable API client

Handles user profile lookups, updates, deletion, subscription preferences
and device/browser token registration.
"""

from typing import Dict, Any, Optional

from .base_endpoint import BaseEndpoint


class UsersEndpoints(BaseEndpoint):
    """
    User management API endpoints.

    Users are addressed either by email or by ``userId``.
    """

    def _get_base_path(self) -> str:
        return '/users'

    def get(self, email: str) -> Dict[str, Any]:
        """
        Get a user by email

        Args:
            email: User email address

        Returns:
            ``{"user": {...}}``
        """
        return self.request.get(self._build_endpoint('{email}', email=email))

    def get_by_user_id(self, user_id: str) -> Dict[str, Any]:
        """Get a user by userId"""
        return self.request.get(self._build_endpoint('byUserId/{user_id}', user_id=user_id))

    def delete(self, email: str) -> Dict[str, Any]:
        """Delete a user by email"""
        return self.request.delete(self._build_endpoint('{email}', email=email))

    def delete_by_user_id(self, user_id: str) -> Dict[str, Any]:
        """Delete a user by userId"""
        return self.request.delete(self._build_endpoint('byUserId/{user_id}', user_id=user_id))

    def update(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create or update a user profile

        Args:
            data: ``email`` or ``userId`` plus ``dataFields`` to merge

        Returns:
            Response envelope
        """
        return self.request.post(self._build_endpoint('update'), data)

    def update_email(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Change a user's email address"""
        return self.request.post(self._build_endpoint('updateEmail'), data)

    def bulk_update(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Update many users in one call"""
        return self.request.post(self._build_endpoint('bulkUpdate'), data)

    def update_subscriptions(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Replace a user's subscription preferences"""
        return self.request.post(self._build_endpoint('updateSubscriptions'), data)

    def bulk_update_subscriptions(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Replace subscription preferences for many users"""
        return self.request.post(self._build_endpoint('bulkUpdateSubscriptions'), data)

    def register_device_token(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Register a mobile push token"""
        return self.request.post(self._build_endpoint('registerDeviceToken'), data)

    def register_browser_token(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Register a web push browser token"""
        return self.request.post(self._build_endpoint('registerBrowserToken'), data)

    def disable_device(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Disable push for a device token"""
        return self.request.post(self._build_endpoint('disableDevice'), data)

    def get_fields(self) -> Dict[str, Any]:
        """Get the user profile fields defined in the project"""
        return self.request.get(self._build_endpoint('getFields'))

    def get_sent_messages(self, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Get messages sent to a user

        Args:
            params: ``email`` or ``userId`` plus optional ``limit``, ``campaignIds``,
                ``startDateTime`` and ``endDateTime``
        """
        return self.request.get(self._build_endpoint('getSentMessages'), params)
