"""
services/users_service.py
-------------------------

Users: create, update, list, scroll, fetch and delete.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from intercom.logging_config import log_call
from intercom.services.base import ResourceService


class UsersService(ResourceService):

    @log_call
    def create(self, options: Optional[Mapping[str, Any]] = None) -> Any:
        """Create a user, or update it when ``user_id``/``email`` already exists."""
        return self.client.post("users", self.options(options))

    @log_call
    def update(self, options: Optional[Mapping[str, Any]] = None) -> Any:
        return self.create(options)

    @log_call
    def get_users(self, options: Optional[Mapping[str, Any]] = None) -> Any:
        """List users; ``options`` are query filters such as ``email`` or ``tag_id``."""
        return self.client.get("users", self.options(options))

    @log_call
    def scroll_users(self, options: Optional[Mapping[str, Any]] = None) -> Any:
        """Page through every user with the scroll API; pass the returned ``scroll_param`` back in."""
        return self.client.get("users/scroll", self.options(options))

    @log_call
    def get_user(self, user_id: str, options: Optional[Mapping[str, Any]] = None) -> Any:
        return self.client.get(self.path("users", user_id), self.options(options))

    @log_call
    def delete_user(self, user_id: str, options: Optional[Mapping[str, Any]] = None) -> Any:
        return self.client.delete(self.path("users", user_id), self.options(options))
