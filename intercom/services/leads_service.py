"""
services/leads_service.py
-------------------------

Leads live under the ``contacts`` endpoint of the API.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from intercom.logging_config import log_call
from intercom.services.base import ResourceService


class LeadsService(ResourceService):

    @log_call
    def create(self, options: Optional[Mapping[str, Any]] = None) -> Any:
        return self.client.post("contacts", self.options(options))

    @log_call
    def update(self, options: Optional[Mapping[str, Any]] = None) -> Any:
        return self.client.post("contacts", self.options(options))

    @log_call
    def get_leads(self, options: Optional[Mapping[str, Any]] = None) -> Any:
        return self.client.get("contacts", self.options(options))

    @log_call
    def scroll_leads(self, options: Optional[Mapping[str, Any]] = None) -> Any:
        return self.client.get("contacts/scroll", self.options(options))

    @log_call
    def get_lead(self, lead_id: str, options: Optional[Mapping[str, Any]] = None) -> Any:
        return self.client.get(self.path("contacts", lead_id), self.options(options))

    @log_call
    def delete_lead(self, lead_id: str, options: Optional[Mapping[str, Any]] = None) -> Any:
        return self.client.delete(self.path("contacts", lead_id), self.options(options))

    @log_call
    def convert_lead(self, options: Optional[Mapping[str, Any]] = None) -> Any:
        """Convert a lead into a user.

        ``options`` carries ``contact`` (the lead) and ``user`` (the
        target user, created when it does not exist).
        """
        return self.client.post("contacts/convert", self.options(options))
