"""
services/companies_service.py
-----------------------------

Companies and the users attached to them.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from intercom.logging_config import log_call
from intercom.services.base import ResourceService


class CompaniesService(ResourceService):

    @log_call
    def create(self, options: Optional[Mapping[str, Any]] = None) -> Any:
        """Create or update a company identified by ``company_id``."""
        return self.client.post("companies", self.options(options))

    @log_call
    def update(self, options: Optional[Mapping[str, Any]] = None) -> Any:
        return self.create(options)

    @log_call
    def get_companies(self, options: Optional[Mapping[str, Any]] = None) -> Any:
        return self.client.get("companies", self.options(options))

    @log_call
    def get_company(self, company_id: str, options: Optional[Mapping[str, Any]] = None) -> Any:
        return self.client.get(self.path("companies", company_id), self.options(options))

    @log_call
    def get_company_users(self, company_id: str, options: Optional[Mapping[str, Any]] = None) -> Any:
        return self.client.get(self.path("companies", company_id, "users"), self.options(options))
