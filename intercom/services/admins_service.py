from __future__ import annotations

from typing import Any, Mapping, Optional

from intercom.logging_config import log_call
from intercom.services.base import ResourceService


class AdminsService(ResourceService):

    @log_call
    def get_admins(self, options: Optional[Mapping[str, Any]] = None) -> Any:
        return self.client.get("admins", self.options(options))

    @log_call
    def get_admin(self, admin_id: str, options: Optional[Mapping[str, Any]] = None) -> Any:
        return self.client.get(self.path("admins", admin_id), self.options(options))
