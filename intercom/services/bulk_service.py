"""
services/bulk_service.py
------------------------

Bulk jobs. ``options`` carries ``items`` (each with a ``method`` and
``data_type``) and optionally ``job`` to append to an existing job.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from intercom.logging_config import log_call
from intercom.services.base import ResourceService


class BulkService(ResourceService):

    @log_call
    def users(self, options: Optional[Mapping[str, Any]] = None) -> Any:
        return self.client.post("bulk/users", self.options(options))

    @log_call
    def events(self, options: Optional[Mapping[str, Any]] = None) -> Any:
        return self.client.post("bulk/events", self.options(options))
