"""
services/counts_service.py
--------------------------

App-wide and per-type counts, e.g. ``{"type": "company", "count": "user"}``.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from intercom.logging_config import log_call
from intercom.services.base import ResourceService


class CountsService(ResourceService):

    @log_call
    def get_counts(self, options: Optional[Mapping[str, Any]] = None) -> Any:
        return self.client.get("counts", self.options(options))
