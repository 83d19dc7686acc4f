"""
services/tags_service.py
------------------------

Tags: creating, applying and listing.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from intercom.logging_config import log_call
from intercom.services.base import ResourceService


class TagsService(ResourceService):

    @log_call
    def tag(self, options: Optional[Mapping[str, Any]] = None) -> Any:
        """Create a tag, or tag/untag the users or companies listed in ``options``."""
        return self.client.post("tags", self.options(options))

    @log_call
    def get_tags(self, options: Optional[Mapping[str, Any]] = None) -> Any:
        return self.client.get("tags", self.options(options))
