"""
services/messages_service.py
----------------------------

Admin-initiated and user-initiated messages.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from intercom.logging_config import log_call
from intercom.services.base import ResourceService


class MessagesService(ResourceService):

    @log_call
    def create(self, options: Optional[Mapping[str, Any]] = None) -> Any:
        return self.client.post("messages", self.options(options))
