"""
services/conversations_service.py
---------------------------------

Conversations: listing, fetching, replying and marking as read.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from intercom.logging_config import log_call
from intercom.services.base import ResourceService


class ConversationsService(ResourceService):

    @log_call
    def get_conversations(self, options: Optional[Mapping[str, Any]] = None) -> Any:
        return self.client.get("conversations", self.options(options))

    @log_call
    def get_conversation(self, conversation_id: str, options: Optional[Mapping[str, Any]] = None) -> Any:
        return self.client.get(self.path("conversations", conversation_id), self.options(options))

    @log_call
    def reply_to_conversation(self, conversation_id: str, options: Optional[Mapping[str, Any]] = None) -> Any:
        """Reply as an admin or a user; ``options`` holds ``type``, ``message_type`` and ``body``."""
        return self.client.post(self.path("conversations", conversation_id, "reply"), self.options(options))

    @log_call
    def reply_to_last_conversation(self, options: Optional[Mapping[str, Any]] = None) -> Any:
        """Reply to the last conversation of the user identified in ``options``."""
        return self.client.post("conversations/last/reply", self.options(options))

    @log_call
    def mark_conversation_as_read(self, conversation_id: str) -> Any:
        return self.client.put(self.path("conversations", conversation_id), {"read": True})
