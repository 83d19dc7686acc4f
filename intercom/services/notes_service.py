"""
services/notes_service.py
-------------------------

Notes attached to users by admins.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from intercom.logging_config import log_call
from intercom.services.base import ResourceService


class NotesService(ResourceService):

    @log_call
    def create(self, options: Optional[Mapping[str, Any]] = None) -> Any:
        return self.client.post("notes", self.options(options))

    @log_call
    def get_notes(self, options: Optional[Mapping[str, Any]] = None) -> Any:
        """List the notes of a user given by ``user_id``, ``email`` or ``id``."""
        return self.client.get("notes", self.options(options))

    @log_call
    def get_note(self, note_id: str, options: Optional[Mapping[str, Any]] = None) -> Any:
        return self.client.get(self.path("notes", note_id), self.options(options))
