"""
services/events_service.py
--------------------------

Custom events submitted against users.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from intercom.logging_config import log_call
from intercom.services.base import ResourceService


class EventsService(ResourceService):

    @log_call
    def create(self, options: Optional[Mapping[str, Any]] = None) -> Any:
        """Submit an event; ``options`` needs ``event_name``, ``created_at`` and a user reference."""
        return self.client.post("events", self.options(options))

    @log_call
    def get_events(self, options: Optional[Mapping[str, Any]] = None) -> Any:
        """List events of one user; the API requires ``type=user`` and a user filter."""
        return self.client.get("events", self.options(options))
