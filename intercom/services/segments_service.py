from __future__ import annotations

from typing import Any, Mapping, Optional

from intercom.logging_config import log_call
from intercom.services.base import ResourceService


class SegmentsService(ResourceService):

    @log_call
    def get_segments(self, options: Optional[Mapping[str, Any]] = None) -> Any:
        return self.client.get("segments", self.options(options))

    @log_call
    def get_segment(self, segment_id: str, options: Optional[Mapping[str, Any]] = None) -> Any:
        return self.client.get(self.path("segments", segment_id), self.options(options))
