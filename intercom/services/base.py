"""
services/base.py
----------------

Common plumbing for the resource accessors. Each accessor keeps a
reference to the shared :class:`~intercom.clients.http_client.HTTPClient`
and only builds paths and payloads; all transport work happens in the
pipeline.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional
from urllib.parse import quote

from intercom.logging_config import log_call


class ResourceService:
    """Base class for accessors bound to one pipeline."""

    def __init__(self, client: Any) -> None:
        self.client = client

    @staticmethod
    def path(*parts: Any) -> str:
        """Join path segments, URL-quoting each one."""
        return "/".join(quote(str(part), safe="") for part in parts)

    @staticmethod
    def options(options: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """Copy caller options into a fresh dict; ``None`` becomes ``{}``."""
        return dict(options or {})

    @log_call
    def next_page(self, pages: Any) -> Any:
        """Fetch the next page of a list previously returned by this accessor."""
        return self.client.next_page(pages)
