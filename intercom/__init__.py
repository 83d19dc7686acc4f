"""
intercom package
----------------

Synchronous client for the Intercom REST API. Import
:class:`IntercomClient` for the full client with resource accessors, or
:class:`HTTPClient` for the bare request pipeline.
"""

from intercom.client import IntercomClient
from intercom.clients.http_client import HTTPClient
from intercom.exceptions import DecodeError, HTTPStatusError, IntercomError, TransportError
from intercom.logging_config import configure_logging

__version__ = "0.1.0"

__all__ = [
    "IntercomClient",
    "HTTPClient",
    "IntercomError",
    "TransportError",
    "HTTPStatusError",
    "DecodeError",
    "configure_logging",
]
