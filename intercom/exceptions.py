"""
exceptions.py
-------------

Errors raised by the request pipeline. Every failure surfaces as one of
these; the originating ``httpx`` or ``json`` exception, where there is
one, is chained as ``__cause__``.
"""

from __future__ import annotations

from typing import Any, Optional


class IntercomError(Exception):
    """Base class for all client errors."""


class TransportError(IntercomError):
    """The request never produced a response (DNS, connect, TLS, bad URL)."""

    def __init__(self, message: str, *, method: str, url: Any) -> None:
        super().__init__(message)
        self.method = method
        self.url = url


class HTTPStatusError(IntercomError):
    """The service answered with a non-2xx status.

    The body is left untouched on :attr:`response`; API validation
    errors usually carry a JSON error list there.
    """

    def __init__(self, message: str, *, status_code: int, response: Any) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class DecodeError(IntercomError, ValueError):
    """A successful response whose body is not valid JSON."""

    def __init__(self, message: str, *, text: Optional[str]) -> None:
        super().__init__(message)
        self.text = text
