"""
core/auth.py
-------------

Utility functions for building authenticated requests to Intercom.

These helpers centralise construction of endpoint URLs, the HTTP Basic
credential pair and the default headers attached to every call.
"""

from __future__ import annotations

from typing import Any, Dict, Tuple

DEFAULT_HEADERS: Dict[str, str] = {"Accept": "application/json"}


def build_url(base_url: str, endpoint: str) -> str:
    """Join the API origin and a relative endpoint.

    :param base_url: origin such as ``https://api.intercom.io``
    :param endpoint: relative path such as ``contacts``
    :return: ``<base_url>/<endpoint>``
    """
    return f"{base_url.rstrip('/')}/{endpoint}"


def build_basic_auth(username: str, password: str) -> Tuple[str, str]:
    """Return the HTTP Basic pair in the form ``httpx`` accepts."""
    return (username, password)


def normalize_auth(auth: Any) -> Any:
    """Turn a ``[username, password]`` list into the tuple ``httpx`` expects.

    Anything else (tuples, ``httpx.Auth`` instances, ``None``) is
    returned unchanged.
    """
    if isinstance(auth, list) and len(auth) == 2:
        return tuple(auth)
    return auth


def build_default_headers() -> Dict[str, str]:
    """Headers every request carries; extra options may override them."""
    return dict(DEFAULT_HEADERS)
