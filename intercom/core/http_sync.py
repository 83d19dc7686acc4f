"""
Synchronous transport helpers for the Intercom client.

``build_default_client`` creates the ``httpx.Client`` a pipeline uses
unless the caller installs another one, and ``send_request`` performs a
single request through any compatible transport, logging it on the way
out and back.  There is no retry loop: transport failures are mapped onto
:class:`intercom.exceptions.TransportError` and raised to the caller.

Usage example:

    from intercom.core.http_sync import build_default_client, send_request
    resp = send_request(build_default_client(), "GET", url, headers=headers)
"""

from __future__ import annotations

import json
import time
from typing import Any, Optional

import httpx

from intercom.core.config import Settings, get_settings
from intercom.exceptions import TransportError
from intercom.logging_config import log_http_request, logger


def build_default_client(settings: Optional[Settings] = None) -> httpx.Client:
    """Create the default transport with the configured timeout."""
    settings = settings or get_settings()
    return httpx.Client(timeout=httpx.Timeout(settings.http_timeout))


def send_request(transport: Any, method: str, url: Any, **options: Any) -> httpx.Response:
    """Issue exactly one request and return the raw response.

    Parameters
    ----------
    transport : httpx.Client or compatible
        Anything exposing ``request(method, url, **options)``.
    method : str
        The HTTP method (e.g. ``"GET"``, ``"POST"``).
    url : str
        The absolute URL to request, passed through verbatim.
    **options
        Keyword arguments forwarded to ``transport.request``.

    Raises
    ------
    TransportError
        If the request could not be sent or the URL is unusable.
    """
    headers = options.get("headers") or {}
    start_time = time.time()
    log_http_request(method, str(url), headers=headers, params=options.get("params"),
                     json_body=options.get("json"))
    try:
        resp = transport.request(method, url, **options)
    except (httpx.TransportError, httpx.InvalidURL) as exc:
        duration_ms = (time.time() - start_time) * 1000
        logger.error(json.dumps({
            "event": "http_error",
            "method": method,
            "url": str(url),
            "detail": str(exc),
            "duration_ms": round(duration_ms, 2),
        }))
        raise TransportError(f"{method} {url} failed: {exc}", method=method, url=url) from exc
    duration_ms = (time.time() - start_time) * 1000
    log_http_request(method, str(url), status=resp.status_code, duration_ms=duration_ms)
    return resp
