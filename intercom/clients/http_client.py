"""
clients/http_client.py
----------------------

The request pipeline shared by every Intercom resource accessor.

``HTTPClient`` owns the credentials and the caller's extra transport
options, builds the options for each GET/POST/PUT/DELETE call, sends it
through a single ``httpx`` transport and decodes the JSON answer. It
also follows pagination cursors handed back by list endpoints.

Extra options are keyword arguments of ``httpx.Client.request``
(``headers``, ``params``, ``timeout``, ``cookies``...). They are merged
recursively on top of the per-call defaults and win on every conflict,
so a caller header replaces a default header of the same name while the
remaining defaults survive. Settings that belong to the client rather
than to a request (proxy, TLS verification, connection limits) are
configured on an ``httpx.Client`` installed with :meth:`set_client`.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, Dict, Optional, Tuple

import httpx

from intercom.core.auth import build_basic_auth, build_default_headers, build_url, normalize_auth
from intercom.core.config import Settings, get_settings
from intercom.core.http_sync import build_default_client, send_request
from intercom.exceptions import DecodeError, HTTPStatusError
from intercom.logging_config import logger
from intercom.utils.merge import copy_tree, replace_recursive


class HTTPClient:
    """Authenticated JSON pipeline in front of the Intercom REST API.

    :param username: App ID, or an access token when ``password`` is empty
    :param password: API key
    :param extra_options: nested mapping of request options merged over
        the defaults of every call; nested dicts are copied, other values
        (cookie jars, auth objects) are kept by reference. An ``auth``
        given as a two-item list is sent as a Basic auth pair.
    :param settings: overrides the cached :func:`get_settings` instance
    """

    def __init__(self, username: str, password: str,
                 extra_options: Optional[Mapping[str, Any]] = None,
                 *, settings: Optional[Settings] = None) -> None:
        settings = settings or get_settings()
        self.base_url = settings.base_url
        self._username = username
        self._password = password
        self._extra_options: Dict[str, Any] = copy_tree(dict(extra_options or {}))
        self._client: Any = build_default_client(settings)

    def set_client(self, client: Any) -> None:
        """Replace the underlying transport.

        Any object with ``request(method, url, **options)`` returning an
        ``httpx.Response`` works, e.g. an ``httpx.Client`` built with a
        ``MockTransport`` or proxy settings. The previous transport is
        not closed.
        """
        self._client = client

    def close(self) -> None:
        """Close the underlying transport and release its connections."""
        close = getattr(self._client, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def get_auth(self) -> Tuple[str, str]:
        return build_basic_auth(self._username, self._password)

    def merge_options(self, base: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """Merge ``base`` with the stored extra options.

        Extra options take precedence at every nesting level. Neither
        ``base`` nor the stored options are modified.
        """
        return replace_recursive(base or {}, self._extra_options)

    def _default_options(self, **payload: Any) -> Dict[str, Any]:
        options: Dict[str, Any] = dict(payload)
        options["auth"] = self.get_auth()
        options["headers"] = build_default_headers()
        return options

    def get(self, endpoint: str, query: Optional[Mapping[str, Any]] = None) -> Any:
        """Send a GET request with ``query`` as the query string."""
        options = self.merge_options(self._default_options(params=dict(query or {})))
        return self._dispatch("GET", build_url(self.base_url, endpoint), options)

    def post(self, endpoint: str, body: Any = None) -> Any:
        """Send a POST request with ``body`` as the JSON payload."""
        options = self.merge_options(self._default_options(json=body))
        return self._dispatch("POST", build_url(self.base_url, endpoint), options)

    def put(self, endpoint: str, body: Any = None) -> Any:
        """Send a PUT request with ``body`` as the JSON payload."""
        options = self.merge_options(self._default_options(json=body))
        return self._dispatch("PUT", build_url(self.base_url, endpoint), options)

    def delete(self, endpoint: str, body: Any = None) -> Any:
        """Send a DELETE request with ``body`` as the JSON payload."""
        options = self.merge_options(self._default_options(json=body))
        return self._dispatch("DELETE", build_url(self.base_url, endpoint), options)

    def next_page(self, pages: Any) -> Any:
        """Fetch the page referenced by a ``pages`` cursor.

        ``pages`` is the pagination object of a list response, as a
        mapping or an object with a ``next`` attribute. Its ``next`` URL
        is requested verbatim; a missing or malformed URL fails in the
        transport like any other bad URL.
        """
        if isinstance(pages, Mapping):
            url = pages.get("next")
        else:
            url = getattr(pages, "next", None)
        options = self.merge_options(self._default_options())
        return self._dispatch("GET", url if url is not None else "", options)

    def _dispatch(self, method: str, url: str, options: Dict[str, Any]) -> Any:
        if "auth" in options:
            options["auth"] = normalize_auth(options["auth"])
        response = send_request(self._client, method, url, **options)
        return self._handle_response(method, url, response)

    def _handle_response(self, method: str, url: str, response: httpx.Response) -> Any:
        if not 200 <= response.status_code < 300:
            logger.error(json.dumps({
                "event": "http_status_error",
                "method": method,
                "url": str(url),
                "status_code": response.status_code,
            }))
            raise HTTPStatusError(
                f"{method} {url} returned {response.status_code}",
                status_code=response.status_code,
                response=response,
            )
        if response.status_code == 204 and not response.content:
            return None
        try:
            return json.loads(response.content)
        except ValueError as exc:
            logger.error(json.dumps({
                "event": "http_decode_error",
                "method": method,
                "url": str(url),
                "detail": str(exc),
            }))
            raise DecodeError(f"{method} {url} returned a non-JSON body", text=response.text) from exc
