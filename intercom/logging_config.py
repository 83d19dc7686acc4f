"""
logging_config.py
------------------

Shared logging configuration and utilities for structured logging
throughout the Intercom client.  It uses Python's built‑in ``logging``
module so that log output can be captured by whatever handlers the host
application installs.  Messages are serialised as JSON to make them
easier to parse downstream.

Importing the package only attaches a ``NullHandler`` to the
``intercom`` logger; call :func:`configure_logging` to send records to
stdout with the standard format.
"""

from __future__ import annotations

import json
import logging
import sys
from functools import wraps
from typing import Any, Callable, Dict, Optional

# Keys whose values never reach the logs.
SENSITIVE_KEYWORDS = ("token", "password", "secret")
SENSITIVE_HEADERS = {"authorization", "proxy-authorization"}

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"

logger = logging.getLogger("intercom")
logger.addHandler(logging.NullHandler())


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach a stdout handler to the ``intercom`` logger.

    :param level: level name; defaults to ``Settings.log_level``
    :return: the configured package logger
    """
    if level is None:
        from intercom.core.config import get_settings

        level = get_settings().log_level
    if not any(getattr(h, "_intercom_stdout", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._intercom_stdout = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    logger.setLevel(level.upper())
    return logger


def _sanitize(obj: Any) -> Any:
    """Recursively sanitise objects for logging.

    Dictionaries will have keys containing 'token', 'password' or
    'secret' removed.  Lists and tuples are processed element‑wise.
    Byte strings are replaced by a size marker.

    Parameters
    ----------
    obj : Any
        Arbitrary Python object to sanitise.

    Returns
    -------
    Any
        A sanitised representation of the input suitable for JSON serialisation.
    """
    if isinstance(obj, (bytes, bytearray)):
        return f"<binary {len(obj)} bytes>"
    if isinstance(obj, dict):
        clean: Dict[str, Any] = {}
        for k, v in obj.items():
            if any(keyword in str(k).lower() for keyword in SENSITIVE_KEYWORDS):
                continue
            clean[k] = _sanitize(v)
        return clean
    if isinstance(obj, (list, tuple)):
        return [_sanitize(i) for i in obj]
    try:
        return json.loads(json.dumps(obj))
    except (TypeError, ValueError):
        return str(obj)


def _safe_headers(headers: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in headers.items() if str(k).lower() not in SENSITIVE_HEADERS}


def log_call(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator to log entry and exit of functions at DEBUG level.

    Arguments and return values pass through :func:`_sanitize` first.
    The first positional argument is skipped so that ``self`` (which
    holds credentials) is never serialised.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(json.dumps({
                "event": "call_start",
                "function": func.__qualname__,
                "args": _sanitize(args[1:]),
                "kwargs": _sanitize(kwargs),
            }))
        result = func(*args, **kwargs)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(json.dumps({
                "event": "call_end",
                "function": func.__qualname__,
                "result": _sanitize(result),
            }))
        return result

    return wrapper


def log_http_request(method: str, url: str, *, headers: Dict[str, Any] | None = None,
                     params: Any = None, json_body: Any = None,
                     status: int | None = None, duration_ms: float | None = None) -> None:
    """Log an outbound HTTP request at DEBUG level.

    Authorization headers are removed and only high‑level information
    (method, URL, status and duration) is recorded alongside the
    sanitised payload.  Invoked by the transport wrapper before and
    after each request.

    Parameters
    ----------
    method : str
        The HTTP method (GET, POST, etc.)
    url : str
        The URL being requested.
    headers : dict, optional
        Request headers.  Sensitive keys are removed.
    params : dict, optional
        Query parameters for GET requests.
    json_body : Any, optional
        JSON payload for non‑GET requests.
    status : int, optional
        Response status code (log end only).
    duration_ms : float, optional
        Time taken in milliseconds (log end only).
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return
    data: Dict[str, Any] = {
        "event": "http_request",
        "method": method,
        "url": url,
    }
    if headers is not None:
        data["headers"] = _sanitize(_safe_headers(headers))
    if params:
        data["params"] = _sanitize(params)
    if json_body:
        data["json"] = _sanitize(json_body)
    if status is not None:
        data["status"] = status
    if duration_ms is not None:
        data["duration_ms"] = round(duration_ms, 2)
    logger.debug(json.dumps(data))
