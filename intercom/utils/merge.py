"""
utils/merge.py
---------------

Recursive option merging used by the request pipeline.

``replace_recursive`` overlays one nested mapping on another: where both
sides hold a mapping under the same key the two are merged, otherwise
the overlay value replaces the base value outright.  Lists and tuples
are treated as leaves, so an overlay ``auth`` pair replaces the default
pair rather than being spliced into it.

Only the ``dict`` skeleton is rebuilt.  Leaf values (``httpx.Cookies``,
``httpx.Auth`` instances, callables in ``extensions``...) are passed
through by reference; they may hold locks and cannot be deep-copied.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict


def copy_tree(value: Any) -> Any:
    """Return ``value`` with every nested ``dict`` rebuilt and leaves shared."""
    if isinstance(value, dict):
        return {key: copy_tree(item) for key, item in value.items()}
    return value


def replace_recursive(base: Mapping[str, Any], overlay: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a new dict with ``overlay`` merged on top of ``base``.

    Neither argument is modified, and every dict in the result is new, so
    adding or replacing keys in the result never reaches the inputs.

    >>> replace_recursive({"headers": {"Accept": "a"}}, {"headers": {"X": "b"}})
    {'headers': {'Accept': 'a', 'X': 'b'}}
    """
    merged: Dict[str, Any] = {key: copy_tree(value) for key, value in base.items()}
    for key, value in overlay.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = replace_recursive(current, value)
        else:
            merged[key] = copy_tree(value)
    return merged
