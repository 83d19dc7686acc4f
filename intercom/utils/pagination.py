"""
utils/pagination.py
--------------------

Helpers for walking Intercom list responses page by page.

List endpoints return a ``pages`` object whose ``next`` field holds the
absolute URL of the following page.  ``iter_pages`` follows those
cursors through :meth:`HTTPClient.next_page` and enforces sensible
limits to avoid infinite loops or API misuse.  Iteration stops when one
of the following conditions is met:

* The page has no ``pages`` object or its ``next`` is missing/empty.
* The ``next`` URL is identical to one already requested.
* The configured maximum number of pages or items is reached.

Every page after the first is a separate request issued only when the
caller asks for it.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterator, List, Optional

from intercom.core.config import get_settings


def next_url(page: Any) -> Optional[str]:
    """Return the ``pages.next`` URL of a decoded list response, if any."""
    if not isinstance(page, Mapping):
        return None
    pages = page.get("pages")
    if not isinstance(pages, Mapping):
        return None
    return pages.get("next") or None


def iter_pages(client: Any, first_page: Any, *, max_pages: Optional[int] = None) -> Iterator[Any]:
    """Yield ``first_page`` and every page reachable through its cursors.

    :param client: pipeline exposing ``next_page(pages)``
    :param first_page: decoded response of the initial list call
    :param max_pages: upper bound on yielded pages (defaults to
        ``Settings.max_pages``)
    """
    if max_pages is None:
        max_pages = get_settings().max_pages
    page = first_page
    seen = set()
    page_count = 0
    while True:
        yield page
        page_count += 1
        if page_count >= max_pages:
            break
        url = next_url(page)
        if url is None or url in seen:
            break
        seen.add(url)
        page = client.next_page(page["pages"])


def paginate(
    client: Any,
    first_page: Any,
    key: str,
    *,
    max_pages: Optional[int] = None,
    max_items: Optional[int] = None,
) -> List[Any]:
    """Collect the ``key`` lists of successive pages into one list.

    :param client: pipeline exposing ``next_page(pages)``
    :param first_page: decoded response of the initial list call
    :param key: name of the item list in each page (e.g. ``"users"``)
    :param max_pages: page limit (defaults to ``Settings.max_pages``)
    :param max_items: item limit (defaults to ``Settings.max_items``);
        the result is truncated to this length
    :return: a list containing all collected items across pages
    """
    if max_items is None:
        max_items = get_settings().max_items
    items: List[Any] = []
    for page in iter_pages(client, first_page, max_pages=max_pages):
        page_items = page.get(key) if isinstance(page, Mapping) else None
        if not page_items:
            break
        items.extend(page_items)
        if len(items) >= max_items:
            return items[:max_items]
    return items
