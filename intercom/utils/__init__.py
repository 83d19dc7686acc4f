"""Option merging and pagination helpers."""

from intercom.utils.merge import replace_recursive
from intercom.utils.pagination import iter_pages, paginate

__all__ = ["replace_recursive", "iter_pages", "paginate"]
