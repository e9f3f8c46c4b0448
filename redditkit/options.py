"""Query options for listing endpoints.

Every listing endpoint pages with opaque ``after``/``before`` cursors taken
from the previous response. Cursors are sent exactly as received.
"""

from dataclasses import dataclass, fields
from typing import Dict, Optional
from urllib.parse import urlencode


@dataclass
class ListOptions:
    """Paging options shared by all listing endpoints.

    Attributes:
        limit: Maximum number of items to return (Reddit caps it at 100).
        after: Return items after this full ID.
        before: Return items before this full ID.
    """
    limit: Optional[int] = None
    after: Optional[str] = None
    before: Optional[str] = None

    # query-string name for fields whose attribute name differs
    _PARAM_NAMES = {"time": "t"}

    def to_params(self) -> Dict[str, str]:
        """Return the set options as query parameters, skipping unset ones."""
        params = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None or value == "":
                continue
            params[self._PARAM_NAMES.get(f.name, f.name)] = str(value)
        return params


@dataclass
class ListPostOptions(ListOptions):
    """Options for post listings.

    Attributes:
        time: Time window for ``top`` and ``controversial`` sorts
            (``hour``, ``day``, ``week``, ``month``, ``year``, ``all``).
    """
    time: Optional[str] = None


@dataclass
class SearchOptions(ListOptions):
    """Options for search endpoints.

    Attributes:
        sort: Sort order, e.g. ``relevance`` or ``activity``.
    """
    sort: Optional[str] = None


@dataclass
class PostSearchOptions(SearchOptions):
    """Options for post search; ``time`` limits results to a window."""
    time: Optional[str] = None


def add_options(path: str, opts: Optional[ListOptions]) -> str:
    """Append ``opts`` to ``path`` as a query string.

    Args:
        path: Request path, possibly already carrying a query string.
        opts: Options to encode, or None.

    Returns:
        The path with the encoded options appended.
    """
    if opts is None:
        return path
    params = opts.to_params()
    if not params:
        return path
    separator = "&" if "?" in path else "?"
    return f"{path}{separator}{urlencode(sorted(params.items()))}"
