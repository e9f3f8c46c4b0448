"""Paginated listing container."""

from dataclasses import dataclass, field, replace
from typing import Generic, Iterator, List, Optional, TypeVar

from redditkit.options import ListOptions

T = TypeVar("T")


@dataclass
class Listing(Generic[T]):
    """One page of a listing endpoint.

    ``after`` and ``before`` are the cursors of the page exactly as the API
    sent them; an empty string means there is no page in that direction.

    Attributes:
        items: Decoded items, in response order.
        after: Cursor for the next page.
        before: Cursor for the previous page.
    """
    items: List[T] = field(default_factory=list)
    after: str = ""
    before: str = ""

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def has_next(self) -> bool:
        return self.after != ""

    def has_previous(self) -> bool:
        return self.before != ""

    def next_page(self, opts: Optional[ListOptions] = None) -> Optional[ListOptions]:
        """Build options requesting the page after this one.

        Args:
            opts: Options used for this page; other settings (limit, time
                window, sort) carry over. Not modified.

        Returns:
            New options with ``after`` set, or None on the last page.
        """
        if not self.has_next():
            return None
        return replace(opts or ListOptions(), after=self.after, before=None)

    def previous_page(self, opts: Optional[ListOptions] = None) -> Optional[ListOptions]:
        """Build options requesting the page before this one, or None."""
        if not self.has_previous():
            return None
        return replace(opts or ListOptions(), after=None, before=self.before)
