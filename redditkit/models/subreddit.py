"""Data model for subreddits."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from redditkit.models.fields import (
    read_bool,
    read_int,
    read_optional_int,
    read_str,
    read_timestamp,
    require_object,
)


@dataclass
class Subreddit:
    """A subreddit (kind ``t5``).

    Attributes:
        id: Base36 identifier.
        full_id: Kind-prefixed identifier, e.g. ``t5_2rc7j``.
        created: Creation time (UTC).
        url: Relative URL, e.g. ``/r/golang/``.
        name: Display name without prefix.
        name_prefixed: Display name with ``r/``.
        title: Title shown in the header.
        description: Public description.
        type: ``public``, ``private``, ``restricted``, ...
        suggested_comment_sort: Default comment sort, empty if unset.
        subscribers: Subscriber count.
        active_user_count: Users online, None when not reported.
        nsfw: Marked over 18.
        user_is_mod: The user moderates this subreddit.
        subscribed: The user is subscribed.
        favorite: The user favorited it.
    """
    id: str
    full_id: str = ""
    created: Optional[datetime] = None
    url: str = ""
    name: str = ""
    name_prefixed: str = ""
    title: str = ""
    description: str = ""
    type: str = ""
    suggested_comment_sort: str = ""
    subscribers: int = 0
    active_user_count: Optional[int] = None
    nsfw: bool = False
    user_is_mod: bool = False
    subscribed: bool = False
    favorite: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> "Subreddit":
        """Create a Subreddit from a ``t5`` payload.

        Raises:
            ItemDecodeError: If the payload is malformed.
        """
        data = require_object(data, "Subreddit")
        return cls(
            id=read_str(data, "id"),
            full_id=read_str(data, "name"),
            created=read_timestamp(data, "created_utc"),
            url=read_str(data, "url"),
            name=read_str(data, "display_name"),
            name_prefixed=read_str(data, "display_name_prefixed"),
            title=read_str(data, "title"),
            description=read_str(data, "public_description"),
            type=read_str(data, "subreddit_type"),
            suggested_comment_sort=read_str(data, "suggested_comment_sort"),
            subscribers=read_int(data, "subscribers"),
            active_user_count=read_optional_int(data, "active_user_count"),
            nsfw=read_bool(data, "over18"),
            user_is_mod=read_bool(data, "user_is_moderator"),
            subscribed=read_bool(data, "user_is_subscriber"),
            favorite=read_bool(data, "user_has_favorited"),
        )
