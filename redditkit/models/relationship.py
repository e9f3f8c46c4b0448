"""Data models for user relationships with a subreddit (bans, mods, ...)."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Optional

from redditkit.models.fields import (
    read_optional_int,
    read_str,
    read_str_list,
    read_timestamp,
    require_object,
)


@dataclass
class Relationship:
    """A user's relationship with a subreddit.

    Relationship listings are ``UserList`` envelopes whose children are
    plain objects rather than Thing envelopes.

    Attributes:
        id: Relationship ID, e.g. ``rb_123``.
        user: Username.
        user_id: Full ID of the user.
        created: When the relationship was created.
    """
    id: str
    user: str = ""
    user_id: str = ""
    created: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Relationship":
        data = require_object(data, "Relationship")
        return cls(
            id=read_str(data, "rel_id"),
            user=read_str(data, "name"),
            user_id=read_str(data, "id"),
            created=read_timestamp(data, "date"),
        )


@dataclass
class Ban:
    """A ban, with days left (None for permanent bans) and the mod note."""
    relationship: Relationship
    days_left: Optional[int] = None
    note: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "Ban":
        data = require_object(data, "Ban")
        return cls(
            relationship=Relationship.from_dict(data),
            days_left=read_optional_int(data, "days_left"),
            note=read_str(data, "note"),
        )


@dataclass
class Moderator:
    """A moderator and their permissions (``all``, ``wiki``, ...)."""
    relationship: Relationship
    permissions: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "Moderator":
        data = require_object(data, "Moderator")
        return cls(
            relationship=Relationship.from_dict(data),
            permissions=read_str_list(data, "mod_permissions"),
        )
