"""Data model for inbox items (private messages and comment replies)."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from redditkit.kinds import KIND_COMMENT, KIND_MESSAGE
from redditkit.models.fields import (
    read_bool,
    read_str,
    read_timestamp,
    require_object,
    timestamp_to_wire,
)


@dataclass
class Message:
    """A single inbox item.

    The inbox mixes private messages (``t4``) with replies to the user's
    posts and comments (``t1``). Both arrive with the same payload shape, so
    they share this record; ``kind`` keeps the envelope's kind code and
    ``is_comment`` is derived from it.

    Attributes:
        id: Base36 identifier.
        full_id: Kind-prefixed identifier, e.g. ``t4_abc123``.
        created: Creation time (UTC), or None when the payload has none.
        subject: Subject line.
        text: Body text.
        parent_id: Full ID of the parent item, empty for thread starters.
        author: Username of the sender.
        to: Username of the recipient (or ``#subreddit`` for modmail).
        kind: Kind code of the envelope this item was decoded from.
        is_comment: True if the item originated as a comment reply.
    """
    id: str
    full_id: str = ""
    created: Optional[datetime] = None
    subject: str = ""
    text: str = ""
    parent_id: str = ""
    author: str = ""
    to: str = ""
    kind: str = KIND_MESSAGE
    is_comment: bool = False

    @classmethod
    def from_dict(cls, data: Any, kind: str = KIND_MESSAGE) -> "Message":
        """Create a Message from a Thing payload.

        Args:
            data: The ``data`` object of a ``t1`` or ``t4`` envelope.
            kind: The envelope's kind code.

        Returns:
            Message: The decoded item.

        Raises:
            ItemDecodeError: If the payload is not an object or a field has
                the wrong JSON type.
        """
        data = require_object(data, "Message")
        # type-checked only; is_comment comes from the envelope kind
        read_bool(data, "was_comment")
        return cls(
            id=read_str(data, "id"),
            full_id=read_str(data, "name"),
            created=read_timestamp(data, "created_utc"),
            subject=read_str(data, "subject"),
            text=read_str(data, "body"),
            parent_id=read_str(data, "parent_id"),
            author=read_str(data, "author"),
            to=read_str(data, "dest"),
            kind=kind,
            is_comment=kind == KIND_COMMENT,
        )

    def to_dict(self) -> dict:
        """Convert the message back to its wire payload shape."""
        return {
            "id": self.id,
            "name": self.full_id,
            "created_utc": timestamp_to_wire(self.created),
            "subject": self.subject,
            "body": self.text,
            "parent_id": self.parent_id,
            "author": self.author,
            "dest": self.to,
            "was_comment": self.is_comment,
        }
