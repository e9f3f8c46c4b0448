"""Inbox and private-message endpoints.

Reddit API docs: https://www.reddit.com/dev/api/#section_messages
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Optional, Tuple

from redditkit.decoding.listing import (
    COMMENTS,
    MESSAGES,
    InboxListing,
    decode_heterogeneous_listing,
)
from redditkit.models import Messages
from redditkit.options import ListOptions

if TYPE_CHECKING:
    from redditkit.client import RedditClient

logger = logging.getLogger(__name__)


@dataclass
class SendMessageRequest:
    """A message to send.

    Attributes:
        to: Username, or ``/r/name`` for that subreddit's moderators.
        subject: Subject line.
        text: Body text (markdown).
        from_subreddit: Optional subreddit the message appears to come from.
    """
    to: str
    subject: str
    text: str
    from_subreddit: str = ""

    def to_form(self) -> Dict[str, str]:
        form = {
            "to": self.to,
            "subject": self.subject,
            "text": self.text,
            "api_type": "json",
        }
        if self.from_subreddit:
            form["from_sr"] = self.from_subreddit
        return form


class MessageService:
    """Message-related endpoints of the Reddit API."""

    def __init__(self, client: "RedditClient"):
        self.client = client

    def read_all(self) -> None:
        """Mark all messages and comment replies as read.

        Reddit queues the task and answers 202; the endpoint is heavily
        rate limited.
        """
        self.client.post("api/read_all_messages")

    def read(self, *ids: str) -> None:
        """Mark messages or comment replies as read by full ID."""
        self._post_ids("api/read_message", ids)

    def unread(self, *ids: str) -> None:
        """Mark messages or comment replies as unread by full ID."""
        self._post_ids("api/unread_message", ids)

    def collapse(self, *ids: str) -> None:
        self._post_ids("api/collapse_message", ids)

    def uncollapse(self, *ids: str) -> None:
        self._post_ids("api/uncollapse_message", ids)

    def block(self, id: str) -> None:
        """Block the author of a post, comment or message by its full ID."""
        self.client.post("api/block", {"id": id})

    def delete(self, id: str) -> None:
        """Delete a message by its full ID."""
        self.client.post("api/del_msg", {"id": id})

    def send(self, send_request: SendMessageRequest) -> None:
        """Send a private message.

        Raises:
            ValueError: If ``send_request`` is None.
        """
        if send_request is None:
            raise ValueError("send_request: cannot be None")
        self.client.post("api/compose", send_request.to_form())

    def inbox(self, opts: Optional[ListOptions] = None) -> Tuple[Messages, Messages]:
        """Get the comment replies and messages in the inbox.

        Returns:
            ``(comments, messages)``, both carrying the page's cursors.
        """
        page = self._inbox("message/inbox", opts)
        return page.comments(), page.messages()

    def inbox_unread(self, opts: Optional[ListOptions] = None) -> Tuple[Messages, Messages]:
        """Get the unread comment replies and messages in the inbox.

        Returns:
            ``(comments, messages)``, both carrying the page's cursors.
        """
        page = self._inbox("message/unread", opts)
        return page.comments(), page.messages()

    def sent(self, opts: Optional[ListOptions] = None) -> Messages:
        """Get the messages the user has sent."""
        return self._inbox("message/sent", opts).messages()

    def _inbox(self, path: str, opts: Optional[ListOptions]) -> InboxListing:
        page = decode_heterogeneous_listing(self.client.get(path, opts))
        logger.debug(
            f"Decoded {path}: {len(page.buckets[COMMENTS])} comments, "
            f"{len(page.buckets[MESSAGES])} messages, after={page.after!r}"
        )
        return page

    def _post_ids(self, path: str, ids: Tuple[str, ...]) -> None:
        if not ids:
            raise ValueError("must provide at least 1 id")
        self.client.post(path, {"id": ",".join(ids)})
