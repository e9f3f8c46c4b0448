"""API services, one per resource group."""

from redditkit.services.message import MessageService, SendMessageRequest
from redditkit.services.subreddit import SubredditService

__all__ = [
    "MessageService",
    "SendMessageRequest",
    "SubredditService",
]
