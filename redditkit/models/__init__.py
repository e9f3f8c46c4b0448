"""Data models for the Reddit client."""

from redditkit.models.listing import Listing
from redditkit.models.message import Message
from redditkit.models.post import Comment, More, Post, PostAndComments
from redditkit.models.relationship import Ban, Moderator, Relationship
from redditkit.models.subreddit import Subreddit

Posts = Listing[Post]
Comments = Listing[Comment]
Subreddits = Listing[Subreddit]
Messages = Listing[Message]
Relationships = Listing[Relationship]
Bans = Listing[Ban]

__all__ = [
    "Listing",
    "Message",
    "Comment",
    "More",
    "Post",
    "PostAndComments",
    "Ban",
    "Moderator",
    "Relationship",
    "Subreddit",
    "Posts",
    "Comments",
    "Subreddits",
    "Messages",
    "Relationships",
    "Bans",
]
