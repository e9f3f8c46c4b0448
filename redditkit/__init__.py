"""Client library for the Reddit REST API."""

from redditkit.client import RedditClient, build_client
from redditkit.config import Config, load_config
from redditkit.errors import (
    APIError,
    EnvelopeDecodeError,
    ItemDecodeError,
    RedditError,
    TransportError,
)
from redditkit.options import ListOptions, ListPostOptions, PostSearchOptions, SearchOptions

__version__ = "0.1.0"

__all__ = [
    "RedditClient",
    "build_client",
    "Config",
    "load_config",
    "APIError",
    "EnvelopeDecodeError",
    "ItemDecodeError",
    "RedditError",
    "TransportError",
    "ListOptions",
    "ListPostOptions",
    "SearchOptions",
    "PostSearchOptions",
]
