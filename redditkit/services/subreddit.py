"""Subreddit endpoints: listings, search, subscriptions and moderation lists.

Reddit API docs: https://www.reddit.com/dev/api/#section_subreddits
"""

import json
import logging
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple
from urllib.parse import quote, urlencode

from redditkit.decoding.listing import (
    decode_listing,
    decode_post_and_comments,
    decode_thing,
    decode_user_list,
    load_json,
)
from redditkit.errors import EnvelopeDecodeError, ItemDecodeError
from redditkit.kinds import KIND_POST, KIND_SUBREDDIT
from redditkit.models import (
    Ban,
    Bans,
    Listing,
    Moderator,
    Post,
    PostAndComments,
    Posts,
    Relationship,
    Relationships,
    Subreddit,
    Subreddits,
)
from redditkit.options import ListOptions, ListPostOptions, PostSearchOptions, SearchOptions

if TYPE_CHECKING:
    from redditkit.client import RedditClient

logger = logging.getLogger(__name__)


def _require_name(name: str) -> str:
    if not name:
        raise ValueError("name: cannot be empty")
    return quote(name, safe="+")


def _subreddit_detail(data) -> Subreddit:
    if not isinstance(data, dict):
        raise ItemDecodeError(f"post: expected an object, got {type(data).__name__}")
    return Subreddit.from_dict(data.get("sr_detail"))


class SubredditService:
    """Subreddit-related endpoints of the Reddit API."""

    def __init__(self, client: "RedditClient"):
        self.client = client

    # Post listings. An empty subreddit name lists the front page.

    def hot_posts(self, subreddit: str = "", opts: Optional[ListPostOptions] = None) -> Posts:
        return self._posts("hot", subreddit, opts)

    def new_posts(self, subreddit: str = "", opts: Optional[ListPostOptions] = None) -> Posts:
        return self._posts("new", subreddit, opts)

    def rising_posts(self, subreddit: str = "", opts: Optional[ListPostOptions] = None) -> Posts:
        return self._posts("rising", subreddit, opts)

    def controversial_posts(
        self,
        subreddit: str = "",
        opts: Optional[ListPostOptions] = None
    ) -> Posts:
        return self._posts("controversial", subreddit, opts)

    def top_posts(self, subreddit: str = "", opts: Optional[ListPostOptions] = None) -> Posts:
        """Get the top posts; ``opts.time`` picks the window (default: day)."""
        return self._posts("top", subreddit, opts)

    def get(self, name: str) -> Subreddit:
        """Get a subreddit by name.

        Raises:
            ValueError: If ``name`` is empty.
            EnvelopeDecodeError: If the response is not a subreddit.
        """
        path = f"r/{_require_name(name)}/about"
        return decode_thing(self.client.get(path), KIND_SUBREDDIT, Subreddit.from_dict)

    # Subreddit listings.

    def popular(self, opts: Optional[ListOptions] = None) -> Subreddits:
        return self._subreddits("subreddits/popular", opts)

    def new(self, opts: Optional[ListOptions] = None) -> Subreddits:
        return self._subreddits("subreddits/new", opts)

    def gold(self, opts: Optional[ListOptions] = None) -> Subreddits:
        return self._subreddits("subreddits/gold", opts)

    def default(self, opts: Optional[ListOptions] = None) -> Subreddits:
        return self._subreddits("subreddits/default", opts)

    def subscribed(self, opts: Optional[ListOptions] = None) -> Subreddits:
        """Subreddits the user is subscribed to."""
        return self._subreddits("subreddits/mine/subscriber", opts)

    def approved(self, opts: Optional[ListOptions] = None) -> Subreddits:
        """Subreddits the user is an approved user in."""
        return self._subreddits("subreddits/mine/contributor", opts)

    def moderated(self, opts: Optional[ListOptions] = None) -> Subreddits:
        """Subreddits the user moderates."""
        return self._subreddits("subreddits/mine/moderator", opts)

    def search(self, query: str, opts: Optional[SearchOptions] = None) -> Subreddits:
        """Search subreddits by title and description."""
        path = "subreddits/search?" + urlencode({"q": query})
        return self._subreddits(path, opts)

    def search_names(self, query: str) -> List[str]:
        """Get subreddit names starting with ``query``.

        Raises:
            EnvelopeDecodeError: If the response has no list of names.
        """
        path = "api/search_reddit_names?" + urlencode({"query": query})
        raw = self.client.get(path)
        try:
            names = json.loads(raw).get("names")
        except (UnicodeDecodeError, ValueError, AttributeError) as e:
            raise EnvelopeDecodeError(f"search names: invalid response: {e}") from e
        if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
            raise EnvelopeDecodeError("search names: names must be an array of strings")
        return names

    def search_posts(
        self,
        query: str,
        subreddit: str = "",
        opts: Optional[PostSearchOptions] = None
    ) -> Posts:
        """Search posts site-wide, or within subreddits.

        Args:
            query: Search query.
            subreddit: Subreddit to search in; join several with ``+``
                (``golang+nba``). Empty searches all of Reddit.
            opts: Paging, sort and time window.
        """
        if subreddit:
            path = f"r/{quote(subreddit, safe='+')}/search?" + urlencode(
                {"q": query, "restrict_sr": "true"}
            )
        else:
            path = "r/all/search?" + urlencode({"q": query})
        return decode_listing(self.client.get(path, opts), KIND_POST, Post.from_dict)

    def random(self) -> Subreddit:
        """Get a random subreddit."""
        return self._random("random")

    def random_nsfw(self) -> Subreddit:
        """Get a random NSFW subreddit."""
        return self._random("randnsfw")

    def submission_text(self, name: str) -> str:
        """Get the text shown to users submitting a post to a subreddit.

        Raises:
            ValueError: If ``name`` is empty.
            EnvelopeDecodeError: If the response has no ``submit_text`` string.
        """
        root = load_json(self.client.get(f"r/{_require_name(name)}/api/submit_text"))
        text = root.get("submit_text") if isinstance(root, dict) else None
        if not isinstance(text, str):
            raise EnvelopeDecodeError("submission text: submit_text must be a string")
        return text

    def get_sticky1(self, name: str) -> PostAndComments:
        """Get the first stickied post of a subreddit and its comments."""
        return self._sticky(name, 1)

    def get_sticky2(self, name: str) -> PostAndComments:
        """Get the second stickied post of a subreddit and its comments."""
        return self._sticky(name, 2)

    # Subscriptions.

    def subscribe(self, *names: str) -> None:
        self._subscribe("sub", "sr_name", names)

    def subscribe_by_id(self, *ids: str) -> None:
        self._subscribe("sub", "sr", ids)

    def unsubscribe(self, *names: str) -> None:
        self._subscribe("unsub", "sr_name", names)

    def unsubscribe_by_id(self, *ids: str) -> None:
        self._subscribe("unsub", "sr", ids)

    def favorite(self, name: str) -> None:
        self._favorite(name, True)

    def unfavorite(self, name: str) -> None:
        self._favorite(name, False)

    # Moderation lists. These are UserList listings of plain objects.

    def banned(self, name: str, opts: Optional[ListOptions] = None) -> Bans:
        return self._user_list(name, "banned", Ban.from_dict, opts)

    def muted(self, name: str, opts: Optional[ListOptions] = None) -> Relationships:
        return self._user_list(name, "muted", Relationship.from_dict, opts)

    def wiki_banned(self, name: str, opts: Optional[ListOptions] = None) -> Bans:
        return self._user_list(name, "wikibanned", Ban.from_dict, opts)

    def contributors(self, name: str, opts: Optional[ListOptions] = None) -> Relationships:
        return self._user_list(name, "contributors", Relationship.from_dict, opts)

    def wiki_contributors(self, name: str, opts: Optional[ListOptions] = None) -> Relationships:
        return self._user_list(name, "wikicontributors", Relationship.from_dict, opts)

    def moderators(self, name: str) -> List[Moderator]:
        """Get the moderators of a subreddit; this list is not paginated."""
        return self._user_list(name, "moderators", Moderator.from_dict, None).items

    def _posts(self, sort: str, subreddit: str, opts: Optional[ListPostOptions]) -> Posts:
        path = f"r/{quote(subreddit, safe='+')}/{sort}" if subreddit else sort
        posts = decode_listing(self.client.get(path, opts), KIND_POST, Post.from_dict)
        logger.debug(f"Decoded {len(posts)} posts from {path}, after={posts.after!r}")
        return posts

    def _subreddits(self, path: str, opts: Optional[ListOptions]) -> Subreddits:
        return decode_listing(self.client.get(path, opts), KIND_SUBREDDIT, Subreddit.from_dict)

    def _random(self, which: str) -> Subreddit:
        # the API answers with one post; the subreddit is its sr_detail
        raw = self.client.get(f"r/{which}?sr_detail=true&limit=1")
        subreddits = decode_listing(raw, KIND_POST, _subreddit_detail)
        if not subreddits.items:
            raise EnvelopeDecodeError(f"r/{which}: response holds no subreddit")
        return subreddits.items[0]

    def _sticky(self, name: str, num: int) -> PostAndComments:
        path = f"r/{_require_name(name)}/about/sticky?num={num}"
        return decode_post_and_comments(self.client.get(path))

    def _subscribe(self, action: str, field: str, values: Tuple[str, ...]) -> None:
        if not values:
            raise ValueError("must provide at least 1 subreddit")
        self.client.post("api/subscribe", {"action": action, field: ",".join(values)})

    def _favorite(self, name: str, make_favorite: bool) -> None:
        form: Dict[str, str] = {
            "sr_name": name,
            "make_favorite": "true" if make_favorite else "false",
            "api_type": "json",
        }
        self.client.post("api/favorite", form)

    def _user_list(self, name, where, decode, opts) -> Listing:
        path = f"r/{_require_name(name)}/about/{where}"
        return decode_user_list(self.client.get(path, opts), decode)
