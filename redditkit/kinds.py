"""Kind codes used in the ``kind`` field of Reddit Thing envelopes."""

KIND_COMMENT = "t1"
KIND_ACCOUNT = "t2"
KIND_POST = "t3"
KIND_MESSAGE = "t4"
KIND_SUBREDDIT = "t5"
KIND_AWARD = "t6"
KIND_MORE = "more"
KIND_LISTING = "Listing"
KIND_USER_LIST = "UserList"

KNOWN_KINDS = frozenset({
    KIND_COMMENT,
    KIND_ACCOUNT,
    KIND_POST,
    KIND_MESSAGE,
    KIND_SUBREDDIT,
    KIND_AWARD,
    KIND_MORE,
    KIND_LISTING,
    KIND_USER_LIST,
})
