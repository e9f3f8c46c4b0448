"""Decoding of Thing envelopes and listing responses."""

from redditkit.decoding.listing import (
    Envelope,
    InboxListing,
    ThingBuckets,
    decode_comment_tree,
    decode_heterogeneous_listing,
    decode_listing,
    decode_post_and_comments,
    decode_thing,
    decode_things_listing,
    decode_user_list,
    parse_envelope,
)
from redditkit.decoding.things import Route, Thing, ThingDecoder

__all__ = [
    "Envelope",
    "InboxListing",
    "ThingBuckets",
    "decode_comment_tree",
    "decode_heterogeneous_listing",
    "decode_listing",
    "decode_post_and_comments",
    "decode_thing",
    "decode_things_listing",
    "decode_user_list",
    "parse_envelope",
    "Route",
    "Thing",
    "ThingDecoder",
]
