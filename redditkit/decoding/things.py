"""Decoding of Reddit's polymorphic Thing envelopes.

A Thing is a ``{"kind": ..., "data": {...}}`` object. The kind code says how
``data`` should be read. ``ThingDecoder`` holds a dispatch table from kind
code to a decode function and a named bucket, and sorts a list of Things into
those buckets in one pass.

A child that cannot be decoded (not an object, no kind, an unknown kind, or
a payload its decode function rejects) is dropped; the rest of the batch is
still decoded.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Sequence, Tuple

from redditkit.errors import ItemDecodeError
from redditkit.kinds import KNOWN_KINDS

logger = logging.getLogger(__name__)

DEFAULT_BUCKET = "items"


@dataclass(frozen=True)
class Thing:
    """A single ``{kind, data}`` envelope.

    Attributes:
        kind: Kind code, e.g. ``t1``.
        data: The raw payload, not yet validated.
    """
    kind: str
    data: Any

    @classmethod
    def from_dict(cls, obj: Any) -> "Thing":
        """Read an envelope, checking only the envelope itself.

        Raises:
            ItemDecodeError: If ``obj`` is not an object or has no string kind.
        """
        if not isinstance(obj, Mapping):
            raise ItemDecodeError(f"thing: expected an object, got {type(obj).__name__}")
        kind = obj.get("kind")
        if not isinstance(kind, str):
            raise ItemDecodeError(f"thing: expected a string kind, got {type(kind).__name__}")
        return cls(kind=kind, data=obj.get("data"))


@dataclass(frozen=True)
class Route:
    """Where a kind goes: the bucket name and the payload decode function.

    ``decode`` must raise ``ItemDecodeError`` for payloads it cannot read.
    """
    bucket: str
    decode: Callable[[Any], Any]


class ThingDecoder:
    """Routes a sequence of Things into typed buckets by kind code.

    Several kinds may share one bucket. A decoder holds no per-call state,
    so one instance can be reused and shared between threads.

    Attributes:
        buckets: Bucket names, in the order they first appear in the table.
    """

    def __init__(self, routes: Mapping[str, Route]):
        """Initialize the decoder.

        Args:
            routes: Mapping of kind code to Route.
        """
        self._routes: Dict[str, Route] = dict(routes)
        self.buckets: Tuple[str, ...] = tuple(
            dict.fromkeys(route.bucket for route in self._routes.values())
        )

    @classmethod
    def single(
        cls,
        kind: str,
        decode: Callable[[Any], Any],
        bucket: str = DEFAULT_BUCKET
    ) -> "ThingDecoder":
        """Build a decoder that accepts a single kind."""
        return cls({kind: Route(bucket, decode)})

    def kinds(self) -> List[str]:
        """Kind codes this decoder recognizes."""
        return list(self._routes)

    def decode(self, children: Sequence[Any]) -> Dict[str, List[Any]]:
        """Decode ``children`` into buckets.

        Args:
            children: Raw child envelopes, as parsed from JSON.

        Returns:
            A new dict with one list per bucket (empty if nothing matched),
            each holding the decoded items in input order.
        """
        result: Dict[str, List[Any]] = {name: [] for name in self.buckets}

        for index, child in enumerate(children):
            try:
                thing = Thing.from_dict(child)
            except ItemDecodeError as e:
                logger.debug(f"Dropping child {index}: {e}")
                continue

            route = self._routes.get(thing.kind)
            if route is None:
                if thing.kind in KNOWN_KINDS:
                    logger.debug(f"Dropping child {index}: kind {thing.kind!r} not routed here")
                else:
                    logger.debug(f"Dropping child {index}: unrecognized kind {thing.kind!r}")
                continue

            try:
                item = route.decode(thing.data)
            except ItemDecodeError as e:
                logger.debug(f"Dropping child {index} of kind {thing.kind!r}: {e}")
                continue

            result[route.bucket].append(item)

        return result
