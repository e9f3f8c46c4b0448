"""Typed readers for Thing payload fields.

Reddit payloads are loosely typed JSON objects. These helpers pull a single
field out of a payload and check its JSON type, so a model's ``from_dict``
either returns a fully typed record or raises ``ItemDecodeError``.

A missing key or an explicit ``null`` reads as the zero value of the field
(``""``, ``False``, ``0``) or as ``None`` for the ``optional`` readers.
"""

from datetime import datetime, timezone
from typing import Any, List, Mapping, Optional

from redditkit.errors import ItemDecodeError


def require_object(data: Any, type_name: str) -> Mapping[str, Any]:
    """Return ``data`` if it is a JSON object, else raise ItemDecodeError."""
    if not isinstance(data, Mapping):
        raise ItemDecodeError(
            f"{type_name}: expected an object, got {type(data).__name__}"
        )
    return data


def _mismatch(key: str, expected: str, value: Any) -> ItemDecodeError:
    return ItemDecodeError(f"{key}: expected {expected}, got {type(value).__name__}")


def read_str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise _mismatch(key, "string", value)
    return value


def read_optional_str(data: Mapping[str, Any], key: str) -> Optional[str]:
    if data.get(key) is None:
        return None
    return read_str(data, key)


def read_bool(data: Mapping[str, Any], key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise _mismatch(key, "boolean", value)
    return value


def read_optional_bool(data: Mapping[str, Any], key: str) -> Optional[bool]:
    if data.get(key) is None:
        return None
    return read_bool(data, key)


def read_int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    # bool is a subclass of int; JSON true/false is not a number
    if isinstance(value, bool):
        raise _mismatch(key, "integer", value)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise _mismatch(key, "integer", value)


def read_optional_int(data: Mapping[str, Any], key: str) -> Optional[int]:
    if data.get(key) is None:
        return None
    return read_int(data, key)


def read_float(data: Mapping[str, Any], key: str) -> float:
    value = data.get(key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _mismatch(key, "number", value)
    return float(value)


def read_str_list(data: Mapping[str, Any], key: str) -> List[str]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise _mismatch(key, "array of strings", value)
    return list(value)


def read_timestamp(data: Mapping[str, Any], key: str) -> Optional[datetime]:
    """Read an epoch-seconds field as an aware UTC datetime.

    Reddit sends ``false`` for "edited" on items that were never edited;
    that, a missing key and ``null`` all read as ``None``.
    """
    value = data.get(key)
    if value is None or value is False:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _mismatch(key, "epoch seconds", value)
    try:
        return datetime.fromtimestamp(value, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        raise ItemDecodeError(f"{key}: timestamp {value!r} out of range") from e


def timestamp_to_wire(value: Optional[datetime]) -> Optional[float]:
    """Inverse of ``read_timestamp`` for ``to_dict`` output."""
    if value is None:
        return None
    return value.timestamp()
