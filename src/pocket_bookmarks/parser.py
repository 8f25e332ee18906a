"""Decode Pocket /get responses into Bookmark objects.

Expected body:
    {
        "list": {
            "<item_id>": {
                "item_id": "<numeric string>",
                "resolved_title": "...",
                "resolved_url": "..."
            },
            ...
        }
    }

Unknown fields are ignored. A null body or a missing or null "list" yields an
empty mapping; a null entry yields a zero Bookmark.
"""

import json
import logging
import re

from .errors import DecodeError
from .models import Bookmark

logger = logging.getLogger(__name__)

# Integer literal as JSON would spell it: no leading zeros, no whitespace
_INT_LITERAL = re.compile(r"-?(?:0|[1-9][0-9]*)")

# item_id must fit a signed 64-bit integer
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def parse_retrieve_response(body: bytes | str) -> dict[str, Bookmark]:
    """Decode a raw response body into a mapping of item_id -> Bookmark."""
    try:
        data = json.loads(body)
    except ValueError as e:
        raise DecodeError(f"could not unmarshal response body: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise DecodeError(
            f"could not unmarshal response body: expected object, got {_json_type(data)}"
        )

    items = data.get("list")
    if items is None:
        return {}
    if not isinstance(items, dict):
        raise DecodeError(
            f"could not unmarshal response body: 'list' must be an object, "
            f"got {_json_type(items)}"
        )

    bookmarks = {key: _parse_item(key, item) for key, item in items.items()}
    logger.debug("Decoded %d bookmarks", len(bookmarks))
    return bookmarks


def _parse_item(key: str, item) -> Bookmark:
    if item is None:
        return Bookmark(id=0, title="", url="")
    if not isinstance(item, dict):
        raise DecodeError(
            f"could not unmarshal bookmark {key!r}: expected object, got {_json_type(item)}"
        )
    return Bookmark(
        id=_parse_item_id(key, item.get("item_id")),
        title=_parse_string(key, item, "resolved_title"),
        url=_parse_string(key, item, "resolved_url"),
    )


def _parse_item_id(key: str, value) -> int:
    """item_id travels as a string holding an integer, e.g. "229279689"."""
    if value is None:
        return 0
    if not isinstance(value, str) or not _INT_LITERAL.fullmatch(value):
        raise DecodeError(
            f"could not unmarshal bookmark {key!r}: item_id {value!r} "
            "is not an integer string"
        )
    item_id = int(value)
    if not _INT64_MIN <= item_id <= _INT64_MAX:
        raise DecodeError(
            f"could not unmarshal bookmark {key!r}: item_id {value!r} "
            "is out of range"
        )
    return item_id


def _parse_string(key: str, item: dict, field_name: str) -> str:
    value = item.get(field_name)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(
            f"could not unmarshal bookmark {key!r}: {field_name} must be a string, "
            f"got {_json_type(value)}"
        )
    return value


def _json_type(value) -> str:
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return "null"
