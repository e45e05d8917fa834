"""JSON response decoding."""

import json
from typing import Any

from .errors import DecodeError


def decode_body(text: str, collapse_false: bool = True) -> Any:
    """Decode a JSON response body.

    Objects become insertion-ordered dicts and arrays become lists. With
    collapse_false, every JSON ``false`` is turned into None so that false,
    null and a missing value all read the same to callers.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeError(f"Invalid JSON in response: {e.msg} (line {e.lineno})", body=text) from e
    if collapse_false:
        return _collapse_false(data)
    return data


def _collapse_false(value: Any) -> Any:
    if value is False:
        return None
    if isinstance(value, dict):
        return {k: _collapse_false(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_collapse_false(v) for v in value]
    return value
