"""Helpers for composing API request URLs."""

import json
from typing import Any, Iterable, Sequence, Tuple
from urllib.parse import quote

import httpx

from ..application.exceptions import SerializationError

QueryParams = Iterable[Tuple[str, str]]


def join_all(base: str, segments: Sequence[str]) -> str:
    """
    Append path segments to a base URL, in order.

    Exactly one '/' separates each part, whether or not `base` ends with one.
    Every segment is percent-encoded as a single path component.

    Args:
        base: The API root, e.g. 'https://api.modrinth.com/v2/'.
        segments: Path segments, e.g. ['project', 'AANobbMI'].

    Returns:
        The joined URL, e.g. 'https://api.modrinth.com/v2/project/AANobbMI'.
    """
    path = "/".join(quote(str(segment).strip("/"), safe="") for segment in segments)
    return f"{base.rstrip('/')}/{path}"


def with_query(url: str, params: QueryParams) -> str:
    """Append ordered key/value pairs to `url` as a percent-encoded query."""
    params = list(params)
    if not params:
        return url
    return str(httpx.URL(url).copy_merge_params(params))


def json_param(value: Any) -> str:
    """
    JSON-encode a value for use as a query parameter or request payload.

    Raises:
        SerializationError: If the value is not JSON serializable.
    """
    try:
        return json.dumps(value, separators=(",", ":"))
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Cannot JSON-encode {value!r}: {e}") from e


def bool_param(value: bool) -> str:
    return "true" if value else "false"
