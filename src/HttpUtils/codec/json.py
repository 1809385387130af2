"""JSON encode/decode helpers for request and response bodies.

``marshal`` produces compact UTF-8 JSON without HTML escaping or a trailing
newline. ``decode_json`` reads JSON from bytes, text or a readable stream and
can hand the result to a caller-supplied factory.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import fields, is_dataclass
from typing import Any, TypeVar

from HttpUtils.core.values import QUERY_VALUE_TYPES, TextList
from HttpUtils.utils.log import log

T = TypeVar("T")


def _to_jsonable(value: Any) -> Any:
    """Convert values the stdlib encoder rejects; nested values recurse through json."""
    if isinstance(value, TextList):
        return list(value.values)
    if isinstance(value, QUERY_VALUE_TYPES):
        return value.value
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in fields(value)}
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def marshal(value: Any) -> bytes:
    """Encode ``value`` as compact UTF-8 JSON.

    ``<``, ``>`` and ``&`` are kept literal and non-ASCII characters are not
    escaped. Dataclass instances are encoded as objects of their fields.

    Raises:
        TypeError: If ``value`` contains an unserializable object.
        ValueError: If ``value`` contains a circular reference or a NaN or
            infinite float, neither of which has a JSON representation.
    """
    text = json.dumps(
        value,
        ensure_ascii=False,
        allow_nan=False,
        separators=(",", ":"),
        default=_to_jsonable,
    )
    return text.encode("utf-8")


def decode_json(source: Any, factory: Callable[..., T] | None = None) -> Any:
    """Decode JSON from bytes, text or a readable stream.

    Args:
        source: ``bytes``/``str`` payload, or an object with ``read()``.
        factory: Optional callable receiving the parsed value. Dataclass
            types receive object payloads as keyword arguments.

    Returns:
        Parsed JSON value, or the factory's result.

    Raises:
        json.JSONDecodeError: If the payload is not valid JSON.
    """
    if isinstance(source, (bytes, bytearray, str)):
        data = json.loads(source)
    else:
        data = json.load(source)

    if factory is None:
        return data
    if is_dataclass(factory) and isinstance(data, dict):
        return factory(**data)
    return factory(data)


def get_req_from_json(request: Any, factory: Callable[..., T] | None = None) -> Any:
    """Decode the JSON body of an incoming request object.

    Supports objects exposing the raw body as ``body``, ``data`` or
    ``content`` bytes (most framework request/response objects), or a
    readable ``stream``/``rfile``, or the request itself being readable.

    Raises:
        TypeError: If no body can be found on ``request``.
        json.JSONDecodeError: If the body is not valid JSON.
    """
    for attr in ("body", "data", "content"):
        body = getattr(request, attr, None)
        if isinstance(body, (bytes, bytearray, str)):
            log.debug("Decoding request JSON from .%s (%d bytes)", attr, len(body))
            return decode_json(body, factory)
    for attr in ("stream", "rfile"):
        stream = getattr(request, attr, None)
        if stream is not None and hasattr(stream, "read"):
            log.debug("Decoding request JSON from .%s stream", attr)
            return decode_json(stream, factory)
    if hasattr(request, "read"):
        return decode_json(request, factory)
    raise TypeError(f"Cannot read a JSON body from {type(request).__name__}")
