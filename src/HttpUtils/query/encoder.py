"""Query string encoder for records of optional query values."""

from __future__ import annotations

from dataclasses import fields
from typing import Iterator, Mapping, Union

from HttpUtils.core.record import QueryRecord, UnsupportedFieldError
from HttpUtils.core.values import QUERY_VALUE_TYPES, QueryValue
from HttpUtils.query.casing import to_snake_case
from HttpUtils.query.dispatch import append_queries
from HttpUtils.utils.log import log

QuerySource = Union[QueryRecord, Mapping[str, Union[QueryValue, None]]]


def iter_query_fields(record: QuerySource) -> Iterator[tuple[str, QueryValue | None]]:
    """Yield ``(declared_name, value)`` pairs in declaration order.

    Mappings are validated in full before the first pair is yielded.

    Raises:
        UnsupportedFieldError: If a mapping value is not a query value.
        TypeError: If ``record`` is neither a QueryRecord nor a mapping.
    """
    if isinstance(record, QueryRecord):
        for field in fields(record):
            yield field.name, getattr(record, field.name)
        return
    if isinstance(record, Mapping):
        items = list(record.items())
        for name, value in items:
            if value is not None and not isinstance(value, QUERY_VALUE_TYPES):
                raise UnsupportedFieldError(str(name), value)
        for name, value in items:
            yield str(name), value
        return
    raise TypeError(f"Expected a QueryRecord or mapping, got {type(record).__name__}")


def request_struct_to_query(record: QuerySource, *, escape: bool = False) -> str:
    """Encode the present fields of ``record`` as a URL query string.

    Absent (``None``) fields are skipped. Field names are converted with
    :func:`to_snake_case`. Values are not percent-encoded unless ``escape``
    is set, so callers must pre-sanitize ``&``, ``=`` and non-ASCII text.

    Args:
        record: Query record or ordered mapping of field name to value.
        escape: Percent-encode keys and values.

    Returns:
        ``?`` followed by ``&``-joined tokens, or ``?`` alone when no field
        is present.
    """
    queries: list[str] = []
    present = 0
    for name, value in iter_query_fields(record):
        if value is None:
            continue
        present += 1
        append_queries(value, to_snake_case(name), queries, escape=escape)
    log.debug("Encoded query: fields=%d tokens=%d", present, len(queries))
    return "?" + "&".join(queries)


encode_query = request_struct_to_query


def build_url(base_url: str, record: QuerySource, *, escape: bool = False) -> str:
    """Append the encoded query of ``record`` to ``base_url``.

    The base URL is returned unchanged when the record yields no tokens.
    """
    query = request_struct_to_query(record, escape=escape)
    if query == "?":
        return base_url
    return base_url + query
