"""Per-variant serialization of query values into ``key=value`` tokens."""

from __future__ import annotations

from collections.abc import Callable
from urllib.parse import quote

from HttpUtils.core.record import UnsupportedFieldError
from HttpUtils.core.values import BigInt, Bool, Int32, Int64, QueryValue, Text, TextList

# Serializers return (key, suffix, value) triples; suffix is "[]" for list items.
_Pairs = list[tuple[str, str, str]]
_Serializer = Callable[[QueryValue, str], _Pairs]


def _text_list_pairs(value: TextList, name: str) -> _Pairs:
    return [(name, "[]", item) for item in value.values]


def _text_pairs(value: Text, name: str) -> _Pairs:
    return [(name, "", value.value)]


def _int_pairs(value: Int32 | Int64 | BigInt, name: str) -> _Pairs:
    return [(name, "", str(value.value))]


def _bool_pairs(value: Bool, name: str) -> _Pairs:
    return [(name, "", "true" if value.value else "false")]


_SERIALIZERS: dict[type, _Serializer] = {
    TextList: _text_list_pairs,
    Text: _text_pairs,
    Int32: _int_pairs,
    Int64: _int_pairs,
    BigInt: _int_pairs,
    Bool: _bool_pairs,
}


def append_queries(
    value: QueryValue,
    name: str,
    queries: list[str],
    *,
    escape: bool = False,
) -> None:
    """Append the tokens for one present field to ``queries``.

    Args:
        value: Present query value.
        name: Already converted parameter key.
        queries: Token accumulator, extended in place.
        escape: Percent-encode keys and values.

    Raises:
        UnsupportedFieldError: If ``value`` is not a query value variant.
    """
    # Subclasses of a variant serialize like their registered base.
    serializer = next((_SERIALIZERS[cls] for cls in type(value).__mro__ if cls in _SERIALIZERS), None)
    if serializer is None:
        raise UnsupportedFieldError(name, value)
    for key, suffix, text in serializer(value, name):
        if escape:
            key, text = quote(key, safe=""), quote(text, safe="")
        queries.append(f"{key}{suffix}={text}")
