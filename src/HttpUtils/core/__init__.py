"""Query value variants and the record base class."""

from __future__ import annotations

from HttpUtils.core.record import QueryRecord, UnsupportedFieldError
from HttpUtils.core.values import BigInt, Bool, Int32, Int64, QueryValue, Text, TextList

__all__ = [
    "QueryRecord",
    "UnsupportedFieldError",
    "QueryValue",
    "Text",
    "TextList",
    "Int32",
    "Int64",
    "BigInt",
    "Bool",
]
