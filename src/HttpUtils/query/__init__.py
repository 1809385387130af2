"""Query string encoding for records of optional fields."""

from __future__ import annotations

from HttpUtils.query.casing import to_snake_case
from HttpUtils.query.dispatch import append_queries
from HttpUtils.query.encoder import build_url, encode_query, iter_query_fields, request_struct_to_query

__all__ = [
    "to_snake_case",
    "append_queries",
    "request_struct_to_query",
    "encode_query",
    "iter_query_fields",
    "build_url",
]
