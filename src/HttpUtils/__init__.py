"""HttpUtils: small HTTP client/server helpers.

JSON marshal/decode without HTML escaping, a one-shot JSON request helper,
and an encoder turning records of optional values into query strings.
"""

from __future__ import annotations

from HttpUtils.codec.json import decode_json, get_req_from_json, marshal
from HttpUtils.core.record import QueryRecord, UnsupportedFieldError
from HttpUtils.core.values import BigInt, Bool, Int32, Int64, QueryValue, Text, TextList
from HttpUtils.query.casing import to_snake_case
from HttpUtils.query.encoder import build_url, encode_query, request_struct_to_query
from HttpUtils.transport.client import DEFAULT_HEADERS, HttpResult, ReqHeader, http_post_req, http_request
from HttpUtils.utils.zero import is_zero_value

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
    "to_snake_case",
    "request_struct_to_query",
    "encode_query",
    "build_url",
    "marshal",
    "decode_json",
    "get_req_from_json",
    "ReqHeader",
    "HttpResult",
    "DEFAULT_HEADERS",
    "http_request",
    "http_post_req",
    "is_zero_value",
]
