"""HTTP transport helper."""

from __future__ import annotations

from HttpUtils.transport.client import (
    DEFAULT_HEADERS,
    DEFAULT_TIMEOUT,
    HttpResult,
    ReqHeader,
    http_post_req,
    http_request,
    resolve_headers,
)

__all__ = [
    "ReqHeader",
    "HttpResult",
    "DEFAULT_HEADERS",
    "DEFAULT_TIMEOUT",
    "http_request",
    "http_post_req",
    "resolve_headers",
]
