"""Single-shot HTTP request helper with JSON payloads."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Sequence

import requests

from HttpUtils.codec.json import marshal
from HttpUtils.utils.log import log

DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True, slots=True)
class ReqHeader:
    """One request header name/value pair."""

    header_name: str
    header_value: str


DEFAULT_HEADERS: tuple[ReqHeader, ...] = (
    ReqHeader("Content-Type", "application/json; charset=utf-8"),
    ReqHeader("Accept", "application/json"),
)


@dataclass(frozen=True, slots=True)
class HttpResult:
    """Raw response body and status line (e.g. ``"200 OK"``).

    Unpacks as ``body, status = result``.
    """

    body: bytes
    status: str

    def __iter__(self) -> Iterator[Any]:
        yield self.body
        yield self.status


def resolve_headers(
    req_headers: Sequence[ReqHeader] | None,
    add_headers: Sequence[ReqHeader] | None,
) -> dict[str, str]:
    """Merge header lists into the mapping sent on the wire.

    ``req_headers=None`` selects :data:`DEFAULT_HEADERS`. ``add_headers`` are
    applied after. A later header replaces an earlier one with the same
    name, ignoring case.
    """
    ordered = list(DEFAULT_HEADERS if req_headers is None else req_headers)
    if add_headers:
        ordered.extend(add_headers)

    merged: dict[str, str] = {}
    for header in ordered:
        for existing in [name for name in merged if name.lower() == header.header_name.lower()]:
            del merged[existing]
        merged[header.header_name] = header.header_value
    return merged


def _status_line(response: requests.Response) -> str:
    reason = (response.reason or "").strip()
    return f"{response.status_code} {reason}".strip()


def http_request(
    method: str,
    url: str,
    payload: Any = None,
    req_headers: Sequence[ReqHeader] | None = None,
    add_headers: Sequence[ReqHeader] | None = None,
    *,
    timeout: float | None = DEFAULT_TIMEOUT,
) -> HttpResult:
    """Issue one HTTP request and return its raw body and status line.

    Args:
        method: Request method, e.g. ``GET`` or ``POST``.
        url: Target URL, used as given.
        payload: Value marshaled to JSON for the body; ``None`` sends no body.
        req_headers: Headers to send; ``None`` uses :data:`DEFAULT_HEADERS`.
        add_headers: Extra headers applied after ``req_headers``.
        timeout: Seconds to wait for connect and read; ``None`` waits forever.

    Returns:
        HttpResult with the body bytes and status line. Non-2xx responses
        are returned, not raised.

    Raises:
        TypeError: If ``payload`` cannot be marshaled.
        requests.RequestException: If building, sending or reading the
            request fails.
    """
    body = marshal(payload) if payload is not None else b""
    headers = resolve_headers(req_headers, add_headers)

    log.debug("HTTP %s %s headers=%s body=%d bytes", method, url, list(headers), len(body))
    with requests.Session() as session:
        response = session.request(
            method,
            url,
            data=body,
            headers=headers,
            timeout=timeout,
        )
        content = response.content
        status = _status_line(response)
    log.debug("HTTP %s %s -> %s (%d bytes)", method, url, status, len(content))
    return HttpResult(body=content, status=status)


http_post_req = http_request
