"""Command implementations for the HttpUtils CLI.

Each command holds its parsed inputs and returns the text to print, keeping
click parameter handling in ``ui`` and logging setup in ``runner``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from HttpUtils.codec.json import decode_json
from HttpUtils.config import AppConfig
from HttpUtils.core.values import BigInt, Bool, Int32, Int64, QueryValue, Text, TextList
from HttpUtils.query.casing import to_snake_case
from HttpUtils.query.encoder import request_struct_to_query
from HttpUtils.transport.client import ReqHeader, http_request
from HttpUtils.utils.log import log

_BOOL_WORDS = {"true": True, "1": True, "yes": True, "false": False, "0": False, "no": False}


def _parse_bool(text: str) -> Bool:
    try:
        return Bool(_BOOL_WORDS[text.strip().lower()])
    except KeyError:
        raise ValueError(f"Invalid bool value: {text!r}") from None


_SCALAR_PARSERS: dict[str, Callable[[str], QueryValue]] = {
    "str": Text,
    "int32": lambda text: Int32(int(text)),
    "int64": lambda text: Int64(int(text)),
    "bigint": lambda text: BigInt(int(text)),
    "bool": _parse_bool,
}


def parse_query_params(params: Sequence[str]) -> dict[str, QueryValue]:
    """Parse ``name:kind=value`` arguments into an ordered field mapping.

    ``kind`` defaults to ``str``. Repeated ``list`` arguments for one name
    accumulate into a single TextList at the position of the first one.

    Raises:
        ValueError: If an argument is malformed or a value does not parse.
    """
    fields: dict[str, QueryValue] = {}
    list_items: dict[str, list[str]] = {}
    for param in params:
        spec, sep, value = param.partition("=")
        if not sep:
            raise ValueError(f"Expected name[:kind]=value, got {param!r}")
        name, _, kind = spec.partition(":")
        name, kind = name.strip(), (kind.strip() or "str")
        if not name:
            raise ValueError(f"Missing field name in {param!r}")

        if kind == "list":
            if name in fields and not isinstance(fields[name], TextList):
                raise ValueError(f"Field {name!r} given with conflicting kinds")
            list_items.setdefault(name, []).append(value)
            fields[name] = TextList(list_items[name])
            continue
        parser = _SCALAR_PARSERS.get(kind)
        if parser is None:
            raise ValueError(f"Unsupported kind {kind!r}; expected one of list, {', '.join(_SCALAR_PARSERS)}")
        if name in fields:
            raise ValueError(f"Field {name!r} given more than once")
        fields[name] = parser(value)
    return fields


def parse_header(text: str) -> ReqHeader:
    """Parse a ``Name: value`` header argument."""
    name, sep, value = text.partition(":")
    if not sep or not name.strip():
        raise ValueError(f"Expected 'Name: value' header, got {text!r}")
    return ReqHeader(name.strip(), value.strip())


@dataclass(slots=True)
class QueryCommand:
    """Encode CLI parameters as a query string."""

    config: AppConfig
    params: Sequence[str]

    def execute(self) -> str:
        fields = parse_query_params(self.params)
        log.debug("Query fields=%s", fields)
        return request_struct_to_query(fields, escape=self.config.query.escape)


@dataclass(slots=True)
class CaseCommand:
    """Convert identifiers to query parameter keys."""

    names: Sequence[str]

    def execute(self) -> str:
        return "\n".join(to_snake_case(name) for name in self.names)


@dataclass(slots=True)
class RequestCommand:
    """Send one request built from CLI arguments and the http config."""

    config: AppConfig
    method: str
    url: str
    data: str | None
    headers: Sequence[str]

    def execute(self) -> str:
        """Send the request and return the status line followed by the body.

        Configured headers are applied first (after the JSON defaults when
        ``http.use_default_headers`` is on), then ``--header`` arguments.
        """
        payload = decode_json(self.data) if self.data is not None else None
        http_cfg = self.config.http
        base_headers: list[ReqHeader] | None
        if http_cfg.use_default_headers:
            base_headers, extra = None, list(http_cfg.headers)
        else:
            base_headers, extra = list(http_cfg.headers), []
        extra.extend(parse_header(text) for text in self.headers)

        log.info("%s %s", self.method.upper(), self.url)
        result = http_request(
            self.method.upper(),
            self.url,
            payload,
            base_headers,
            extra,
            timeout=http_cfg.timeout,
        )
        log.info("Response: %s (%d bytes)", result.status, len(result.body))
        return f"{result.status}\n{result.body.decode('utf-8', errors='replace')}"
