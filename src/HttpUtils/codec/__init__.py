"""JSON body codec."""

from __future__ import annotations

from HttpUtils.codec.json import decode_json, get_req_from_json, marshal

__all__ = ["marshal", "decode_json", "get_req_from_json"]
