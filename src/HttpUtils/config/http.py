"""HTTP domain configuration for the request helper."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping

from HttpUtils.config.common import (
    expect_bool,
    expect_float,
    expect_mapping_list,
    expect_str,
    get_optional_value,
    get_required_value,
    get_section,
)
from HttpUtils.transport.client import DEFAULT_TIMEOUT, ReqHeader


@dataclass(frozen=True, slots=True)
class HttpConfig:
    """Store validated settings applied to every CLI request."""

    timeout: float
    use_default_headers: bool
    headers: tuple[ReqHeader, ...]


def load_http(raw: Mapping[str, Any]) -> HttpConfig:
    """Load http domain config from raw mapping.

    Header entries are ``{name, value}`` or ``{name, value_env}``; the latter
    reads the value from the environment at load time.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing.
    """
    section = get_section(raw, "http", required=False)
    entries = expect_mapping_list(get_optional_value(section, "headers", []), "http.headers")
    headers = tuple(_load_header(entry, f"http.headers[{idx}]") for idx, entry in enumerate(entries))
    return HttpConfig(
        timeout=expect_float(get_optional_value(section, "timeout", DEFAULT_TIMEOUT), "http.timeout"),
        use_default_headers=expect_bool(
            get_optional_value(section, "use_default_headers", True),
            "http.use_default_headers",
        ),
        headers=headers,
    )


def check_http(config: HttpConfig) -> None:
    """Validate http domain constraints.

    Raises:
        ValueError: If values violate http constraints.
    """
    if config.timeout <= 0:
        raise ValueError("http.timeout must be positive")
    for idx, header in enumerate(config.headers):
        if not header.header_name.strip():
            raise ValueError(f"http.headers[{idx}].name must not be empty")
        if ":" in header.header_name:
            raise ValueError(f"http.headers[{idx}].name must not contain ':'")


def _load_header(entry: Mapping[str, Any], config_key: str) -> ReqHeader:
    """Build one header from a config entry."""
    name = expect_str(get_required_value(entry, "name", f"{config_key}.name"), f"{config_key}.name")
    if "value_env" in entry:
        env_name = expect_str(entry["value_env"], f"{config_key}.value_env")
        value = os.getenv(env_name, "").strip()
        if not value:
            raise ValueError(
                f"{config_key} reads {env_name} but the environment variable is not set. "
                "Set it in your .env file or shell environment."
            )
        return ReqHeader(name, value)
    value = expect_str(get_required_value(entry, "value", f"{config_key}.value"), f"{config_key}.value")
    return ReqHeader(name, value)
