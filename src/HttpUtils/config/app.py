from __future__ import annotations

"""Application config orchestration and YAML loading entrypoints."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from HttpUtils.config.http import HttpConfig, check_http, load_http
from HttpUtils.config.query import QueryConfig, load_query
from HttpUtils.config.runtime import RuntimeConfig, check_runtime, load_runtime

DEFAULT_CONFIG_YAML = """
log:
  level: INFO
  to_file: false
  dir: log

http:
  timeout: 30
  use_default_headers: true
  headers: []

query:
  escape: false
"""


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application root configuration."""

    runtime: RuntimeConfig
    http: HttpConfig
    query: QueryConfig


def parse_config_dict(raw: Mapping[str, Any]) -> AppConfig:
    """Parse normalized mapping into AppConfig."""
    runtime = load_runtime(raw)
    http = load_http(raw)
    query = load_query(raw)

    check_runtime(runtime)
    check_http(http)

    return AppConfig(runtime=runtime, http=http, query=query)


def load_config(path: Path) -> AppConfig:
    """Load YAML config file without default merge."""
    return parse_config_dict(parse_yaml(path.read_text(encoding="utf-8")))


def load_config_with_defaults(config_path: Path | None = None) -> AppConfig:
    """Load built-in defaults, deep-merged with an optional override file."""
    base = parse_yaml(DEFAULT_CONFIG_YAML)
    if config_path is None:
        return parse_config_dict(base)
    override = parse_yaml(config_path.read_text(encoding="utf-8"))
    return parse_config_dict(merge_config_dicts(base, override))


def parse_yaml(text: str) -> dict[str, Any]:
    """Parse raw YAML text into a mapping."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Config root must be a mapping/object")
    return dict(data)


def merge_config_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge two config mappings."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = merge_config_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
