from __future__ import annotations

"""Public configuration API for HttpUtils."""

from HttpUtils.config.app import (
    AppConfig,
    load_config,
    load_config_with_defaults,
    merge_config_dicts,
    parse_config_dict,
)
from HttpUtils.config.http import HttpConfig
from HttpUtils.config.query import QueryConfig
from HttpUtils.config.runtime import RuntimeConfig

__all__ = [
    "RuntimeConfig",
    "HttpConfig",
    "QueryConfig",
    "AppConfig",
    "load_config",
    "load_config_with_defaults",
    "merge_config_dicts",
    "parse_config_dict",
]
