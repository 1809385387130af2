"""Query encoding configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from HttpUtils.config.common import expect_bool, get_optional_value, get_section


@dataclass(frozen=True, slots=True)
class QueryConfig:
    """Query encoding configuration."""

    escape: bool


def load_query(raw: Mapping[str, Any]) -> QueryConfig:
    """Load query domain config from raw mapping."""
    section = get_section(raw, "query", required=False)
    return QueryConfig(
        escape=expect_bool(get_optional_value(section, "escape", False), "query.escape"),
    )
