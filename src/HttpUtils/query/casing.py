"""Field name conversion for query parameter keys."""

from __future__ import annotations

import re

_MATCH_FIRST_CAP = re.compile(r"(.)([A-Z][a-z]+)")
_MATCH_ALL_CAP = re.compile(r"([a-z0-9])([A-Z])")


def to_snake_case(text: str) -> str:
    """Convert a CamelCase identifier into a lower-case hyphenated key.

    ``SomeQueryParam`` becomes ``some-query-param``. Input that is already
    lower-case is returned unchanged. Leading acronym runs are split on a
    best-effort basis only.

    Args:
        text: Field identifier.

    Returns:
        Hyphen-separated lower-case key.
    """
    hyphenated = _MATCH_FIRST_CAP.sub(r"\1-\2", text)
    hyphenated = _MATCH_ALL_CAP.sub(r"\1-\2", hyphenated)
    return hyphenated.lower()
