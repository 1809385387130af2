"""Structural comparison against a type's default value."""

from __future__ import annotations

from dataclasses import MISSING, fields, is_dataclass
from typing import Any

from HttpUtils.core.values import QUERY_VALUE_TYPES, TextList


def is_zero_value(value: Any) -> bool:
    """Return True if ``value`` equals the default instance of its type.

    ``None`` is zero. Query values are zero when their payload is zero or
    empty. Dataclass instances are compared field by field against each
    field's declared default, or the zero of the field's runtime type when
    no default is declared. Other values are compared with ``type(value)()``;
    types that cannot be built without arguments are never zero.
    """
    if value is None:
        return True
    if isinstance(value, TextList):
        return not value.values
    if isinstance(value, QUERY_VALUE_TYPES):
        return is_zero_value(value.value)
    if is_dataclass(value) and not isinstance(value, type):
        for field in fields(value):
            current = getattr(value, field.name)
            if field.default is not MISSING:
                if current != field.default:
                    return False
            elif field.default_factory is not MISSING:
                if current != field.default_factory():
                    return False
            elif not is_zero_value(current):
                return False
        return True
    try:
        default = type(value)()
    except TypeError:
        return False
    return value == default
