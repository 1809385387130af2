from __future__ import annotations

from dataclasses import dataclass, fields

from HttpUtils.core.values import QUERY_VALUE_TYPES


class UnsupportedFieldError(TypeError):
    """Raised when a query field holds something other than a query value."""

    def __init__(self, field_name: str, value: object) -> None:
        super().__init__(
            f"Query field {field_name!r} holds unsupported {type(value).__name__}; "
            "expected None or one of Text, TextList, Int32, Int64, BigInt, Bool"
        )
        self.field_name = field_name
        self.value = value


@dataclass(frozen=True, slots=True)
class QueryRecord:
    """Base class for records whose optional fields become query parameters.

    Subclasses are frozen dataclasses whose fields default to ``None``
    (absent) and otherwise hold one query value variant. Field names are
    declared in camelCase and converted to hyphenated keys on encoding::

        @dataclass(frozen=True)
        class QuoteRequest(QueryRecord):
            QueryParamOne: Text | None = None
            QueryParamTwo: Text | None = None

    Field declaration order is the order of the tokens in the query string.
    """

    def __post_init__(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            if value is not None and not isinstance(value, QUERY_VALUE_TYPES):
                raise UnsupportedFieldError(field.name, value)
