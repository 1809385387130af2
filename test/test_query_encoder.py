"""Tests for query string encoding of optional-field records."""

from __future__ import annotations

import sys
import unittest
from dataclasses import dataclass
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from HttpUtils.core.record import QueryRecord, UnsupportedFieldError
from HttpUtils.core.values import BigInt, Bool, Int32, Int64, Text, TextList
from HttpUtils.query.dispatch import append_queries
from HttpUtils.query.encoder import build_url, iter_query_fields, request_struct_to_query


@dataclass(frozen=True)
class _QuoteRequest(QueryRecord):
    QueryParamOne: Text | None = None
    QueryParamTwo: Text | None = None
    QueryParamThree: Text | None = None


class _Ticker(Text):
    """Text subtype used by callers to tag symbol fields."""


@dataclass(frozen=True)
class _WatchlistRequest(QueryRecord):
    primarySymbol: _Ticker | None = None
    watchSymbols: TextList | None = None


@dataclass(frozen=True)
class _MixedRequest(QueryRecord):
    symbols: TextList | None = None
    pageSize: Int32 | None = None
    startTime: Int64 | None = None
    totalSupply: BigInt | None = None
    includeOtc: Bool | None = None
    fooBar: Text | None = None


class TestRequestStructToQuery(unittest.TestCase):
    def test_all_absent_returns_bare_question_mark(self) -> None:
        self.assertEqual(request_struct_to_query(_MixedRequest()), "?")

    def test_single_text_field_is_hyphen_cased(self) -> None:
        self.assertEqual(request_struct_to_query(_MixedRequest(fooBar=Text("x"))), "?foo-bar=x")

    def test_text_list_repeats_bracket_key(self) -> None:
        record = {"items": TextList(["a", "b"])}
        self.assertEqual(request_struct_to_query(record), "?items[]=a&items[]=b")

    def test_empty_text_list_contributes_nothing(self) -> None:
        self.assertEqual(request_struct_to_query({"items": TextList([])}), "?")

    def test_quote_request_scenario(self) -> None:
        record = _QuoteRequest(QueryParamOne=Text("true"), QueryParamTwo=Text("TSLA"))
        self.assertEqual(
            request_struct_to_query(record),
            "?query-param-one=true&query-param-two=TSLA",
        )

    def test_mixed_fields_keep_declaration_order(self) -> None:
        record = _MixedRequest(
            fooBar=Text("last"),
            includeOtc=Bool(False),
            symbols=TextList(("AAPL", "MSFT")),
            pageSize=Int32(50),
            startTime=Int64(-1700000000000),
            totalSupply=BigInt(10**30),
        )
        self.assertEqual(
            request_struct_to_query(record),
            "?symbols[]=AAPL&symbols[]=MSFT"
            "&page-size=50"
            "&start-time=-1700000000000"
            "&total-supply=1000000000000000000000000000000"
            "&include-otc=false"
            "&foo-bar=last",
        )

    def test_int32_field_is_emitted(self) -> None:
        self.assertEqual(request_struct_to_query(_MixedRequest(pageSize=Int32(0))), "?page-size=0")

    def test_integer_values_round_trip(self) -> None:
        cases = [
            Int32(-(2**31)),
            Int32(2**31 - 1),
            Int64(-(2**63)),
            Int64(2**63 - 1),
            BigInt(0),
            BigInt(-(10**40) - 7),
        ]
        for value in cases:
            with self.subTest(value=value):
                query = request_struct_to_query({"n": value})
                self.assertTrue(query.startswith("?n="))
                self.assertEqual(int(query[len("?n="):]), value.value)

    def test_bool_true(self) -> None:
        self.assertEqual(request_struct_to_query({"active": Bool(True)}), "?active=true")

    def test_values_are_not_escaped_by_default(self) -> None:
        query = request_struct_to_query({"q": Text("a&b=c d")})
        self.assertEqual(query, "?q=a&b=c d")

    def test_escape_percent_encodes_values(self) -> None:
        query = request_struct_to_query(
            {"q": Text("a&b=c d"), "tags": TextList(["é"])},
            escape=True,
        )
        self.assertEqual(query, "?q=a%26b%3Dc%20d&tags[]=%C3%A9")

    def test_mapping_with_unsupported_value_is_rejected(self) -> None:
        with self.assertRaises(UnsupportedFieldError):
            request_struct_to_query({"ok": Text("x"), "bad": "plain string"})

    def test_non_record_input_is_rejected(self) -> None:
        with self.assertRaises(TypeError):
            request_struct_to_query(["not", "a", "record"])  # type: ignore[arg-type]


class TestQueryRecord(unittest.TestCase):
    def test_unsupported_field_rejected_at_construction(self) -> None:
        with self.assertRaises(UnsupportedFieldError) as ctx:
            _QuoteRequest(QueryParamOne="raw")  # type: ignore[arg-type]
        self.assertEqual(ctx.exception.field_name, "QueryParamOne")

    def test_unsupported_field_error_is_type_error(self) -> None:
        with self.assertRaises(TypeError):
            _MixedRequest(pageSize=5)  # type: ignore[arg-type]

    def test_variant_subclass_is_accepted_and_encoded(self) -> None:
        record = _WatchlistRequest(primarySymbol=_Ticker("TSLA"), watchSymbols=TextList(["AAPL"]))
        self.assertEqual(request_struct_to_query(record), "?primary-symbol=TSLA&watch-symbols[]=AAPL")

    def test_iter_query_fields_follows_declaration_order(self) -> None:
        names = [name for name, _ in iter_query_fields(_QuoteRequest())]
        self.assertEqual(names, ["QueryParamOne", "QueryParamTwo", "QueryParamThree"])


class TestAppendQueries(unittest.TestCase):
    def test_extends_accumulator_in_place(self) -> None:
        queries = ["existing=1"]
        append_queries(TextList(["x", "y"]), "tag", queries)
        self.assertEqual(queries, ["existing=1", "tag[]=x", "tag[]=y"])

    def test_variant_subclass_uses_base_serializer(self) -> None:
        queries: list[str] = []
        append_queries(_Ticker("A&B"), "symbol", queries, escape=True)
        self.assertEqual(queries, ["symbol=A%26B"])

    def test_unknown_value_raises(self) -> None:
        with self.assertRaises(UnsupportedFieldError):
            append_queries(3.5, "ratio", [])  # type: ignore[arg-type]


class TestBuildUrl(unittest.TestCase):
    def test_appends_query(self) -> None:
        url = build_url("https://api.example.com/quotes", _QuoteRequest(QueryParamTwo=Text("TSLA")))
        self.assertEqual(url, "https://api.example.com/quotes?query-param-two=TSLA")

    def test_empty_record_leaves_url_unchanged(self) -> None:
        self.assertEqual(build_url("https://api.example.com", _QuoteRequest()), "https://api.example.com")


if __name__ == "__main__":
    unittest.main()
