"""Tests for structural zero-value checks."""

from __future__ import annotations

import sys
import unittest
from dataclasses import dataclass, field
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from HttpUtils.core.values import Bool, Int32, Text, TextList
from HttpUtils.utils.zero import is_zero_value


@dataclass
class _Settings:
    name: str
    retries: int = 0
    tags: list[str] = field(default_factory=list)


class TestIsZeroValue(unittest.TestCase):
    def test_builtins(self) -> None:
        for value in (None, 0, 0.0, "", [], {}, False, ()):
            with self.subTest(value=value):
                self.assertTrue(is_zero_value(value))
        for value in (1, "x", [0], True):
            with self.subTest(value=value):
                self.assertFalse(is_zero_value(value))

    def test_query_values(self) -> None:
        self.assertTrue(is_zero_value(Text("")))
        self.assertTrue(is_zero_value(TextList()))
        self.assertTrue(is_zero_value(Int32(0)))
        self.assertTrue(is_zero_value(Bool(False)))
        self.assertFalse(is_zero_value(TextList(["a"])))
        self.assertFalse(is_zero_value(Text("x")))

    def test_dataclass_compares_against_defaults(self) -> None:
        self.assertTrue(is_zero_value(_Settings(name="")))
        self.assertFalse(is_zero_value(_Settings(name="prod")))
        self.assertFalse(is_zero_value(_Settings(name="", retries=3)))
        self.assertFalse(is_zero_value(_Settings(name="", tags=["a"])))

    def test_objects_without_default_constructor_are_not_zero(self) -> None:
        self.assertFalse(is_zero_value(range(0)))


if __name__ == "__main__":
    unittest.main()
