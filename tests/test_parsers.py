from __future__ import annotations

import pytest

from inputer.core.base import ValueParser
from inputer.core.exceptions import InvalidArgumentError, ParseError
from inputer.parsers import DoubleParser, IntegerParser, TextParser


# ---------------------------------------------------------------------------
# TextParser
# ---------------------------------------------------------------------------

class TestTextParser:
    def test_returns_line_unchanged(self) -> None:
        assert TextParser().parse("  hello world ") == "  hello world "

    def test_is_value_parser(self) -> None:
        parser = TextParser("Nope")
        assert isinstance(parser, ValueParser)
        assert parser.name == "string"
        assert parser.error_message == "Nope"


# ---------------------------------------------------------------------------
# IntegerParser
# ---------------------------------------------------------------------------

class TestIntegerParser:
    @pytest.mark.parametrize(
        "raw, expected",
        [("42", 42), ("-17", -17), ("+7", 7), (" 12 ", 12), ("007", 7)],
    )
    def test_parses_base_10_integers(self, raw: str, expected: int) -> None:
        assert IntegerParser().parse(raw) == expected

    @pytest.mark.parametrize("raw", ["abc", "NaN", "4.0", "1_000", "1e3", "0x10", "--1", "+", "٣"])
    def test_rejects_non_integers(self, raw: str) -> None:
        with pytest.raises(ParseError) as exc_info:
            IntegerParser().parse(raw)
        assert exc_info.value.parser_name == "int"

    def test_int_bounds_are_32_bit(self) -> None:
        parser = IntegerParser(32)
        assert parser.name == "int"
        assert parser.parse("2147483647") == 2147483647
        assert parser.parse("-2147483648") == -2147483648
        with pytest.raises(ParseError, match="32-bit"):
            parser.parse("2147483648")

    def test_long_bounds_are_64_bit(self) -> None:
        parser = IntegerParser(64, error_message="Invalid long")
        assert parser.name == "long"
        assert parser.error_message == "Invalid long"
        assert parser.parse("2147483648") == 2147483648
        assert parser.parse("-9223372036854775808") == -(2 ** 63)
        with pytest.raises(ParseError, match="64-bit"):
            parser.parse("9223372036854775808")

    def test_unsupported_width_fails_at_construction(self) -> None:
        with pytest.raises(InvalidArgumentError):
            IntegerParser(16)


# ---------------------------------------------------------------------------
# DoubleParser
# ---------------------------------------------------------------------------

class TestDoubleParser:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("3.14", 3.14),
            ("-2.5e-3", -0.0025),
            (".5", 0.5),
            ("5.", 5.0),
            ("1E10", 1e10),
            ("42", 42.0),
            (" +0.25 ", 0.25),
        ],
    )
    def test_parses_decimal_and_exponential(self, raw: str, expected: float) -> None:
        assert DoubleParser().parse(raw) == expected

    @pytest.mark.parametrize("raw", ["abc", "NaN", "inf", "-Infinity", "1,5", "0x1p3", "1e", "."])
    def test_rejects_non_decimal_text(self, raw: str) -> None:
        with pytest.raises(ParseError) as exc_info:
            DoubleParser().parse(raw)
        assert exc_info.value.parser_name == "double"

    def test_rejects_overflow_to_infinity(self) -> None:
        with pytest.raises(ParseError, match="range"):
            DoubleParser().parse("1e999")

    @pytest.mark.parametrize("raw", ["0.1", "1e-7", "123456.789", "-3.0"])
    def test_parsed_value_round_trips(self, raw: str) -> None:
        value = DoubleParser().parse(raw)
        assert DoubleParser().parse(str(value)) == value
