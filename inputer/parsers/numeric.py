from __future__ import annotations

import math
import re

from inputer.core.base import ValueParser
from inputer.core.exceptions import InvalidArgumentError, ParseError

# Optional sign followed by ASCII digits only. int() alone would also
# accept underscores ("1_000") and non-ASCII digits.
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

# Decimal or exponential notation: 12, -3.5, .5, 5., 1e10, 2.5E-3
_DOUBLE_RE = re.compile(
    r"[+-]?"
    r"(?:[0-9]+\.?[0-9]*|\.[0-9]+)"  # mantissa
    r"(?:[eE][+-]?[0-9]+)?"          # optional exponent
)


class IntegerParser(ValueParser[int]):
    """
    Base-10 signed integer bounded to a two's-complement width.

    bits=32 gives the "int" range, bits=64 the "long" range.
    """

    def __init__(self, bits: int = 32, error_message: str = "Invalid integer") -> None:
        if bits not in (32, 64):
            raise InvalidArgumentError(f"bits must be 32 or 64, got {bits}")
        self._bits = bits
        self._min = -(2 ** (bits - 1))
        self._max = 2 ** (bits - 1) - 1
        self._error_message = error_message

    @property
    def name(self) -> str:
        return "int" if self._bits == 32 else "long"

    @property
    def error_message(self) -> str:
        return self._error_message

    def parse(self, raw: str) -> int:
        text = raw.strip()
        if not _INTEGER_RE.fullmatch(text):
            raise ParseError(self.name, "not a base-10 integer")

        value = int(text)
        if not self._min <= value <= self._max:
            raise ParseError(self.name, f"outside {self._bits}-bit range")
        return value


class DoubleParser(ValueParser[float]):
    """
    IEEE-754 double in decimal or exponential notation.

    NaN and the infinities are rejected, including values that overflow
    to infinity ("1e999"), so a returned value always round-trips through
    str() and float().
    """

    _NAME = "double"

    def __init__(self, error_message: str = "Invalid double (decimal)") -> None:
        self._error_message = error_message

    @property
    def name(self) -> str:
        return self._NAME

    @property
    def error_message(self) -> str:
        return self._error_message

    def parse(self, raw: str) -> float:
        text = raw.strip()
        if not _DOUBLE_RE.fullmatch(text):
            raise ParseError(self._NAME, "not a decimal number")

        value = float(text)
        if not math.isfinite(value):
            raise ParseError(self._NAME, "out of double range")
        return value
