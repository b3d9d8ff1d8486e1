from __future__ import annotations

from .numeric import DoubleParser, IntegerParser
from .text import TextParser

__all__ = [
    "DoubleParser",
    "IntegerParser",
    "TextParser",
]
