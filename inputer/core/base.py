from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class ValueParser(ABC, Generic[T]):
    """
    Abstract base for every value parser used by PromptReader.

    Contract:
    - parse() receives a non-empty line (newline already stripped) and
      returns the converted value, or raises ParseError. Any other
      exception is a bug in the parser.
    - Parsers are stateless: one instance may serve any number of reads.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Stable identifier used in ParseError and logs."""

    @property
    @abstractmethod
    def error_message(self) -> str:
        """Message printed before re-prompting on a parse failure."""

    @abstractmethod
    def parse(self, raw: str) -> T:
        """
        Convert one line of input.

        Raises:
            ParseError: the line is not a valid value of this type.
        """
