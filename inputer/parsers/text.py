from __future__ import annotations

from inputer.core.base import ValueParser


class TextParser(ValueParser[str]):
    """Identity parser: every non-empty line is a valid string."""

    _NAME = "string"

    def __init__(self, error_message: str = "Invalid value") -> None:
        self._error_message = error_message

    @property
    def name(self) -> str:
        return self._NAME

    @property
    def error_message(self) -> str:
        return self._error_message

    def parse(self, raw: str) -> str:
        return raw
