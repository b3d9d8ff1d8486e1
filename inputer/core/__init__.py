from .base import ValueParser
from .exceptions import (
    EndOfInputError,
    InputerError,
    InvalidArgumentError,
    ParseError,
    ValidatorError,
)
from .formatting import ends_with_yes_no_cue, format_prompt
from .reader import PromptReader

__all__ = [
    "ValueParser",
    "InputerError",
    "InvalidArgumentError",
    "ParseError",
    "EndOfInputError",
    "ValidatorError",
    "ends_with_yes_no_cue",
    "format_prompt",
    "PromptReader",
]
