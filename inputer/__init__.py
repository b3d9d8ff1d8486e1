"""
inputer: prompt for, read and validate values from the console.

    from inputer import PromptReader, int_range

    reader = PromptReader()
    age = reader.get_int("Enter your age", int_range(0, 130))
"""

from .core import (
    EndOfInputError,
    InputerError,
    InvalidArgumentError,
    ParseError,
    PromptReader,
    ValidatorError,
    ValueParser,
    format_prompt,
)
from .models import NO_DEFAULT, Answer, PromptOptions
from .validators import double_range, int_range, one_of_these, yes_or_no

__all__ = [
    "PromptReader",
    "PromptOptions",
    "ValueParser",
    "Answer",
    "NO_DEFAULT",
    "format_prompt",
    "int_range",
    "double_range",
    "one_of_these",
    "yes_or_no",
    "InputerError",
    "InvalidArgumentError",
    "ParseError",
    "EndOfInputError",
    "ValidatorError",
]
