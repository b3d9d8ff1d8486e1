"""
Validator factories.

Each factory checks its arguments immediately and returns a plain
predicate. Misuse raises InvalidArgumentError at construction time,
never when the predicate is later applied to input.

    age = reader.get_int("Enter your age", int_range(0, 130))
    gender = reader.get_string("Enter gender (m/f/t)", one_of_these("m", "f", "t"))
"""
from __future__ import annotations

from typing import Callable

from inputer.core.exceptions import InvalidArgumentError

# Minimum number of options accepted by one_of_these().
MIN_OPTIONS = 1

_YES_NO_INITIALS = frozenset("yn")


def int_range(low: int, high: int) -> Callable[[int], bool]:
    """Predicate testing low <= value <= high (inclusive)."""
    if low > high:
        raise InvalidArgumentError(f"int_range: low ({low}) > high ({high})")

    def in_int_range(value: int) -> bool:
        return low <= value <= high

    return in_int_range


def double_range(low: float, high: float) -> Callable[[float], bool]:
    """Predicate testing low <= value <= high (inclusive)."""
    if low > high:
        raise InvalidArgumentError(f"double_range: low ({low}) > high ({high})")

    def in_double_range(value: float) -> bool:
        return low <= value <= high

    return in_double_range


def one_of_these(*options: str) -> Callable[[str], bool]:
    """Predicate testing case-insensitive equality with any option."""
    if len(options) < MIN_OPTIONS:
        raise InvalidArgumentError(
            f"one_of_these: at least {MIN_OPTIONS} option required, got {len(options)}"
        )
    folded = frozenset(option.casefold() for option in options)

    def is_one_of(value: str) -> bool:
        return value.casefold() in folded

    return is_one_of


def yes_or_no() -> Callable[[str], bool]:
    """Predicate testing that the first character is y/Y or n/N."""

    def starts_with_y_or_n(value: str) -> bool:
        return bool(value) and value[0].lower() in _YES_NO_INITIALS

    return starts_with_y_or_n
