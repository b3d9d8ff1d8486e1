"""
Interactive demo of PromptReader.

Run:
    python -m inputer.main

Or, once installed:
    inputer-demo

Log verbosity comes from INPUTER_LOG_LEVEL (default WARNING). Logs go to
stderr so they never land between a prompt and its answer.
"""
from __future__ import annotations

import logging
import sys

from inputer.config import get_settings
from inputer.core import EndOfInputError, PromptReader
from inputer.models import Answer
from inputer.validators import double_range, int_range, one_of_these, yes_or_no

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        stream=sys.stderr,
        level=level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s %(message)s",
    )


def run(reader: PromptReader) -> None:
    agree = reader.get_string("Do you agree? (y,n) ", yes_or_no())
    reader.pause()

    while True:
        name = reader.get_string("Enter your name")
        age = reader.get_int("Enter your age", int_range(0, 130))
        number = reader.get_int("Enter a positive integer", lambda i: i > 0)
        gender = reader.get_string("Enter gender (m/f/t) ", one_of_these("m", "f", "t"))
        total = reader.get_double("Enter a positive amount: ", lambda d: d > 0)
        extra = reader.get_double("Enter extra charge", double_range(1.5, 9.5))
        if reader.get_yn("Is this correct?") == Answer.YES:
            break

    print(f"Name: {name}, Age {age}, Number: {number}, Gender {gender}")
    print(f"Extra charge: {extra:1.2f}, Total: {total:10,.2f} ", end="")
    print("User agreed" if agree[0].lower() == "y" else "User didn't agree")


def main() -> int:
    settings = get_settings()
    _configure_logging(settings.log_level)

    try:
        run(PromptReader(settings=settings))
    except EndOfInputError:
        logger.error("Input ended before the demo finished.")
        print()
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
