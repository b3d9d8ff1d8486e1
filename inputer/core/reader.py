from __future__ import annotations

import logging
import sys
import threading
from typing import Any, Callable, TextIO, TypeVar

from inputer.config import Settings, get_settings
from inputer.core.base import ValueParser
from inputer.core.exceptions import EndOfInputError, ParseError, ValidatorError
from inputer.core.formatting import ends_with_yes_no_cue, format_prompt
from inputer.models import (
    NO_DEFAULT,
    TERMINAL_OUTCOMES,
    Answer,
    PromptOptions,
    ReadOutcome,
)
from inputer.parsers import DoubleParser, IntegerParser, TextParser
from inputer.validators import yes_or_no

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PromptReader:
    """
    Prompts for, reads and validates one value per call.

    Every getter runs the same loop (see read()):
      PROMPT → READ → EMPTY:    default supplied? → return default
                                otherwise          → "Invalid value", retry
                    → NONEMPTY: parse fails?       → type message, retry
                                validator rejects? → "Invalid value", retry
                                otherwise          → return value

    Only two things escape the loop: EndOfInputError when the input
    stream is exhausted, and ValidatorError when a validator raises.

    The reader owns its input cursor. Sharing one reader between threads
    is safe: each prompt/read/message cycle runs under an internal lock,
    so prompts from different threads never interleave with reads.
    """

    def __init__(
            self,
            stdin: TextIO | None = None,
            stdout: TextIO | None = None,
            settings: Settings | None = None,
    ) -> None:
        self._stdin: TextIO = stdin if stdin is not None else sys.stdin
        self._stdout: TextIO = stdout if stdout is not None else sys.stdout
        self._settings = settings or get_settings()
        self._lock = threading.Lock()

        self._text_parser = TextParser(self._settings.invalid_value_message)
        self._int_parser = IntegerParser(32, self._settings.invalid_int_message)
        self._long_parser = IntegerParser(64, self._settings.invalid_long_message)
        self._double_parser = DoubleParser(self._settings.invalid_double_message)

    @property
    def settings(self) -> Settings:
        return self._settings

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def read(self, parser: ValueParser[T], options: PromptOptions) -> T:
        """
        Canonical entry point. Blocks until a valid value or the default
        can be returned.

        Raises:
            EndOfInputError: the input stream has no more lines.
            ValidatorError: options.validator raised instead of returning.
        """
        text = format_prompt(options.prompt, options.default, self._settings)

        while True:
            with self._lock:
                self._write(text)
                line = self._read_line(text)
                outcome, value = self._attempt(parser, options, line)

                if outcome in TERMINAL_OUTCOMES:
                    return value

                logger.debug("Retrying %s read after outcome=%s", parser.name, outcome.value)
                print(self._message_for(outcome, parser), file=self._stdout)

    def get_string(
            self,
            prompt: str | None = None,
            validator: Callable[[str], bool] | None = None,
            default: Any = NO_DEFAULT,
    ) -> str:
        return self.read(
            self._text_parser,
            self._options(prompt, self._settings.string_prompt, validator, default),
        )

    def get_int(
            self,
            prompt: str | None = None,
            validator: Callable[[int], bool] | None = None,
            default: Any = NO_DEFAULT,
    ) -> int:
        return self.read(
            self._int_parser,
            self._options(prompt, self._settings.int_prompt, validator, default),
        )

    def get_long(
            self,
            prompt: str | None = None,
            validator: Callable[[int], bool] | None = None,
            default: Any = NO_DEFAULT,
    ) -> int:
        return self.read(
            self._long_parser,
            self._options(prompt, self._settings.long_prompt, validator, default),
        )

    def get_double(
            self,
            prompt: str | None = None,
            validator: Callable[[float], bool] | None = None,
            default: Any = NO_DEFAULT,
    ) -> float:
        return self.read(
            self._double_parser,
            self._options(prompt, self._settings.double_prompt, validator, default),
        )

    def get_yn(self, prompt: str) -> Answer:
        """
        Prompts for a yes/no response and returns Answer.YES or Answer.NO.

        Any input starting with y/Y or n/N is accepted. " (y,n) " is
        appended unless the prompt already ends with such a cue. Answer is
        a str enum, so the result compares equal to 'y' / 'n':

            while reader.get_yn("Is this correct?") == "n":
                ...
        """
        if not ends_with_yes_no_cue(prompt):
            prompt += self._settings.yes_no_suffix

        result = self.get_string(prompt, yes_or_no())
        return Answer(result[0].lower())

    def pause(self, prompt: str | None = None) -> None:
        """Shows the prompt and discards one line, whatever it holds."""
        text = format_prompt(prompt, settings=self._settings)
        with self._lock:
            self._write(text)
            self._read_line(text)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _options(
            prompt: str | None,
            standard_prompt: str,
            validator: Callable[[Any], bool] | None,
            default: Any,
    ) -> PromptOptions:
        return PromptOptions(
            prompt=prompt or standard_prompt,
            validator=validator,
            default=default,
        )

    @staticmethod
    def _attempt(
            parser: ValueParser[T],
            options: PromptOptions,
            line: str,
    ) -> tuple[ReadOutcome, Any]:
        """
        Classify one line. Returns (outcome, value); value is only
        meaningful for terminal outcomes.
        """
        if line == "":
            if options.has_default:
                return ReadOutcome.DEFAULT, options.default
            return ReadOutcome.EMPTY, None

        try:
            value = parser.parse(line)
        except ParseError as exc:
            logger.debug("Parse failure in %s: %s", exc.parser_name, exc.reason)
            return ReadOutcome.PARSE_ERROR, None

        if options.validator is None:
            return ReadOutcome.VALUE, value

        try:
            accepted = options.validator(value)
        except Exception as exc:
            raise ValidatorError(options.validator, exc) from exc

        if accepted:
            return ReadOutcome.VALUE, value
        return ReadOutcome.REJECTED, None

    def _message_for(self, outcome: ReadOutcome, parser: ValueParser[Any]) -> str:
        if outcome is ReadOutcome.PARSE_ERROR:
            return parser.error_message
        return self._settings.invalid_value_message

    def _write(self, text: str) -> None:
        self._stdout.write(text)
        self._stdout.flush()

    def _read_line(self, prompt: str) -> str:
        line = self._stdin.readline()
        if line == "":
            logger.warning("Input stream exhausted while prompting: %r", prompt.strip())
            raise EndOfInputError(prompt)
        return line.rstrip("\r\n")
