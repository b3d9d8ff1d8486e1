from __future__ import annotations


class InputerError(Exception):
    """
    Base for all inputer errors.
    Only InvalidArgumentError, EndOfInputError and ValidatorError ever
    reach the caller; ParseError is handled inside the read loop.
    """


class InvalidArgumentError(InputerError, ValueError):
    """
    Raised at construction time for programmer misuse: a range whose low
    bound exceeds its high bound, an empty option list, etc.
    Never retried.
    """


class ParseError(InputerError, ValueError):
    """
    Raised by a ValueParser when a raw line cannot be converted.
    PromptReader catches it, prints the parser's message and re-prompts.
    """

    def __init__(self, parser_name: str, reason: str) -> None:
        self.parser_name = parser_name
        self.reason = reason
        super().__init__(f"Parser '{parser_name}' rejected input: {reason}")


class EndOfInputError(InputerError, EOFError):
    """
    Raised when the input stream has no more lines.
    Fatal: there is nothing left to retry with.
    """

    def __init__(self, prompt: str | None = None) -> None:
        self.prompt = prompt
        if prompt:
            msg = f"End of input reached while waiting for: {prompt.strip()!r}"
        else:
            msg = "End of input reached"
        super().__init__(msg)


class ValidatorError(InputerError):
    """
    Raised when a caller-supplied validator itself fails (raises instead
    of returning a bool). Wraps the underlying exception to preserve the
    full traceback.
    """

    def __init__(self, validator: object, cause: Exception) -> None:
        self.validator = validator
        self.cause = cause
        name = getattr(validator, "__name__", type(validator).__name__)
        super().__init__(
            f"Validator '{name}' failed: {type(cause).__name__}: {cause}"
        )
