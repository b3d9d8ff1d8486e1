from .enums import NO_DEFAULT, TERMINAL_OUTCOMES, Answer, ReadOutcome
from .options import PromptOptions

__all__ = [
    "NO_DEFAULT",
    "TERMINAL_OUTCOMES",
    "Answer",
    "ReadOutcome",
    "PromptOptions",
]
