from enum import Enum


class Answer(str, Enum):
    YES = "y"
    NO = "n"


class ReadOutcome(str, Enum):
    VALUE = "value"
    DEFAULT = "default"
    EMPTY = "empty"
    PARSE_ERROR = "parse_error"
    REJECTED = "rejected"


# Outcomes that end the read loop; everything else re-prompts.
TERMINAL_OUTCOMES: frozenset[ReadOutcome] = frozenset(
    {ReadOutcome.VALUE, ReadOutcome.DEFAULT}
)


class _Missing(Enum):
    NO_DEFAULT = "NO_DEFAULT"

    def __repr__(self) -> str:
        return "NO_DEFAULT"


# Marks "no default supplied". Distinct from None and from "" (optional).
NO_DEFAULT = _Missing.NO_DEFAULT
