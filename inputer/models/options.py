from __future__ import annotations

from typing import Any, Callable

from pydantic import BaseModel

from .enums import NO_DEFAULT


class PromptOptions(BaseModel):
    """
    Immutable description of one read: what to show, how to check the
    parsed value, and what to return on an empty line.

    `default` is tri-state:
      - NO_DEFAULT  → an empty line is an error (None means the same)
      - ""          → the value is optional; an empty line returns ""
      - any value   → returned verbatim on an empty line, never validated
    """

    model_config = {"frozen": True}

    prompt: str | None = None
    validator: Callable[[Any], bool] | None = None
    default: Any = NO_DEFAULT

    @property
    def has_default(self) -> bool:
        return self.default is not NO_DEFAULT and self.default is not None

    @property
    def is_optional(self) -> bool:
        """True when the default is the empty string."""
        return isinstance(self.default, str) and self.default == ""
