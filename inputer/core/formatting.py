from __future__ import annotations

import re
from typing import Any

from inputer.config import Settings, get_settings
from inputer.models import NO_DEFAULT, PromptOptions

# Caller prompt already ends with ":", "?" or ")" (trailing whitespace ignored).
_NO_COLON_RE = re.compile(r"[:?)]\s*$")

_YES_OR_NO = r"(?:y|yes|n|no)"

# "(y,n)", "(Y/N)", "(yes / no)", "(yn)" ... at the end of the prompt.
_ENDS_WITH_YN_RE = re.compile(
    r"\(\s*"
    + _YES_OR_NO
    + r"\s*[,/]?\s*"
    + _YES_OR_NO
    + r"\s*\)\s*$",
    re.IGNORECASE,
)

_OPTIONAL_RE = re.compile(r"optional", re.IGNORECASE)


def needs_colon(prompt: str) -> bool:
    return _NO_COLON_RE.search(prompt) is None


def ends_with_yes_no_cue(prompt: str) -> bool:
    return _ENDS_WITH_YN_RE.search(prompt) is not None


def format_prompt(
        prompt: str | None,
        default: Any = NO_DEFAULT,
        settings: Settings | None = None,
) -> str:
    """
    Build the text printed before a read.

    Rules, in order:
      1. None or "" → the standard "press enter" prompt, returned as is.
      2. A concrete default (not None) appends " [<default>]"; an empty-string
         default appends " (optional)" unless "optional" is already there.
      3. ": " is appended unless the caller's prompt already ends with
         ":", "?" or ")". The check runs before step 2.
    """
    settings = settings or get_settings()
    if not prompt:
        return settings.continue_prompt

    add_colon = needs_colon(prompt)
    options = PromptOptions(prompt=prompt, default=default)

    cue = ""
    if options.is_optional:
        if not _OPTIONAL_RE.search(prompt):
            cue = " (optional)"
    elif options.has_default:
        cue = f" [{default}]"

    if not cue:
        return prompt + ": " if add_colon else prompt

    body = prompt.rstrip() + cue
    return body + ": " if add_colon else body + " "
