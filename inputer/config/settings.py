from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Runtime settings loaded from environment / .env file.

    Responsibility scope:
      - Standard prompts shown when the caller gives none
      - Inline messages printed before a re-prompt
      - Logging level for the demo entry point

    None of these change the read loop's behaviour, only the text it prints.
    """

    # ------------------------------------------------------------------
    # Standard prompts, used when a getter is called without a prompt.
    # ------------------------------------------------------------------
    string_prompt: str = Field(
        default="Enter a string: ",
        alias="INPUTER_STRING_PROMPT",
    )
    int_prompt: str = Field(
        default="Enter an integer: ",
        alias="INPUTER_INT_PROMPT",
    )
    long_prompt: str = Field(
        default="Enter a long integer: ",
        alias="INPUTER_LONG_PROMPT",
    )
    double_prompt: str = Field(
        default="Enter a double (decimal): ",
        alias="INPUTER_DOUBLE_PROMPT",
    )
    continue_prompt: str = Field(
        default="Press <enter> to continue: ",
        alias="INPUTER_CONTINUE_PROMPT",
        min_length=1,
    )

    # ------------------------------------------------------------------
    # Retry messages. Parse failures get a type-specific message;
    # empty input and validator rejection share the generic one.
    # ------------------------------------------------------------------
    invalid_value_message: str = Field(
        default="Invalid value",
        alias="INPUTER_INVALID_VALUE",
    )
    invalid_int_message: str = Field(
        default="Invalid integer",
        alias="INPUTER_INVALID_INT",
    )
    invalid_long_message: str = Field(
        default="Invalid long",
        alias="INPUTER_INVALID_LONG",
    )
    invalid_double_message: str = Field(
        default="Invalid double (decimal)",
        alias="INPUTER_INVALID_DOUBLE",
    )

    # Appended by get_yn() when the prompt has no (y,n) cue of its own.
    yes_no_suffix: str = Field(
        default=" (y,n) ",
        alias="INPUTER_YES_NO_SUFFIX",
    )

    log_level: str = Field(
        default="WARNING",
        alias="INPUTER_LOG_LEVEL",
    )

    model_config = {
        "env_file": ".env",
        "populate_by_name": True,
        "extra": "ignore",
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
