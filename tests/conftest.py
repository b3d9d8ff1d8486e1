"""
conftest.py: shared fixtures for the entire test suite.

Isolation strategy
──────────────────
Settings read INPUTER_* variables from the environment and a .env file.
The autouse `isolate_settings_env` fixture removes every INPUTER_* variable
and clears the get_settings() cache around each test, so a developer's
shell never changes the prompts a test expects.

Every Settings built inside tests goes through `make_settings`, which
passes `_env_file=None` so pydantic-settings never reads a .env from disk.

Simulated console
─────────────────
`make_reader(*lines)` returns a PromptReader wired to an in-memory stdin
holding the given lines, plus the StringIO that receives its output.
"""
from __future__ import annotations

import io
import os
from typing import Any, Callable

import pytest

from inputer.config import Settings, get_settings
from inputer.core import PromptReader


@pytest.fixture(autouse=True)
def isolate_settings_env(monkeypatch: pytest.MonkeyPatch):
    for key in list(os.environ):
        if key.startswith("INPUTER_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def _make_settings(**kwargs: Any) -> Settings:
    return Settings(_env_file=None, **kwargs)


@pytest.fixture
def make_settings() -> Callable[..., Settings]:
    """Factory for Settings that never touches a .env file."""
    return _make_settings


@pytest.fixture
def settings() -> Settings:
    return _make_settings()


@pytest.fixture
def make_reader() -> Callable[..., tuple[PromptReader, io.StringIO]]:
    def _factory(*lines: str, settings: Settings | None = None) -> tuple[PromptReader, io.StringIO]:
        stdin = io.StringIO("".join(f"{line}\n" for line in lines))
        stdout = io.StringIO()
        reader = PromptReader(
            stdin=stdin,
            stdout=stdout,
            settings=settings or _make_settings(),
        )
        return reader, stdout

    return _factory
