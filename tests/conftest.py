"""Shared test fixtures: a recording fake of the host dialog service."""

from __future__ import annotations

from typing import Any

import pytest

from palplugin.context import HostContext
from palplugin.dialogs import DialogIcon
from palplugin.middleware import Middleware


class RecordingDialogService:
    """Fake dialog service that answers input prompts from a script.

    Every call is appended to ``calls`` as (kind, context, message, title, icon).
    """

    def __init__(self, answers: list[str | None] | None = None) -> None:
        self._answers = list(answers or [])
        self.calls: list[tuple[str, HostContext, str, str, DialogIcon]] = []

    def show_input_dialog(self, context: HostContext, message: str, title: str, icon: DialogIcon) -> str | None:
        self.calls.append(("input", context, message, title, icon))
        return self._answers.pop(0) if self._answers else None

    def show_message_dialog(self, context: HostContext, message: str, title: str, icon: DialogIcon) -> None:
        self.calls.append(("message", context, message, title, icon))

    @property
    def kinds(self) -> list[str]:
        return [call[0] for call in self.calls]

    @property
    def messages(self) -> list[str]:
        return [call[2] for call in self.calls if call[0] == "message"]


class FailingDialogService(RecordingDialogService):
    """Dialog service whose input prompt raises, like a host with no UI."""

    def show_input_dialog(self, context: HostContext, message: str, title: str, icon: DialogIcon) -> str | None:
        self.calls.append(("input", context, message, title, icon))
        raise RuntimeError("host UI unavailable")


class RecordingMiddleware(Middleware):
    """Middleware that records every hook call into a shared list."""

    def __init__(self, name: str, log: list[tuple[str, str, str]] | None = None) -> None:
        self.name = name
        self.log: list[tuple[str, str, str]] = log if log is not None else []
        self.errors: list[Exception] = []

    def before(self, action_id: str, context: HostContext) -> None:
        self.log.append((self.name, "before", action_id))

    def after(self, action_id: str, context: HostContext) -> None:
        self.log.append((self.name, "after", action_id))

    def on_error(self, action_id: str, error: Exception, context: HostContext) -> Any:
        self.log.append((self.name, "on_error", action_id))
        self.errors.append(error)


@pytest.fixture
def dialogs() -> RecordingDialogService:
    return RecordingDialogService(answers=["Ada"])


@pytest.fixture
def host_context() -> HostContext:
    return HostContext.create(project="demo-project", place="MainMenu")


@pytest.fixture
def make_dialogs():
    """Factory for RecordingDialogService with scripted answers."""
    return RecordingDialogService


@pytest.fixture
def failing_dialogs() -> FailingDialogService:
    return FailingDialogService()


@pytest.fixture
def recording_middleware():
    """Factory for RecordingMiddleware."""
    return RecordingMiddleware
