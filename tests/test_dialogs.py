"""Tests for the dialog service interface."""

from __future__ import annotations

from palplugin.dialogs import DialogIcon, DialogService


class TestDialogIcon:
    def test_values(self) -> None:
        assert DialogIcon.QUESTION.value == "question"
        assert DialogIcon.INFORMATION.value == "information"
        assert DialogIcon("warning") is DialogIcon.WARNING


class TestDialogService:
    def test_fake_satisfies_protocol(self, dialogs) -> None:
        assert isinstance(dialogs, DialogService)

    def test_object_without_methods_does_not(self) -> None:
        assert not isinstance(object(), DialogService)
