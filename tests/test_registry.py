"""Tests for ActionRegistry."""

from __future__ import annotations

import logging
import threading

import pytest

from palplugin.action import Action
from palplugin.errors import ActionNotFoundError, InvalidInputError
from palplugin.registry import ACTION_ID_PATTERN, REGISTRY_EVENTS, ActionRegistry


class _NoopAction(Action):
    text = "Noop"

    def action_performed(self, event) -> None:
        pass


class TestRegister:
    """Tests for ActionRegistry.register()."""

    def test_register_and_get(self) -> None:
        reg = ActionRegistry()
        action = _NoopAction()
        reg.register("pal.noop", action)
        assert reg.get("pal.noop") is action
        assert reg.has("pal.noop")
        assert reg.count == 1

    def test_empty_id_rejected(self) -> None:
        with pytest.raises(InvalidInputError, match="non-empty"):
            ActionRegistry().register("", _NoopAction())

    @pytest.mark.parametrize("bad_id", ["Pal.Greeting", "pal..greeting", "1pal", "pal.greeting.", "pal-greeting"])
    def test_malformed_id_rejected(self, bad_id: str) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            ActionRegistry().register(bad_id, _NoopAction())
        assert exc_info.value.details["action_id"] == bad_id

    def test_duplicate_rejected(self) -> None:
        reg = ActionRegistry()
        reg.register("pal.noop", _NoopAction())
        with pytest.raises(InvalidInputError, match="already exists"):
            reg.register("pal.noop", _NoopAction())

    def test_pattern_accepts_dotted_lowercase(self) -> None:
        assert ACTION_ID_PATTERN.match("pal.greeting")
        assert ACTION_ID_PATTERN.match("tools.text_case.upper2")


class TestQuery:
    """Tests for lookup and listing."""

    def test_get_missing_returns_none(self) -> None:
        assert ActionRegistry().get("pal.missing") is None

    def test_get_empty_id_raises(self) -> None:
        with pytest.raises(ActionNotFoundError):
            ActionRegistry().get("")

    def test_list_sorted_and_prefix_filtered(self) -> None:
        reg = ActionRegistry()
        for action_id in ["pal.b", "other.a", "pal.a"]:
            reg.register(action_id, _NoopAction())
        assert reg.list() == ["other.a", "pal.a", "pal.b"]
        assert reg.list(prefix="pal.") == ["pal.a", "pal.b"]
        assert reg.action_ids == ["other.a", "pal.a", "pal.b"]

    def test_unregister(self) -> None:
        reg = ActionRegistry()
        reg.register("pal.a", _NoopAction())
        assert reg.unregister("pal.a") is True
        assert reg.unregister("pal.a") is False
        assert reg.count == 0


class TestEvents:
    """Tests for register/unregister callbacks."""

    def test_events_constant(self) -> None:
        assert REGISTRY_EVENTS == ("register", "unregister")

    def test_callbacks_fire(self) -> None:
        reg = ActionRegistry()
        seen: list[tuple[str, str]] = []
        reg.on("register", lambda aid, action: seen.append(("register", aid)))
        reg.on("unregister", lambda aid, action: seen.append(("unregister", aid)))
        reg.register("pal.a", _NoopAction())
        reg.unregister("pal.a")
        assert seen == [("register", "pal.a"), ("unregister", "pal.a")]

    def test_invalid_event_rejected(self) -> None:
        with pytest.raises(InvalidInputError, match="Invalid event"):
            ActionRegistry().on("load", lambda aid, action: None)

    def test_callback_error_logged_and_swallowed(self, caplog: pytest.LogCaptureFixture) -> None:
        reg = ActionRegistry()

        def boom(aid, action):
            raise ValueError("boom")

        reg.on("register", boom)
        with caplog.at_level(logging.ERROR, logger="palplugin.registry"):
            reg.register("pal.a", _NoopAction())
        assert reg.has("pal.a")
        assert "boom" in caplog.text


class TestThreadSafety:
    """Concurrent registration keeps every action."""

    def test_concurrent_register(self) -> None:
        reg = ActionRegistry()

        def worker(n: int) -> None:
            for i in range(50):
                reg.register(f"pal.w{n}.a{i}", _NoopAction())

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert reg.count == 200
