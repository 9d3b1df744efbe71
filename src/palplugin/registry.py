"""Action registry: the host-side table of action ids to action instances."""

from __future__ import annotations

import logging
import re
import threading
from typing import Any, Callable

from palplugin.action import Action
from palplugin.errors import ActionNotFoundError, InvalidInputError

logger = logging.getLogger(__name__)

__all__ = ["ActionRegistry", "ACTION_ID_PATTERN", "REGISTRY_EVENTS"]

ACTION_ID_PATTERN = re.compile(r"^[a-z][a-z0-9_]*(\.[a-z][a-z0-9_]*)*$")

REGISTRY_EVENTS = ("register", "unregister")


class ActionRegistry:
    """Thread-safe registry of actions keyed by dotted action id."""

    def __init__(self) -> None:
        self._actions: dict[str, Action] = {}
        self._callbacks: dict[str, list[Callable[..., Any]]] = {event: [] for event in REGISTRY_EVENTS}
        self._write_lock = threading.RLock()

    # ----- Registration -----

    def register(self, action_id: str, action: Action) -> None:
        """Register an action instance.

        Raises:
            InvalidInputError: If action_id is empty, malformed, or already registered.
        """
        if not action_id:
            raise InvalidInputError(message="action_id must be a non-empty string")
        if not ACTION_ID_PATTERN.match(action_id):
            raise InvalidInputError(
                message=f"Invalid action id '{action_id}': expected dotted lowercase segments",
                details={"action_id": action_id},
            )

        with self._write_lock:
            if action_id in self._actions:
                raise InvalidInputError(message=f"Action already exists: {action_id}")
            self._actions[action_id] = action

        logger.debug("Registered action '%s' (%s)", action_id, type(action).__name__)
        self._trigger_event("register", action_id, action)

    def unregister(self, action_id: str) -> bool:
        """Remove an action. Returns False if it was not registered."""
        with self._write_lock:
            if action_id not in self._actions:
                return False
            action = self._actions.pop(action_id)

        self._trigger_event("unregister", action_id, action)
        return True

    # ----- Query Methods -----

    def get(self, action_id: str) -> Action | None:
        """Look up an action by id. Returns None if not found.

        Raises:
            ActionNotFoundError: If action_id is empty string.
        """
        if action_id == "":
            raise ActionNotFoundError(action_id="")
        with self._write_lock:
            return self._actions.get(action_id)

    def has(self, action_id: str) -> bool:
        """Check whether an action is registered."""
        with self._write_lock:
            return action_id in self._actions

    def list(self, prefix: str | None = None) -> list[str]:
        """Return sorted registered action ids, optionally filtered by prefix."""
        with self._write_lock:
            ids = list(self._actions.keys())
        if prefix is not None:
            ids = [aid for aid in ids if aid.startswith(prefix)]
        return sorted(ids)

    @property
    def count(self) -> int:
        """Number of registered actions."""
        with self._write_lock:
            return len(self._actions)

    @property
    def action_ids(self) -> list[str]:
        """Sorted list of registered action ids."""
        return self.list()

    # ----- Event System -----

    def on(self, event: str, callback: Callable[..., Any]) -> None:
        """Register a callback(action_id, action) for 'register' or 'unregister'.

        Raises:
            InvalidInputError: If event name is invalid.
        """
        with self._write_lock:
            if event not in self._callbacks:
                raise InvalidInputError(message=f"Invalid event: {event}. Must be 'register' or 'unregister'")
            self._callbacks[event].append(callback)

    def _trigger_event(self, event: str, action_id: str, action: Action) -> None:
        """Trigger all callbacks for an event. Errors are logged and swallowed."""
        with self._write_lock:
            callbacks = list(self._callbacks.get(event, []))
        for cb in callbacks:
            try:
                cb(action_id, action)
            except Exception as e:
                logger.error(
                    "Callback error for event '%s' on action '%s': %s",
                    event,
                    action_id,
                    e,
                )
