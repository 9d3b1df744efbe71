"""Middleware base class for palplugin."""

from __future__ import annotations

from palplugin.context import HostContext


class Middleware:
    """Base middleware class with default no-op implementations.

    Subclass and override the hooks you need. Hooks observe an action
    trigger; they cannot change what the action does.
    """

    def before(self, action_id: str, context: HostContext) -> None:
        """Called before the action runs."""
        return None

    def after(self, action_id: str, context: HostContext) -> None:
        """Called after the action returns."""
        return None

    def on_error(self, action_id: str, error: Exception, context: HostContext) -> None:
        """Called when the action or a before() hook raises."""
        return None
