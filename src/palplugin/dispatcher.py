"""Dispatch of host UI triggers to registered actions."""

from __future__ import annotations

import logging

from palplugin.config import Config
from palplugin.context import ActionEvent, HostContext
from palplugin.dialogs import DialogService
from palplugin.errors import ActionDisabledError, ActionNotFoundError
from palplugin.middleware import Middleware
from palplugin.middleware.manager import MiddlewareChainError, MiddlewareManager
from palplugin.registry import ActionRegistry

__all__ = ["ActionDispatcher"]

_logger = logging.getLogger(__name__)


class ActionDispatcher:
    """Runs an action on the calling thread in response to a host trigger.

    The flow is: context creation, action lookup, disabled check,
    middleware before chain, action_performed, middleware after chain.
    Errors run the on_error chain and are re-raised unchanged.
    """

    def __init__(
        self,
        registry: ActionRegistry,
        dialogs: DialogService,
        middlewares: list[Middleware] | None = None,
        config: Config | None = None,
    ) -> None:
        """Initialize the ActionDispatcher.

        Args:
            registry: Action registry for looking up actions by id.
            dialogs: Host dialog service passed to every triggered action.
            middlewares: Optional list of middleware instances to register.
            config: Optional configuration; ``actions.disabled`` is honoured.
        """
        self._registry = registry
        self._dialogs = dialogs
        self._middleware_manager = MiddlewareManager()
        self._config = config or Config()

        if middlewares:
            for mw in middlewares:
                self._middleware_manager.add(mw)

    @property
    def registry(self) -> ActionRegistry:
        """Return the ActionRegistry instance."""
        return self._registry

    @property
    def middlewares(self) -> list[Middleware]:
        """Return a copy of the current middleware list."""
        return self._middleware_manager.snapshot()

    def use(self, middleware: Middleware) -> ActionDispatcher:
        """Add middleware and return self for chaining."""
        self._middleware_manager.add(middleware)
        return self

    def remove(self, middleware: Middleware) -> bool:
        """Remove middleware by identity."""
        return self._middleware_manager.remove(middleware)

    def trigger(self, action_id: str, context: HostContext | None = None) -> None:
        """Invoke an action as the host would on a UI event.

        Args:
            action_id: Id the action was registered under.
            context: Host context anchoring the action's dialogs. A fresh
                one is created when omitted.

        Raises:
            ActionNotFoundError: If no action is registered under action_id.
            ActionDisabledError: If configuration disables the action.
        """
        if context is None:
            context = HostContext.create()

        action = self._registry.get(action_id) if action_id else None
        if action is None:
            raise ActionNotFoundError(action_id=action_id, trace_id=context.trace_id)

        disabled = self._config.get("actions.disabled") or []
        if action_id in disabled:
            raise ActionDisabledError(action_id=action_id, trace_id=context.trace_id)

        executed: list[Middleware] = []
        try:
            try:
                executed = self._middleware_manager.execute_before(action_id, context)
            except MiddlewareChainError as e:
                executed = e.executed_middlewares
                raise e.original from e

            action.action_performed(ActionEvent(context=context, dialogs=self._dialogs))
            self._middleware_manager.execute_after(action_id, context)
        except Exception as exc:
            _logger.debug("Action '%s' failed: %s", action_id, exc)
            self._middleware_manager.execute_on_error(action_id, exc, context, executed)
            raise
