"""MiddlewareManager -- onion model execution for action triggers."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from palplugin.middleware.base import Middleware

if TYPE_CHECKING:
    from palplugin.context import HostContext

__all__ = ["MiddlewareManager", "MiddlewareChainError"]

_logger = logging.getLogger(__name__)


class MiddlewareChainError(Exception):
    """Raised when a middleware's before() fails. Carries the middlewares already run."""

    def __init__(self, original: Exception, executed_middlewares: list[Middleware]) -> None:
        super().__init__(str(original))
        self.original = original
        self.executed_middlewares = executed_middlewares


class MiddlewareManager:
    """Ordered list of middlewares run around each action trigger."""

    def __init__(self) -> None:
        self._middlewares: list[Middleware] = []
        self._lock = threading.Lock()

    def add(self, middleware: Middleware) -> None:
        """Append a middleware to the end of the execution list."""
        with self._lock:
            self._middlewares.append(middleware)

    def remove(self, middleware: Middleware) -> bool:
        """Remove a middleware by identity. Returns True if it was found."""
        with self._lock:
            for i, entry in enumerate(self._middlewares):
                if entry is middleware:
                    self._middlewares.pop(i)
                    return True
            return False

    def snapshot(self) -> list[Middleware]:
        """Return a copy of the current middleware list."""
        with self._lock:
            return list(self._middlewares)

    def execute_before(self, action_id: str, context: HostContext) -> list[Middleware]:
        """Run before() in registration order and return the middlewares that ran.

        Raises MiddlewareChainError if any before() raises.
        """
        executed: list[Middleware] = []
        for mw in self.snapshot():
            executed.append(mw)
            try:
                mw.before(action_id, context)
            except Exception as e:
                raise MiddlewareChainError(original=e, executed_middlewares=executed) from e
        return executed

    def execute_after(self, action_id: str, context: HostContext) -> None:
        """Run after() in reverse registration order."""
        for mw in reversed(self.snapshot()):
            mw.after(action_id, context)

    def execute_on_error(
        self,
        action_id: str,
        error: Exception,
        context: HostContext,
        executed_middlewares: list[Middleware],
    ) -> None:
        """Run on_error() on the executed middlewares in reverse order.

        A failing handler is logged and does not stop the others.
        """
        for mw in reversed(executed_middlewares):
            try:
                mw.on_error(action_id, error, context)
            except Exception:
                _logger.error("Exception in on_error handler %r", mw, exc_info=True)
