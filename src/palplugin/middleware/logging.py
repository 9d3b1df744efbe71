"""LoggingMiddleware for structured action trigger logging."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from palplugin.middleware.base import Middleware

if TYPE_CHECKING:
    from palplugin.context import HostContext

__all__ = ["LoggingMiddleware"]


class LoggingMiddleware(Middleware):
    """Logs action start, completion (with duration) and errors.

    Only ids and timings are logged, never what the user typed into a
    dialog. Per-trigger state lives in context.data.
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        log_start: bool = True,
        log_end: bool = True,
        log_errors: bool = True,
    ) -> None:
        self._logger = logger or logging.getLogger("palplugin.middleware.logging")
        self._log_start = log_start
        self._log_end = log_end
        self._log_errors = log_errors

    def before(self, action_id: str, context: HostContext) -> None:
        """Record start time and log the trigger."""
        context.data["_logging_mw_start"] = time.time()

        if self._log_start:
            self._logger.info(
                f"[{context.trace_id}] START {action_id}",
                extra={
                    "trace_id": context.trace_id,
                    "action_id": action_id,
                    "place": context.place,
                },
            )

    def after(self, action_id: str, context: HostContext) -> None:
        """Log completion with duration."""
        start_time = context.data.get("_logging_mw_start", time.time())
        duration_ms = (time.time() - start_time) * 1000

        if self._log_end:
            self._logger.info(
                f"[{context.trace_id}] END {action_id} ({duration_ms:.2f}ms)",
                extra={
                    "trace_id": context.trace_id,
                    "action_id": action_id,
                    "duration_ms": duration_ms,
                },
            )

    def on_error(self, action_id: str, error: Exception, context: HostContext) -> None:
        """Log the error with traceback."""
        if self._log_errors:
            self._logger.error(
                f"[{context.trace_id}] ERROR {action_id}: {error}",
                extra={
                    "trace_id": context.trace_id,
                    "action_id": action_id,
                    "error": str(error),
                },
                exc_info=True,
            )
