"""Plugin composition point: every action is registered here and nowhere else."""

from __future__ import annotations

import logging

from palplugin.actions import GreetingAction
from palplugin.config import Config
from palplugin.dialogs import DialogService
from palplugin.dispatcher import ActionDispatcher
from palplugin.middleware import LoggingMiddleware
from palplugin.registry import ActionRegistry

__all__ = ["GREETING_ACTION_ID", "register_actions", "create_plugin"]

logger = logging.getLogger(__name__)

GREETING_ACTION_ID = "pal.greeting"


def register_actions(registry: ActionRegistry) -> None:
    """Register the plugin's actions with the host registry."""
    registry.register(GREETING_ACTION_ID, GreetingAction())


def create_plugin(dialogs: DialogService, config: Config | None = None) -> ActionDispatcher:
    """Build a registry with the plugin's actions and a dispatcher bound to ``dialogs``.

    LoggingMiddleware is installed unless ``logging.enabled`` is false.
    """
    config = config or Config()
    registry = ActionRegistry()
    register_actions(registry)

    dispatcher = ActionDispatcher(registry=registry, dialogs=dialogs, config=config)
    if config.get("logging.enabled", True):
        dispatcher.use(
            LoggingMiddleware(
                log_start=config.get("logging.log_start", True),
                log_end=config.get("logging.log_end", True),
                log_errors=config.get("logging.log_errors", True),
            )
        )

    logger.info("palplugin started with %d action(s): %s", registry.count, ", ".join(registry.action_ids))
    return dispatcher
