"""palplugin - IDE plugin action that greets the user."""

from __future__ import annotations

# Core
from palplugin.action import Action
from palplugin.context import ActionEvent, HostContext
from palplugin.dialogs import DialogIcon, DialogService
from palplugin.dispatcher import ActionDispatcher
from palplugin.registry import ACTION_ID_PATTERN, REGISTRY_EVENTS, ActionRegistry

# Actions
from palplugin.actions import GreetingAction, build_greeting

# Config
from palplugin.config import Config

# Errors
from palplugin.errors import (
    ActionDisabledError,
    ActionNotFoundError,
    ConfigError,
    ConfigNotFoundError,
    ErrorCodes,
    InvalidInputError,
    PluginError,
)

# Middleware
from palplugin.middleware import LoggingMiddleware, Middleware, MiddlewareManager

# Composition
from palplugin.plugin import GREETING_ACTION_ID, create_plugin, register_actions

__version__ = "0.1.0"

__all__ = [
    # Core
    "Action",
    "ActionEvent",
    "HostContext",
    "DialogIcon",
    "DialogService",
    "ActionDispatcher",
    "ActionRegistry",
    "ACTION_ID_PATTERN",
    "REGISTRY_EVENTS",
    # Actions
    "GreetingAction",
    "build_greeting",
    # Config
    "Config",
    # Errors
    "ErrorCodes",
    "PluginError",
    "ConfigError",
    "ConfigNotFoundError",
    "InvalidInputError",
    "ActionNotFoundError",
    "ActionDisabledError",
    # Middleware
    "Middleware",
    "MiddlewareManager",
    "LoggingMiddleware",
    # Composition
    "GREETING_ACTION_ID",
    "register_actions",
    "create_plugin",
]
