"""Actions shipped with the plugin."""

from __future__ import annotations

from palplugin.actions.greeting import GreetingAction, build_greeting

__all__ = ["GreetingAction", "build_greeting"]
