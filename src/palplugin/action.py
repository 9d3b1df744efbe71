"""Action base class."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from palplugin.context import ActionEvent

__all__ = ["Action"]


class Action:
    """Base class for callbacks the host invokes on a UI trigger.

    Subclasses set ``text`` (the menu label) and override
    ``action_performed``.
    """

    text: str = ""
    description: str = ""

    def action_performed(self, event: ActionEvent) -> None:
        """Handle one trigger of the action."""
        raise NotImplementedError(f"{type(self).__name__} must implement action_performed()")
