"""Ask the user for their name and greet them."""

from __future__ import annotations

from palplugin.action import Action
from palplugin.context import ActionEvent
from palplugin.dialogs import DialogIcon

__all__ = [
    "GreetingAction",
    "build_greeting",
    "INPUT_TITLE",
    "INPUT_MESSAGE",
    "GREETING_TITLE",
]

INPUT_TITLE = "Input your name"
INPUT_MESSAGE = "What is your name?"
GREETING_TITLE = "Information"

_GREETING_PREFIX = "Hello, "
_GREETING_SUFFIX = "!\nI am glad to see you."


def build_greeting(name: str | None) -> str:
    """Build the greeting body. A cancelled prompt (None) greets an empty name."""
    return _GREETING_PREFIX + (name or "") + _GREETING_SUFFIX


class GreetingAction(Action):
    """Prompt for a name, then show a greeting."""

    text = "Test Action!"
    description = "Ask for your name and say hello"

    def action_performed(self, event: ActionEvent) -> None:
        name = event.dialogs.show_input_dialog(
            event.context,
            INPUT_MESSAGE,
            INPUT_TITLE,
            DialogIcon.QUESTION,
        )
        event.dialogs.show_message_dialog(
            event.context,
            build_greeting(name),
            GREETING_TITLE,
            DialogIcon.INFORMATION,
        )
