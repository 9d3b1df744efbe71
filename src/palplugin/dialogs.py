"""Dialog service interface supplied by the host."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from palplugin.context import HostContext

__all__ = ["DialogIcon", "DialogService"]


class DialogIcon(str, Enum):
    """Icons a host can put on a modal dialog."""

    QUESTION = "question"
    INFORMATION = "information"
    WARNING = "warning"
    ERROR = "error"


@runtime_checkable
class DialogService(Protocol):
    """Modal dialogs rendered by the host.

    Both calls block the calling thread until the user dismisses the dialog.
    """

    def show_input_dialog(
        self,
        context: HostContext,
        message: str,
        title: str,
        icon: DialogIcon,
    ) -> str | None:
        """Ask for one line of text. Returns None when the user cancels."""
        ...

    def show_message_dialog(
        self,
        context: HostContext,
        message: str,
        title: str,
        icon: DialogIcon,
    ) -> None:
        """Show a message until the user dismisses it."""
        ...
