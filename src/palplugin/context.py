"""Host context and action events handed to actions by the dispatcher."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from palplugin.dialogs import DialogService

__all__ = ["HostContext", "ActionEvent"]


@dataclass
class HostContext:
    """Reference to the active host session, used to anchor dialogs.

    ``project`` is whatever object the host uses for its project or window;
    palplugin only passes it back to the dialog service.
    """

    trace_id: str
    project: Any = None
    place: str = "unknown"
    data: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def create(
        cls,
        project: Any = None,
        place: str = "unknown",
        data: dict[str, Any] | None = None,
    ) -> HostContext:
        """Create a new HostContext with a generated UUID v4 trace_id."""
        return cls(
            trace_id=str(uuid.uuid4()),
            project=project,
            place=place,
            data=data if data is not None else {},
        )


@dataclass(frozen=True)
class ActionEvent:
    """A single trigger of an action."""

    context: HostContext
    dialogs: DialogService
