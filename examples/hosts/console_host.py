"""Minimal terminal host: renders palplugin dialogs on stdin/stdout."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from palplugin import GREETING_ACTION_ID, DialogIcon, HostContext, create_plugin


class ConsoleDialogService:
    """Dialog service that prints dialogs and reads answers from a stream.

    End of input counts as cancelling the prompt.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout

    def show_input_dialog(self, context: HostContext, message: str, title: str, icon: DialogIcon) -> str | None:
        self._stdout.write(f"[{icon.value}] {title}\n{message} ")
        self._stdout.flush()
        line = self._stdin.readline()
        if not line:
            return None
        return line.rstrip("\n")

    def show_message_dialog(self, context: HostContext, message: str, title: str, icon: DialogIcon) -> None:
        self._stdout.write(f"[{icon.value}] {title}\n{message}\n")
        self._stdout.flush()


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    dispatcher = create_plugin(ConsoleDialogService())
    dispatcher.trigger(GREETING_ACTION_ID, HostContext.create(place="console"))


if __name__ == "__main__":
    main()
