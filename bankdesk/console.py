"""Line-oriented terminal input and output used by the interactive screens."""

from __future__ import annotations

import sys
from collections import deque
from typing import Callable, Optional

CLEAR_SEQUENCE = "\x1b[2J\x1b[H"


def _read_stdin_line() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError("end of input")
    return line


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


class Console:
    """Reads whitespace-separated tokens and writes text.

    Input is consumed token by token, so several answers may be typed on
    one line; blank lines are skipped while waiting for a token.
    """

    def __init__(
        self,
        input_func: Optional[Callable[[], str]] = None,
        output_func: Optional[Callable[[str], None]] = None,
    ) -> None:
        self._read = input_func or _read_stdin_line
        self._write = output_func or _write_stdout
        self._pending: deque[str] = deque()

    def _next_token(self) -> str:
        while not self._pending:
            self._pending.extend(self._read().split())
        return self._pending.popleft()

    def ask(self, prompt: str) -> str:
        """Show ``prompt`` and return the next input token."""
        if prompt:
            self._write(prompt)
        return self._next_token()

    def ask_int(self, prompt: str) -> int:
        """Show ``prompt`` until a whole number is entered and return it."""
        while True:
            token = self.ask(prompt)
            try:
                return int(token)
            except ValueError:
                self.say("Please enter a whole number.")

    def ask_float(self, prompt: str) -> float:
        """Show ``prompt`` until a number is entered and return it."""
        while True:
            token = self.ask(prompt)
            try:
                return float(token)
            except ValueError:
                self.say("Please enter a number.")

    def say(self, text: str = "") -> None:
        """Write ``text`` followed by a newline."""
        self._write(f"{text}\n")

    def clear(self) -> None:
        """Clear the terminal screen."""
        self._write(CLEAR_SEQUENCE)

    def pause(self) -> None:
        """Wait until the user presses Enter, discarding any typed-ahead input."""
        self._pending.clear()
        self._write("Press Enter to continue . . . ")
        self._read()