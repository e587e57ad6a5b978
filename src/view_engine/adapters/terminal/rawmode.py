"""Raw-mode lifecycle and window geometry for a POSIX terminal."""

from __future__ import annotations

import shutil
import sys
import termios
import tty
from contextlib import AbstractContextManager
from typing import Any, Callable, Optional, TextIO

from view_engine.runtime import telemetry
from view_engine.viewport import WindowSize

FALLBACK_SIZE = (80, 24)


def query_window_size() -> WindowSize:
    """Ask the terminal for ``(columns, rows)`` once; fall back to 80x24."""

    size = shutil.get_terminal_size(FALLBACK_SIZE)
    columns = size.columns if size.columns > 0 else FALLBACK_SIZE[0]
    rows = size.lines if size.lines > 0 else FALLBACK_SIZE[1]
    return WindowSize(columns=columns, rows=rows)


class RawMode(AbstractContextManager["RawMode"]):
    """Put the input TTY in raw mode for the duration of a ``with`` block.

    Leaving the block, normally or through an exception, restores the saved
    termios attributes and then runs ``on_exit`` (the composer's
    ``clear_screen``) so the shell gets a clean screen back.
    """

    def __init__(
        self,
        on_exit: Callable[[], None],
        *,
        stdin: Optional[TextIO] = None,
    ) -> None:
        self._stdin = stdin or sys.stdin
        self._on_exit = on_exit
        self._saved: Optional[list[Any]] = None
        self.logger = telemetry.get_logger("view_engine.terminal")

    @property
    def enabled(self) -> bool:
        return self._saved is not None

    def enable(self) -> None:
        if self._saved is not None:
            return
        fd = self._stdin.fileno()
        self._saved = termios.tcgetattr(fd)
        tty.setraw(fd, termios.TCSAFLUSH)
        self.logger.debug("raw mode enabled")

    def disable(self) -> None:
        if self._saved is None:
            return
        saved, self._saved = self._saved, None
        termios.tcsetattr(self._stdin.fileno(), termios.TCSAFLUSH, saved)
        self.logger.debug("raw mode disabled")

    def __enter__(self) -> "RawMode":
        self.enable()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        try:
            self.disable()
        finally:
            self._on_exit()
        return False


__all__ = ["FALLBACK_SIZE", "RawMode", "query_window_size"]
