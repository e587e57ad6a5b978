"""Input dispatch: wait for a key event and turn it into an ``Intent``."""

from __future__ import annotations

from typing import Optional, Protocol

from view_engine.runtime import telemetry

from .defaults import MOVE_KEYS, PAGE_KEYS, QUIT_TOKEN
from .intents import Intent, Move, MoveRepeated, Noop, Quit
from .models import KeyStroke

DEFAULT_POLL_TIMEOUT = 0.5


class KeySource(Protocol):
    """Blocking-with-timeout supplier of decoded key events."""

    def read_key(self, timeout: float) -> Optional[KeyStroke]:
        """Return the next key, or ``None`` if none arrived within ``timeout``."""
        ...


def classify_key(stroke: KeyStroke, window_rows: int) -> Intent:
    """Map one key event onto the closed set of viewer intents."""

    if stroke.token == QUIT_TOKEN:
        return Quit()
    if stroke.modifiers:
        return Noop()
    direction = MOVE_KEYS.get(stroke.key)
    if direction is not None:
        return Move(direction)
    direction = PAGE_KEYS.get(stroke.key)
    if direction is not None:
        return MoveRepeated(direction, window_rows)
    return Noop()


class InputDispatcher:
    """Polls ``source`` in bounded slices until a key arrives."""

    def __init__(
        self,
        source: KeySource,
        window_rows: int,
        *,
        poll_timeout: float = DEFAULT_POLL_TIMEOUT,
        logger_name: str | None = None,
    ) -> None:
        if poll_timeout <= 0:
            raise ValueError("poll_timeout must be positive")
        self.source = source
        self.window_rows = window_rows
        self.poll_timeout = poll_timeout
        self.idle_polls = 0
        self.logger = telemetry.get_logger(logger_name or "view_engine.keymaps")

    def next_key(self) -> KeyStroke:
        while True:
            stroke = self.source.read_key(self.poll_timeout)
            if stroke is not None:
                return stroke
            self.idle_polls += 1
            self.logger.debug(f"poll timeout #{self.idle_polls}")

    def next_intent(self) -> Intent:
        stroke = self.next_key()
        intent = classify_key(stroke, self.window_rows)
        telemetry.record_event(
            "dispatcher.intent",
            level="debug",
            data={"key": stroke.token, "intent": type(intent).__name__},
        )
        return intent


__all__ = ["DEFAULT_POLL_TIMEOUT", "InputDispatcher", "KeySource", "classify_key"]
