"""Key events, intents, and the input dispatcher."""

from .defaults import MOVE_KEYS, PAGE_KEYS, QUIT_TOKEN
from .dispatcher import DEFAULT_POLL_TIMEOUT, InputDispatcher, KeySource, classify_key
from .intents import Intent, Move, MoveRepeated, Noop, Quit
from .models import KeyStroke

__all__ = [
    "DEFAULT_POLL_TIMEOUT",
    "InputDispatcher",
    "Intent",
    "KeySource",
    "KeyStroke",
    "MOVE_KEYS",
    "Move",
    "MoveRepeated",
    "Noop",
    "PAGE_KEYS",
    "QUIT_TOKEN",
    "Quit",
    "classify_key",
]
