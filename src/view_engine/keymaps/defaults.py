"""Built-in key bindings for the viewer."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from view_engine.viewport import Direction

QUIT_TOKEN = "ctrl+q"

MOVE_KEYS: Mapping[str, Direction] = MappingProxyType(
    {
        "up": Direction.UP,
        "down": Direction.DOWN,
        "left": Direction.LEFT,
        "right": Direction.RIGHT,
        "home": Direction.HOME,
        "end": Direction.END,
    }
)

# Page keys repeat a single-row move once per window row.
PAGE_KEYS: Mapping[str, Direction] = MappingProxyType(
    {
        "pageup": Direction.UP,
        "pagedown": Direction.DOWN,
    }
)

__all__ = ["MOVE_KEYS", "PAGE_KEYS", "QUIT_TOKEN"]
