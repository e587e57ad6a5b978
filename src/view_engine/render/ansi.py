"""ANSI/VT100 control sequences emitted by the composer."""

from __future__ import annotations

CSI = "\x1b["

HIDE_CURSOR = f"{CSI}?25l"
SHOW_CURSOR = f"{CSI}?25h"
ERASE_TO_EOL = f"{CSI}K"
CLEAR_SCREEN = f"{CSI}2J"
ROW_BREAK = "\r\n"


def move_to(column: int, row: int) -> str:
    """Position the cursor at zero-based ``(column, row)``."""

    return f"{CSI}{row + 1};{column + 1}H"


__all__ = [
    "CLEAR_SCREEN",
    "ERASE_TO_EOL",
    "HIDE_CURSOR",
    "ROW_BREAK",
    "SHOW_CURSOR",
    "move_to",
]
