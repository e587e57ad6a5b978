"""Cursor and scroll-offset state for the visible window."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    END = "end"


@dataclass(frozen=True, slots=True)
class WindowSize:
    """Terminal geometry queried once at startup."""

    columns: int
    rows: int

    def __post_init__(self) -> None:
        if self.columns < 1 or self.rows < 1:
            raise ValueError(
                f"window must be at least 1x1, got {self.columns}x{self.rows}"
            )


@dataclass(slots=True)
class ViewportState:
    """Mutable cursor + row offset tied to a fixed window size.

    ``cursor_y`` addresses the document, not the window: it is bounded by the
    document line count during ``move`` and brought back into the visible
    band by ``scroll``.
    """

    window: WindowSize
    cursor_x: int = 0
    cursor_y: int = 0
    row_offset: int = 0

    @property
    def columns(self) -> int:
        return self.window.columns

    @property
    def rows(self) -> int:
        return self.window.rows

    @property
    def cursor(self) -> Tuple[int, int]:
        return (self.cursor_x, self.cursor_y)

    def move(self, direction: Direction, line_count: int) -> None:
        if direction is Direction.UP:
            self.cursor_y = max(self.cursor_y - 1, 0)
        elif direction is Direction.DOWN:
            # y may reach line_count, one row past the last line.
            if self.cursor_y < line_count:
                self.cursor_y += 1
        elif direction is Direction.LEFT:
            self.cursor_x = max(self.cursor_x - 1, 0)
        elif direction is Direction.RIGHT:
            if self.cursor_x < self.columns - 1:
                self.cursor_x += 1
        elif direction is Direction.HOME:
            self.cursor_x = 0
        elif direction is Direction.END:
            self.cursor_x = self.columns - 1
        else:  # pragma: no cover - exhaustive enum
            raise ValueError(f"Unknown direction {direction!r}")

    def move_repeated(self, direction: Direction, count: int, line_count: int) -> None:
        for _ in range(count):
            self.move(direction, line_count)

    def scroll(self) -> int:
        """Bring ``row_offset`` back around the cursor and return it."""

        self.row_offset = min(self.row_offset, self.cursor_y)
        if self.cursor_y >= self.row_offset + self.rows:
            self.row_offset = self.cursor_y - self.rows + 1
        return self.row_offset

    def screen_cursor(self) -> Tuple[int, int]:
        return (self.cursor_x, self.cursor_y - self.row_offset)


__all__ = ["Direction", "ViewportState", "WindowSize"]
