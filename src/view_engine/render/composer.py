"""Screen composition: one full redraw per refresh cycle."""

from __future__ import annotations

from typing import List, Optional

from view_engine.buffer import Document
from view_engine.runtime.config import ViewerConfig
from view_engine.runtime.telemetry import span
from view_engine.viewport import ViewportState

from . import ansi
from .frame import FrameBuffer


def clip(line: str, columns: int) -> str:
    """Clip ``line`` to ``columns`` characters (code points, never bytes)."""

    return line[:columns]


def welcome_row(banner: str, columns: int, filler: str) -> str:
    """Center ``banner`` in ``columns``, led by ``filler`` when there is room."""

    text = banner[:columns]
    padding = (columns - len(text)) // 2
    lead = ""
    if padding:
        lead = filler
        padding -= 1
    return lead + " " * padding + text


class ScreenComposer:
    """Renders the viewport of ``document`` into a ``FrameBuffer``."""

    def __init__(
        self,
        document: Document,
        viewport: ViewportState,
        *,
        frame: Optional[FrameBuffer] = None,
        config: Optional[ViewerConfig] = None,
        logger_name: str | None = None,
    ) -> None:
        self.document = document
        self.viewport = viewport
        self.frame = frame if frame is not None else FrameBuffer()
        self.config = config or ViewerConfig()
        self._logger_name = logger_name
        self.frames_drawn = 0

    def render_row(self, index: int) -> str:
        """Text of window row ``index`` at the current ``row_offset``."""

        viewport = self.viewport
        file_row = index + viewport.row_offset
        if file_row >= self.document.line_count:
            if self.document.is_empty and index == viewport.rows // 3:
                return welcome_row(
                    self.config.welcome, viewport.columns, self.config.filler
                )
            return self.config.filler
        return clip(self.document.line_at(file_row), viewport.columns)

    def render_rows(self) -> List[str]:
        self.viewport.scroll()
        return [self.render_row(index) for index in range(self.viewport.rows)]

    def draw_rows(self) -> None:
        rows = self.viewport.rows
        for index in range(rows):
            self.frame.push_str(self.render_row(index))
            self.frame.push_str(ansi.ERASE_TO_EOL)
            if index < rows - 1:
                self.frame.push_str(ansi.ROW_BREAK)

    def refresh(self) -> None:
        with span(
            "composer::refresh",
            logger_name=self._logger_name,
            component="composer",
        ) as handle:
            row_offset = self.viewport.scroll()
            self.frame.push_str(ansi.HIDE_CURSOR)
            self.frame.push_str(ansi.move_to(0, 0))
            self.draw_rows()
            column, row = self.viewport.screen_cursor()
            self.frame.push_str(ansi.move_to(column, row))
            self.frame.push_str(ansi.SHOW_CURSOR)
            handle.add_metadata("row_offset", row_offset)
            handle.add_metadata("frame_size", len(self.frame))
            self.frame.flush()
            self.frames_drawn += 1

    def clear_screen(self) -> None:
        """Drop any half-built frame, then clear the terminal and home the cursor."""

        self.frame.clear()
        self.frame.push_str(ansi.CLEAR_SCREEN)
        self.frame.push_str(ansi.move_to(0, 0))
        self.frame.flush()


__all__ = ["ScreenComposer", "clip", "welcome_row"]
