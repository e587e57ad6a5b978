"""Session loop alternating screen refresh and input dispatch."""

from __future__ import annotations

from view_engine.buffer import Document
from view_engine.keymaps import InputDispatcher, Intent, Move, MoveRepeated, Quit
from view_engine.render import ScreenComposer
from view_engine.viewport import ViewportState

from . import telemetry


def apply_intent(viewport: ViewportState, intent: Intent, line_count: int) -> bool:
    """Mutate ``viewport`` for ``intent``; return ``False`` when it asks to quit."""

    if isinstance(intent, Quit):
        return False
    if isinstance(intent, Move):
        viewport.move(intent.direction, line_count)
    elif isinstance(intent, MoveRepeated):
        viewport.move_repeated(intent.direction, intent.count, line_count)
    return True


class Session:
    """Owns the single mutable viewport and drives one cycle per key event."""

    def __init__(
        self,
        document: Document,
        viewport: ViewportState,
        composer: ScreenComposer,
        dispatcher: InputDispatcher,
    ) -> None:
        self.document = document
        self.viewport = viewport
        self.composer = composer
        self.dispatcher = dispatcher
        self.cycles = 0

    def step(self) -> bool:
        self.composer.refresh()
        intent = self.dispatcher.next_intent()
        self.cycles += 1
        return apply_intent(self.viewport, intent, self.document.line_count)

    def run(self) -> int:
        telemetry.record_event(
            "session.start",
            data={
                "path": self.document.path or "",
                "line_count": self.document.line_count,
                "columns": self.viewport.columns,
                "rows": self.viewport.rows,
            },
        )
        while self.step():
            pass
        telemetry.record_event("session.quit", data={"cycles": self.cycles})
        return 0


__all__ = ["Session", "apply_intent"]
