"""Textual adapter that routes Textual key names through the viewer engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from view_engine.buffer import Document
from view_engine.keymaps import Intent, KeyStroke, classify_key
from view_engine.render import ScreenComposer
from view_engine.runtime.config import ViewerConfig
from view_engine.runtime.session import apply_intent
from view_engine.viewport import ViewportState


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_view: Callable[[str, Tuple[int, int]], None]
    request_quit: Callable[[], None] = _noop
    log: Callable[[str], None] = _noop


def normalize_textual_key(key: str, character: Optional[str] = None) -> KeyStroke:
    """Turn a Textual key name (``"pagedown"``, ``"ctrl+q"``) into a stroke."""

    stroke = KeyStroke.parse(key)
    if character and len(character) == 1 and not stroke.modifiers:
        return KeyStroke(key=stroke.key, text=character)
    return stroke


class TextualViewerAdapter:
    """Owns the viewport for a Textual host and redraws after every key."""

    def __init__(
        self,
        document: Document,
        viewport: ViewportState,
        hooks: TextualUIHooks,
        *,
        config: Optional[ViewerConfig] = None,
    ) -> None:
        self.document = document
        self.viewport = viewport
        self.hooks = hooks
        self.composer = ScreenComposer(document, viewport, config=config)
        self.running = True
        self.refresh()

    def handle_textual_key(self, key: str, *, character: Optional[str] = None) -> Intent:
        stroke = normalize_textual_key(key, character)
        intent = classify_key(stroke, self.viewport.rows)
        self.hooks.log(f"key -> {stroke.token} intent={type(intent).__name__}")
        if not self.running:
            return intent
        self.running = apply_intent(self.viewport, intent, self.document.line_count)
        if self.running:
            self.refresh()
        else:
            self.hooks.request_quit()
        return intent

    def refresh(self) -> None:
        rows = self.composer.render_rows()
        self.hooks.update_view("\n".join(rows), self.viewport.screen_cursor())


__all__ = ["TextualUIHooks", "TextualViewerAdapter", "normalize_textual_key"]
