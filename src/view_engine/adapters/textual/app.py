"""Executable Textual app that hosts the viewer engine."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence, Tuple

try:  # pragma: no cover - imported only when the Textual host is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use view_engine.adapters.textual.app"
    ) from exc

from view_engine.buffer import Document, DocumentLoadError
from view_engine.runtime.config import ViewerConfig, load_config
from view_engine.viewport import ViewportState, WindowSize

from .controller import TextualUIHooks, TextualViewerAdapter


class ViewerApp(App[None]):
    """Textual UI rendering the viewport rows plus a cursor status line."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#document-view {
		height: 1fr;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
	}
	"""

    def __init__(self, document: Document, *, config: Optional[ViewerConfig] = None) -> None:
        super().__init__()
        self.document = document
        self.config = config or ViewerConfig()
        self.adapter: TextualViewerAdapter | None = None
        self._view_widget: Static | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        self._view_widget = Static("", id="document-view", markup=False)
        self._status_widget = Static("", id="status-line", markup=False)
        yield self._view_widget
        yield self._status_widget

    def on_mount(self) -> None:
        # One row goes to the status line; the window is not re-queried on resize.
        window = WindowSize(
            columns=max(self.size.width, 1), rows=max(self.size.height - 1, 1)
        )
        hooks = TextualUIHooks(
            update_view=self._update_view,
            request_quit=self.exit,
        )
        self.adapter = TextualViewerAdapter(
            self.document, ViewportState(window), hooks, config=self.config
        )

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        self.adapter.handle_textual_key(event.key, character=event.character)
        event.stop()

    def _update_view(self, text: str, cursor: Tuple[int, int]) -> None:
        if self._view_widget:
            self._view_widget.update(text)
        if self._status_widget:
            column, row = cursor
            name = str(self.document.path) if self.document.path else "[no file]"
            self._status_widget.update(f"{name}  col {column + 1}, row {row + 1}")


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="view-engine-textual",
        description="Page through a text file inside a Textual app.",
    )
    parser.add_argument("path", nargs="?", default=None, help="File to view")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    try:
        document = Document.from_path(args.path)
    except DocumentLoadError as exc:
        print(f"view-engine-textual: {exc}", file=sys.stderr)
        return 1
    ViewerApp(document, config=load_config()).run()
    return 0


if __name__ == "__main__":  # pragma: no cover - manual demo
    raise SystemExit(main())
