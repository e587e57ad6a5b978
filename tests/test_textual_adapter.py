from __future__ import annotations

from typing import List, Tuple

from view_engine.adapters.textual import (
    TextualUIHooks,
    TextualViewerAdapter,
    normalize_textual_key,
)
from view_engine.buffer import Document
from view_engine.keymaps import KeyStroke, Quit
from view_engine.viewport import ViewportState, WindowSize


def make_adapter(
    text: str, *, columns: int = 12, rows: int = 3
) -> tuple[TextualViewerAdapter, List[Tuple[str, Tuple[int, int]]], List[str]]:
    views: List[Tuple[str, Tuple[int, int]]] = []
    quits: List[str] = []
    hooks = TextualUIHooks(
        update_view=lambda text, cursor: views.append((text, cursor)),
        request_quit=lambda: quits.append("quit"),
    )
    viewport = ViewportState(WindowSize(columns=columns, rows=rows))
    adapter = TextualViewerAdapter(Document.from_text(text), viewport, hooks)
    return adapter, views, quits


def test_normalize_textual_key_names() -> None:
    assert normalize_textual_key("ctrl+q") == KeyStroke("q", ("ctrl",))
    assert normalize_textual_key("pagedown") == KeyStroke("pagedown")
    assert normalize_textual_key("a", "a") == KeyStroke("a", text="a")


def test_adapter_draws_initial_view() -> None:
    _, views, _ = make_adapter("one\ntwo")

    assert views == [("one\ntwo\n~", (0, 0))]


def test_adapter_scrolls_on_navigation() -> None:
    adapter, views, _ = make_adapter("\n".join(f"l{n}" for n in range(6)), rows=2)

    for _ in range(3):
        adapter.handle_textual_key("down")
    adapter.handle_textual_key("end")

    text, cursor = views[-1]
    assert text == "l2\nl3"
    assert cursor == (11, 1)


def test_adapter_requests_quit_on_ctrl_q() -> None:
    adapter, views, quits = make_adapter("x")
    drawn = len(views)

    intent = adapter.handle_textual_key("ctrl+q")

    assert intent == Quit()
    assert quits == ["quit"]
    assert len(views) == drawn
    adapter.handle_textual_key("down")
    assert len(views) == drawn


def test_adapter_emits_log_lines() -> None:
    logs: List[str] = []
    hooks = TextualUIHooks(update_view=lambda text, cursor: None, log=logs.append)
    viewport = ViewportState(WindowSize(columns=5, rows=2))
    adapter = TextualViewerAdapter(Document(), viewport, hooks)

    adapter.handle_textual_key("pageup")

    assert logs == ["key -> pageup intent=MoveRepeated"]
