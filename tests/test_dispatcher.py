from __future__ import annotations

from typing import Iterable, List, Optional

import pytest

from view_engine.keymaps import (
    InputDispatcher,
    KeyStroke,
    Move,
    MoveRepeated,
    Noop,
    Quit,
    classify_key,
)
from view_engine.viewport import Direction


class ScriptedKeySource:
    """Replays a script of keys; ``None`` entries simulate poll timeouts."""

    def __init__(self, script: Iterable[Optional[KeyStroke]]) -> None:
        self._script = list(script)
        self.timeouts: List[float] = []

    def read_key(self, timeout: float) -> Optional[KeyStroke]:
        self.timeouts.append(timeout)
        return self._script.pop(0)


def test_keystroke_normalizes_modifiers() -> None:
    stroke = KeyStroke("q", modifiers=("CTRL", " ctrl ", "Alt"))

    assert stroke.modifiers == ("alt", "ctrl")
    assert stroke.token == "alt+ctrl+q"


def test_keystroke_rejects_empty_key() -> None:
    with pytest.raises(ValueError):
        KeyStroke("")


def test_keystroke_parse_tokens() -> None:
    assert KeyStroke.parse("ctrl+q") == KeyStroke("q", ("ctrl",))
    assert KeyStroke.parse("pagedown") == KeyStroke("pagedown")
    assert KeyStroke.parse("ctrl++") == KeyStroke("+", ("ctrl",))


def test_ctrl_q_quits() -> None:
    assert classify_key(KeyStroke("q", ("ctrl",)), 10) == Quit()


def test_plain_q_and_extra_modifiers_do_not_quit() -> None:
    assert classify_key(KeyStroke("q", text="q"), 10) == Noop()
    assert classify_key(KeyStroke("q", ("ctrl", "shift")), 10) == Noop()


@pytest.mark.parametrize(
    "key, direction",
    [
        ("up", Direction.UP),
        ("down", Direction.DOWN),
        ("left", Direction.LEFT),
        ("right", Direction.RIGHT),
        ("home", Direction.HOME),
        ("end", Direction.END),
    ],
)
def test_navigation_keys_move(key: str, direction: Direction) -> None:
    assert classify_key(KeyStroke(key), 10) == Move(direction)


def test_modified_arrows_are_ignored() -> None:
    assert classify_key(KeyStroke("up", ("shift",)), 10) == Noop()


def test_page_keys_repeat_by_window_rows() -> None:
    assert classify_key(KeyStroke("pageup"), 7) == MoveRepeated(Direction.UP, 7)
    assert classify_key(KeyStroke("pagedown"), 7) == MoveRepeated(Direction.DOWN, 7)


def test_move_repeated_rejects_negative_count() -> None:
    with pytest.raises(ValueError):
        MoveRepeated(Direction.UP, -1)


def test_dispatcher_repolls_until_key_arrives() -> None:
    source = ScriptedKeySource([None, None, KeyStroke("down")])
    dispatcher = InputDispatcher(source, window_rows=5, poll_timeout=0.25)

    intent = dispatcher.next_intent()

    assert intent == Move(Direction.DOWN)
    assert dispatcher.idle_polls == 2
    assert source.timeouts == [0.25, 0.25, 0.25]


def test_dispatcher_uses_window_rows_for_paging() -> None:
    dispatcher = InputDispatcher(ScriptedKeySource([KeyStroke("pagedown")]), 12)

    assert dispatcher.next_intent() == MoveRepeated(Direction.DOWN, 12)


def test_dispatcher_rejects_non_positive_timeout() -> None:
    with pytest.raises(ValueError):
        InputDispatcher(ScriptedKeySource([]), 3, poll_timeout=0)
