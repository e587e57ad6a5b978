from __future__ import annotations

import itertools

import pytest

from view_engine.viewport import Direction, ViewportState, WindowSize


def make_viewport(columns: int = 10, rows: int = 3) -> ViewportState:
    return ViewportState(WindowSize(columns=columns, rows=rows))


def test_window_must_be_at_least_one_cell() -> None:
    with pytest.raises(ValueError):
        WindowSize(columns=0, rows=5)
    with pytest.raises(ValueError):
        WindowSize(columns=5, rows=0)


def test_up_and_left_saturate_at_zero() -> None:
    viewport = make_viewport()

    viewport.move(Direction.UP, 10)
    viewport.move(Direction.LEFT, 10)

    assert viewport.cursor == (0, 0)


def test_right_stops_at_last_column() -> None:
    viewport = make_viewport(columns=4)

    for _ in range(10):
        viewport.move(Direction.RIGHT, 0)

    assert viewport.cursor_x == 3


def test_home_and_end_jump_to_column_edges() -> None:
    viewport = make_viewport(columns=8)

    viewport.move(Direction.END, 0)
    assert viewport.cursor_x == 7

    viewport.move(Direction.HOME, 0)
    assert viewport.cursor_x == 0


def test_down_is_bounded_by_document_not_window() -> None:
    viewport = make_viewport(rows=3)

    for _ in range(10):
        viewport.move(Direction.DOWN, 5)

    # One past the last line (index 4) is reachable.
    assert viewport.cursor_y == 5


def test_down_on_empty_document_stays_put() -> None:
    viewport = make_viewport()

    viewport.move_repeated(Direction.DOWN, 10, 0)

    assert viewport.cursor_y == 0


def test_cursor_bounds_hold_for_move_sequences() -> None:
    columns, line_count = 5, 4
    moves = (Direction.LEFT, Direction.RIGHT, Direction.UP, Direction.DOWN)
    for sequence in itertools.product(moves, repeat=5):
        viewport = make_viewport(columns=columns, rows=2)
        for direction in sequence:
            viewport.move(direction, line_count)
            assert 0 <= viewport.cursor_x < columns
            assert 0 <= viewport.cursor_y <= line_count


def test_scroll_follows_cursor_down() -> None:
    viewport = make_viewport(rows=3)

    for _ in range(4):
        viewport.move(Direction.DOWN, 5)

    assert viewport.cursor_y == 4
    assert viewport.scroll() == 2
    assert viewport.screen_cursor() == (0, 2)


def test_scroll_follows_cursor_up() -> None:
    viewport = make_viewport(rows=3)
    viewport.cursor_y = 9
    viewport.scroll()
    assert viewport.row_offset == 7

    viewport.move_repeated(Direction.UP, 5, 20)

    assert viewport.scroll() == 4
    assert viewport.screen_cursor() == (0, 0)


def test_scroll_keeps_cursor_in_visible_band() -> None:
    for rows in (1, 2, 5):
        viewport = make_viewport(rows=rows)
        for target in (0, 7, 3, 3, 12, 0, 6, 5):
            viewport.cursor_y = target
            viewport.scroll()
            assert viewport.row_offset <= viewport.cursor_y
            assert viewport.cursor_y <= viewport.row_offset + rows - 1


def test_scroll_is_idempotent() -> None:
    viewport = make_viewport(rows=4)
    viewport.cursor_y = 11

    first = viewport.scroll()
    second = viewport.scroll()

    assert first == second == 8
