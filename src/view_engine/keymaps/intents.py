"""Engine-level instructions decoded from key events."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from view_engine.viewport import Direction


@dataclass(frozen=True, slots=True)
class Quit:
    pass


@dataclass(frozen=True, slots=True)
class Move:
    direction: Direction


@dataclass(frozen=True, slots=True)
class MoveRepeated:
    direction: Direction
    count: int

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError("count cannot be negative")


@dataclass(frozen=True, slots=True)
class Noop:
    pass


Intent = Union[Quit, Move, MoveRepeated, Noop]

__all__ = ["Intent", "Move", "MoveRepeated", "Noop", "Quit"]
