# core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional, Tuple


class Coordinate(NamedTuple):
    x: int
    y: int

    def shifted(self, dx: int, dy: int) -> "Coordinate":
        return Coordinate(self.x + dx, self.y + dy)


class Direction(Enum):
    # screen coordinates: y grows downward
    Up = (0, -1)
    Down = (0, 1)
    Left = (-1, 0)
    Right = (1, 0)

    @property
    def vector(self) -> Tuple[int, int]:
        return self.value

    @property
    def reverse(self) -> "Direction":
        return REVERSE[self]


REVERSE = {
    Direction.Up: Direction.Down,
    Direction.Down: Direction.Up,
    Direction.Left: Direction.Right,
    Direction.Right: Direction.Left,
}


class Outcome(Enum):
    MOVED = "moved"
    ATE = "ate"
    DIED = "died"


@dataclass(frozen=True)
class Snapshot:
    snake: Tuple[Coordinate, ...]   # tail first, head last
    apples: Tuple[Coordinate, ...]
    dir: Direction
    score: int
    step_count: int
    grid_size: int
    wrap_walls: bool
    terminated: bool
    reason: Optional[str]

    @property
    def head(self) -> Coordinate:
        return self.snake[-1]


@dataclass(frozen=True)
class TickResult:
    outcome: Outcome
    score: int
    head: Coordinate
    reason: Optional[str] = None    # "wall" | "self" when outcome is DIED

    @property
    def game_over(self) -> bool:
        return self.outcome is Outcome.DIED

