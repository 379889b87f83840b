# core/snake_rules.py  (pure rules, no pygame)
from __future__ import annotations
import random
from typing import Iterable, List, Optional, Set

from config import AppConfig
from .interfaces import Coordinate, Direction, Outcome, Snapshot, TickResult

# Rejection-sampling draws before falling back to an explicit free-cell scan.
MAX_SPAWN_DRAWS = 64


class GameState:
    """One game of Snake: body, apples, heading and score.

    The body is stored tail first, head last. A fresh GameState is built for
    every game; between construction and game over it only changes through
    ``set_direction`` (the pending-direction slot), ``set_wrap`` and ``advance``.
    """

    def __init__(self, cfg: AppConfig, snake: Optional[Iterable[tuple]] = None,
                 apples: Optional[Iterable[tuple]] = None,
                 direction: Direction = Direction.Right,
                 rng: Optional[random.Random] = None):
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.grid_size = cfg.grid_size
        self.wrap_walls = cfg.wrap_walls
        self.target_apples = cfg.apples
        self.rng = rng if rng is not None else random.Random(cfg.seed)

        if snake is None:
            if cfg.start_len < 1 or cfg.start_len > self.grid_size - 1:
                raise ValueError(
                    f"start_len={cfg.start_len} does not fit a {self.grid_size}-wide grid")
            snake = [(1 + i, 1) for i in range(cfg.start_len)]
        self.snake: List[Coordinate] = [Coordinate(*c) for c in snake]
        if not self.snake:
            raise ValueError("snake needs at least one segment")

        self.dir = direction
        self.last_dir = direction
        self.score = 0
        self.step_count = 0
        self.terminated = False
        self.reason: Optional[str] = None
        self._final: Optional[TickResult] = None

        if apples is None:
            self.apples: List[Coordinate] = []
            for _ in range(self.target_apples):
                apple = self.spawn_apple()
                if apple is None:
                    break
                self.apples.append(apple)
        else:
            self.apples = [Coordinate(*a) for a in apples]

    @property
    def head(self) -> Coordinate:
        return self.snake[-1]

    # ---- input ----
    def set_direction(self, d: Direction) -> bool:
        """Write the pending direction; a reversal of the last applied one is ignored."""
        if self.terminated or d is self.last_dir.reverse:
            return False
        self.dir = d
        return True

    def set_wrap(self, on: bool) -> None:
        """Switch warp walls; the next tick uses the new boundary policy."""
        self.wrap_walls = bool(on)

    # ---- tick ----
    def advance(self) -> TickResult:
        if self.terminated:
            return self._final

        if self.dir is not self.last_dir.reverse:
            self.last_dir = self.dir
        dx, dy = self.last_dir.vector
        new_head = self.head.shifted(dx, dy)
        if self.wrap_walls:
            new_head = Coordinate(new_head.x % self.grid_size, new_head.y % self.grid_size)
        self.step_count += 1

        # collisions, in priority order
        if not self.in_bounds(new_head):
            return self._die("wall", new_head)
        if new_head in self.snake:
            return self._die("self", new_head)

        self.snake.append(new_head)
        if new_head in self.apples:
            self.apples.remove(new_head)
            apple = self.spawn_apple()
            if apple is not None:
                self.apples.append(apple)
            self.score += 1
            return TickResult(Outcome.ATE, self.score, new_head)

        self.snake.pop(0)
        return TickResult(Outcome.MOVED, self.score, new_head)

    def _die(self, reason: str, head: Coordinate) -> TickResult:
        self.terminated, self.reason = True, reason
        self._final = TickResult(Outcome.DIED, self.score, head, reason)
        return self._final

    def in_bounds(self, c: Coordinate) -> bool:
        return 0 <= c.x < self.grid_size and 0 <= c.y < self.grid_size

    # ---- apples ----
    def spawn_apple(self) -> Optional[Coordinate]:
        """Uniform free cell by rejection sampling; None once the board is full."""
        occ: Set[Coordinate] = set(self.snake)
        occ.update(self.apples)
        n = self.grid_size
        for _ in range(MAX_SPAWN_DRAWS):
            c = Coordinate(self.rng.randrange(n), self.rng.randrange(n))
            if c not in occ:
                return c
        free = [Coordinate(x, y) for x in range(n) for y in range(n) if (x, y) not in occ]
        if not free:
            return None
        return self.rng.choice(free)

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=tuple(self.snake),
            apples=tuple(self.apples),
            dir=self.last_dir,
            score=self.score,
            step_count=self.step_count,
            grid_size=self.grid_size,
            wrap_walls=self.wrap_walls,
            terminated=self.terminated,
            reason=self.reason,
        )

