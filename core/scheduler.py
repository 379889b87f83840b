# core/scheduler.py
from __future__ import annotations
import time
from typing import Callable, Optional


def monotonic_ms() -> int:
    return int(time.monotonic() * 1000)


class FixedIntervalScheduler:
    """Fires ``callback`` every ``interval_ms`` while running.

    Nothing runs in the background: the host loop calls ``pump()`` and any
    ticks that came due since the last pump are fired there, one after the
    other. ``interval_ms`` is read when the next tick is scheduled, so a speed
    change takes effect from the following tick.
    """

    def __init__(self, interval_ms: int, callback: Callable[[], None],
                 clock: Callable[[], int] = monotonic_ms, max_catch_up: int = 3):
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        self.interval_ms = interval_ms
        self.callback = callback
        self.clock = clock
        self.max_catch_up = max(1, max_catch_up)
        self._next_due: Optional[int] = None
        self._in_tick = False

    @property
    def running(self) -> bool:
        return self._next_due is not None

    def start(self) -> None:
        self._next_due = self.clock() + self.interval_ms

    def stop(self) -> None:
        self._next_due = None

    def restart(self) -> None:
        self.stop()
        self.start()

    def pump(self) -> int:
        """Fire every tick that is due; returns how many fired."""
        if self._in_tick:
            return 0
        fired = 0
        while self._next_due is not None and self.clock() >= self._next_due:
            if fired >= self.max_catch_up:
                # drop the backlog instead of replaying it
                self._next_due = self.clock() + self.interval_ms
                break
            due = self._next_due
            self._in_tick = True
            try:
                self.callback()
            finally:
                self._in_tick = False
            fired += 1
            # the callback may have stopped or restarted us
            if self._next_due == due:
                self._next_due = due + self.interval_ms
        return fired
