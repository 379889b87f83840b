# runners/run_snake.py
from __future__ import annotations
import random
from typing import Callable, Optional

from config import AppConfig, SPEED_STEP_MS
from core.interfaces import TickResult
from core.scheduler import FixedIntervalScheduler, monotonic_ms
from core.snake_rules import GameState
from storage.best_score import BestScoreStore
from storage.game_log import GameLog
from viz.keyboard import Command, Keyboard
from viz.render_iface import FrameInfo, Renderer

# Headless runs get no input, so with warp walls nothing would end the game.
HEADLESS_MAX_FRAMES = 20_000


class SnakeApp:
    """Host application: owns the current game, the tick schedule and the settings."""

    def __init__(
        self,
        cfg: AppConfig,
        renderer: Renderer,
        keyboard: Optional[Keyboard] = None,
        store: Optional[BestScoreStore] = None,
        log: Optional[GameLog] = None,
        clock: Callable[[], int] = monotonic_ms,
    ):
        self.cfg = cfg.clamped()
        self.renderer = renderer
        self.keyboard = keyboard
        self.store = store if store is not None else BestScoreStore(self.cfg.best_score_path)
        self.log = log if log is not None else GameLog(self.cfg.game_log_path)
        self.rng = random.Random(self.cfg.seed)
        self.scheduler = FixedIntervalScheduler(self.cfg.tick_ms, self.on_tick, clock=clock)
        self.best = self.store.load()
        self.games_played = 0
        self.quit_requested = False
        self.last_result: Optional[TickResult] = None
        self.state = GameState(self.cfg, rng=self.rng)

    # ---- lifecycle ----
    def reset(self) -> None:
        """Start a new game with the current settings and a fresh tick schedule."""
        self.state = GameState(self.cfg, rng=self.rng)
        self.last_result = None
        self.scheduler.interval_ms = self.cfg.tick_ms
        self.scheduler.restart()

    def on_tick(self) -> None:
        self.scheduler.interval_ms = self.cfg.tick_ms
        res = self.state.advance()
        self.last_result = res
        if res.game_over:
            self.scheduler.stop()
            self._finish_game(res)

    def _finish_game(self, res: TickResult) -> None:
        self.games_played += 1
        self.store.record(res.score)
        self.best = self.store.best
        self.log.log({
            "game": self.games_played,
            "score": res.score,
            "length": len(self.state.snake),
            "ticks": self.state.step_count,
            "reason": res.reason,
            "best": self.best,
        })
        print(f"[game {self.games_played}] score={res.score} length={len(self.state.snake)} "
              f"reason={res.reason} best={self.best}")

    # ---- input ----
    def handle(self, cmd: Command) -> None:
        if cmd.kind == "quit":
            self.quit_requested = True
        elif cmd.kind == "turn":
            self.state.set_direction(cmd.direction)
        elif cmd.kind == "restart":
            self.reset()
        elif cmd.kind == "speed":
            self.cfg = self.cfg.with_(tick_ms=self.cfg.tick_ms + cmd.delta * SPEED_STEP_MS).clamped()
        elif cmd.kind == "apples":
            # takes effect on the next game
            self.cfg = self.cfg.with_(apples=self.cfg.apples + cmd.delta).clamped()
        elif cmd.kind == "warp":
            self.cfg = self.cfg.with_(wrap_walls=not self.cfg.wrap_walls)
            self.state.set_wrap(self.cfg.wrap_walls)
        elif cmd.kind == "gradient":
            self.cfg = self.cfg.with_(gradient=not self.cfg.gradient)

    def frame_info(self) -> FrameInfo:
        return FrameInfo(
            best=self.best,
            tick_ms=self.cfg.tick_ms,
            apples=self.cfg.apples,
            gradient=self.cfg.gradient,
        )

    # ---- host loop ----
    def run(self, max_frames: Optional[int] = None, until_game_over: bool = False) -> int:
        """Poll input, fire due ticks, draw; returns the number of frames drawn."""
        frames = 0
        try:
            self.renderer.open(self.cfg)
            self.reset()
            while not self.quit_requested:
                if self.keyboard is not None:
                    for cmd in self.keyboard.poll():
                        self.handle(cmd)
                    if self.quit_requested:
                        break
                self.scheduler.pump()
                self.renderer.draw(self.state.snapshot(), self.frame_info())
                self.renderer.tick(self.cfg.fps)
                frames += 1
                if max_frames is not None and frames >= max_frames:
                    break
                if until_game_over and self.state.terminated:
                    break
        finally:
            self.scheduler.stop()
            self.renderer.close()
            self.log.close()
        return frames


def main(cfg: AppConfig, headless: bool = False, max_frames: Optional[int] = None) -> int:
    if headless:
        from viz.renderer_headless import HeadlessRenderer
        app = SnakeApp(cfg, HeadlessRenderer())
        if max_frames is None:
            max_frames = HEADLESS_MAX_FRAMES
        app.run(max_frames=max_frames, until_game_over=True)
    else:
        from viz.renderer_pygame import PygameRenderer
        app = SnakeApp(cfg, PygameRenderer(), keyboard=Keyboard())
        app.run(max_frames=max_frames)
    return app.best
