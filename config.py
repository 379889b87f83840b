# config.py
from dataclasses import dataclass, replace
from typing import Optional

# Bounds applied at the settings boundary (CLI, keyboard tweaks).
MIN_GRID_SIZE = 5
MAX_GRID_SIZE = 60
MIN_SPEED_MS = 40
MAX_SPEED_MS = 500
SPEED_STEP_MS = 10
MIN_APPLES = 1
MAX_APPLES = 100


def _clamp(v: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, int(v)))


@dataclass(frozen=True, slots=True)
class AppConfig:
    # board
    grid_size: int = 20
    start_len: int = 3
    seed: Optional[int] = None

    # gameplay
    tick_ms: int = 150
    apples: int = 3
    wrap_walls: bool = False

    # render
    gradient: bool = False
    render_cell: int = 28
    render_title: str = "Snake"
    render_grid_lines: bool = False
    render_show_hud: bool = True
    render_record_dir: Optional[str] = None
    accent: str = "#00ff00"
    fps: int = 60

    # storage
    best_score_path: Optional[str] = "runs/best_score.json"
    game_log_path: Optional[str] = None

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)

    def clamped(self) -> "AppConfig":
        """Clone with every numeric setting pulled into its legal range."""
        grid = _clamp(self.grid_size, MIN_GRID_SIZE, MAX_GRID_SIZE)
        return replace(
            self,
            grid_size=grid,
            start_len=_clamp(self.start_len, 1, grid - 1),
            tick_ms=_clamp(self.tick_ms, MIN_SPEED_MS, MAX_SPEED_MS),
            apples=_clamp(self.apples, MIN_APPLES, MAX_APPLES),
            render_cell=max(1, int(self.render_cell)),
            fps=max(1, int(self.fps)),
        )
