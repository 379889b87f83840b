import os
import sys

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable (so core.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pygame as pg
import pytest

@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()

@pytest.fixture
def cfg():
    from config import AppConfig
    return AppConfig(grid_size=20, apples=3, seed=1234, best_score_path=None)

@pytest.fixture
def state_factory(cfg):
    from core.snake_rules import GameState
    def make(snake=((1, 1), (2, 1), (3, 1)), apples=(), **kwargs):
        # kwargs are AppConfig overrides (wrap_walls=..., grid_size=..., etc.)
        return GameState(cfg.with_(**kwargs), snake=snake, apples=apples)
    return make

class FakeClock:
    """Millisecond clock the test moves by hand."""
    def __init__(self, now: int = 0):
        self.now = now
    def __call__(self) -> int:
        return self.now
    def advance(self, ms: int) -> None:
        self.now += ms

@pytest.fixture
def fake_clock():
    return FakeClock()
