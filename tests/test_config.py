from config import (AppConfig, MAX_APPLES, MAX_SPEED_MS, MIN_APPLES, MIN_GRID_SIZE,
                    MIN_SPEED_MS)


def test_defaults_match_classic_game():
    cfg = AppConfig()
    assert cfg.grid_size == 20
    assert cfg.tick_ms == 150
    assert cfg.apples == 3
    assert cfg.start_len == 3
    assert not cfg.wrap_walls and not cfg.gradient

def test_clamped_pulls_values_into_range():
    cfg = AppConfig(grid_size=1, start_len=50, tick_ms=-5, apples=0).clamped()
    assert cfg.grid_size == MIN_GRID_SIZE
    assert cfg.start_len == MIN_GRID_SIZE - 1
    assert cfg.tick_ms == MIN_SPEED_MS
    assert cfg.apples == MIN_APPLES
    cfg = AppConfig(tick_ms=10_000, apples=10_000).clamped()
    assert cfg.tick_ms == MAX_SPEED_MS
    assert cfg.apples == MAX_APPLES

def test_with_returns_copy():
    a = AppConfig()
    b = a.with_(wrap_walls=True)
    assert b.wrap_walls and not a.wrap_walls
