import pygame as pg
import pytest

from core.interfaces import Direction
from viz.keyboard import Command, Keyboard


def key(k):
    return pg.event.Event(pg.KEYDOWN, key=k)

@pytest.mark.parametrize("k,direction", [
    (pg.K_w, Direction.Up), (pg.K_UP, Direction.Up),
    (pg.K_s, Direction.Down), (pg.K_DOWN, Direction.Down),
    (pg.K_a, Direction.Left), (pg.K_LEFT, Direction.Left),
    (pg.K_d, Direction.Right), (pg.K_RIGHT, Direction.Right),
])
def test_direction_keys(k, direction):
    assert Keyboard().translate(key(k)) == Command("turn", direction=direction)

@pytest.mark.parametrize("k", [pg.K_SPACE, pg.K_RETURN])
def test_restart_keys(k):
    assert Keyboard().translate(key(k)).kind == "restart"

def test_quit_events():
    kb = Keyboard()
    assert kb.translate(pg.event.Event(pg.QUIT)).kind == "quit"
    assert kb.translate(key(pg.K_ESCAPE)).kind == "quit"

def test_settings_keys():
    kb = Keyboard()
    assert kb.translate(key(pg.K_EQUALS)) == Command("speed", delta=-1)
    assert kb.translate(key(pg.K_MINUS)) == Command("speed", delta=1)
    assert kb.translate(key(pg.K_RIGHTBRACKET)) == Command("apples", delta=1)
    assert kb.translate(key(pg.K_LEFTBRACKET)) == Command("apples", delta=-1)
    assert kb.translate(key(pg.K_1)).kind == "warp"
    assert kb.translate(key(pg.K_2)).kind == "gradient"

def test_unmapped_events_are_ignored():
    kb = Keyboard()
    assert kb.translate(key(pg.K_q)) is None
    assert kb.translate(pg.event.Event(pg.KEYUP, key=pg.K_w)) is None

def test_poll_keeps_event_order(monkeypatch):
    events = [key(pg.K_UP), key(pg.K_q), key(pg.K_LEFT)]
    monkeypatch.setattr(pg.event, "get", lambda: events)
    cmds = Keyboard().poll()
    assert [c.direction for c in cmds] == [Direction.Up, Direction.Left]
