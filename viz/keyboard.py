# viz/keyboard.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional
import pygame as pg
from core.interfaces import Direction


@dataclass(frozen=True)
class Command:
    kind: str                           # "turn" | "restart" | "quit" | "speed" | "apples" | "warp" | "gradient"
    direction: Optional[Direction] = None
    delta: int = 0


DIRECTION_KEYS = {
    pg.K_w: Direction.Up, pg.K_UP: Direction.Up,
    pg.K_s: Direction.Down, pg.K_DOWN: Direction.Down,
    pg.K_a: Direction.Left, pg.K_LEFT: Direction.Left,
    pg.K_d: Direction.Right, pg.K_RIGHT: Direction.Right,
}

RESTART_KEYS = (pg.K_SPACE, pg.K_RETURN, pg.K_KP_ENTER)


class Keyboard:
    """Turns pygame events into game commands."""

    def poll(self) -> List[Command]:
        cmds = []
        for e in pg.event.get():
            cmd = self.translate(e)
            if cmd is not None:
                cmds.append(cmd)
        return cmds

    def translate(self, e: pg.event.Event) -> Optional[Command]:
        if e.type == pg.QUIT:
            return Command("quit")
        if e.type != pg.KEYDOWN:
            return None
        if e.key == pg.K_ESCAPE: return Command("quit")
        if e.key in DIRECTION_KEYS:
            return Command("turn", direction=DIRECTION_KEYS[e.key])
        if e.key in RESTART_KEYS: return Command("restart")
        # settings: + faster, - slower, ]/[ apple count, 1 warp, 2 gradient
        if e.key in (pg.K_PLUS, pg.K_EQUALS, pg.K_KP_PLUS): return Command("speed", delta=-1)
        if e.key in (pg.K_MINUS, pg.K_KP_MINUS): return Command("speed", delta=1)
        if e.key == pg.K_RIGHTBRACKET: return Command("apples", delta=1)
        if e.key == pg.K_LEFTBRACKET: return Command("apples", delta=-1)
        if e.key == pg.K_1: return Command("warp")
        if e.key == pg.K_2: return Command("gradient")
        return None
