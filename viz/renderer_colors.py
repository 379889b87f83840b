# viz/renderer_colors.py
from __future__ import annotations
from typing import List, Tuple
import numpy as np

RGBA = Tuple[int, int, int, float]   # alpha in [0, 1]

BG = (18, 18, 24)
GRID = (40, 40, 52)
APPLE = (255, 0, 0)
TEXT = (235, 235, 235)
OVERLAY = (0, 0, 0, 170)
ACCENT = "#00ff00"
TAIL = "#3fff3f00"   # accent family, fully transparent

_FALLBACK: RGBA = (0, 255, 0, 1.0)


def parse_hex(c: str) -> RGBA:
    """'#rrggbb' or '#rrggbbaa' -> (r, g, b, a). Anything else is opaque green."""
    h = c.strip().lstrip("#")
    try:
        if len(h) == 8:
            return (int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16), int(h[6:8], 16) / 255)
        if len(h) == 6:
            return (int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16), 1.0)
    except ValueError:
        pass
    return _FALLBACK


def blend_colors(c1: str, c2: str, t: float) -> RGBA:
    r1, g1, b1, a1 = parse_hex(c1)
    r2, g2, b2, a2 = parse_hex(c2)
    return (
        round(r1 + (r2 - r1) * t),
        round(g1 + (g2 - g1) * t),
        round(b1 + (b2 - b1) * t),
        a1 + (a2 - a1) * t,
    )


def gradient_ramp(n: int, tail: str = TAIL, head: str = ACCENT) -> List[RGBA]:
    """Colours for n segments, tail first; the last one is the head colour."""
    if n <= 0:
        return []
    if n == 1:
        return [blend_colors(tail, head, 1.0)]
    return [blend_colors(tail, head, float(t)) for t in np.linspace(0.0, 1.0, n)]


def to_pg(c: RGBA) -> Tuple[int, int, int, int]:
    r, g, b, a = c
    return (int(r), int(g), int(b), int(round(a * 255)))
