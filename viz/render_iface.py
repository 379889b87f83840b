# viz/render_iface.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol
from config import AppConfig
from core.interfaces import Snapshot


@dataclass(frozen=True)
class FrameInfo:
    """Host-side settings shown next to the board; never read by the rules."""
    best: int = 0
    tick_ms: int = 150
    apples: int = 3
    gradient: bool = False


class Renderer(Protocol):
    def open(self, cfg: AppConfig) -> None: ...
    def draw(self, snap: Snapshot, info: FrameInfo = FrameInfo()) -> None: ...
    def tick(self, fps: int) -> None: ...
    def close(self) -> None: ...
    def save_frame(self, snap: Snapshot) -> None: ...
