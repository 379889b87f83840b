# viz/renderer_headless.py
from __future__ import annotations
import time
from typing import Optional
from config import AppConfig
from core.interfaces import Snapshot
from viz.render_iface import FrameInfo


class HeadlessRenderer:
    """Draws nothing; remembers the last frame so runs can be inspected."""
    def __init__(self, realtime: bool = True):
        self.realtime = realtime
        self.cfg: Optional[AppConfig] = None
        self.frames = 0
        self.last: Optional[Snapshot] = None
        self.last_info: Optional[FrameInfo] = None
        self.closed = False

    def open(self, cfg: AppConfig) -> None:
        self.cfg = cfg
        self.closed = False

    def draw(self, snap: Snapshot, info: FrameInfo = FrameInfo()) -> None:
        self.frames += 1
        self.last = snap
        self.last_info = info

    def tick(self, fps: int) -> None:
        if self.realtime and fps > 0:
            time.sleep(1.0 / fps)

    def close(self) -> None:
        self.closed = True

    def save_frame(self, snap: Snapshot) -> None:
        pass
