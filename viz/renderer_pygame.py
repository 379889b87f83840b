# viz/renderer_pygame.py
from __future__ import annotations
import os
import pygame as pg
from typing import List, Optional, Union
from config import AppConfig
from core.interfaces import Snapshot
from viz.render_iface import FrameInfo
import viz.renderer_colors as theme

PathLike = Union[str, bytes, os.PathLike]


class PygameRenderer:
    def __init__(self):
        self.cell = 24
        self.cfg: Optional[AppConfig] = None
        self.surf: Optional[pg.Surface] = None
        self.clock: Optional[pg.time.Clock] = None
        self.font: Optional[pg.font.Font] = None
        self._auto_flip = True
        self._grid = 0
        self._frame_idx = 0

    def open(self, cfg: AppConfig) -> None:
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg

        self._grid = cfg.grid_size
        self.cell = cfg.render_cell

        pg.init()
        pg.display.set_caption(cfg.render_title)
        self.surf = pg.display.set_mode((self._grid * self.cell, self._grid * self.cell))
        self.clock = pg.time.Clock()
        self.font = pg.font.SysFont(None, 22)
        self._auto_flip = True
        self._frame_idx = 0

        if cfg.render_record_dir:
            os.makedirs(cfg.render_record_dir, exist_ok=True)

    def attach_surface(self, surface: pg.Surface, cfg: AppConfig) -> None:
        """Draw onto a caller-owned surface; the caller flips and times."""
        if not pg.get_init():
            pg.init()
        self.cfg = cfg
        self._grid = cfg.grid_size
        self.cell = cfg.render_cell
        self.surf = surface
        self.clock = None
        self.font = pg.font.SysFont(None, 22)
        self._auto_flip = False
        self._frame_idx = 0

    def draw(self, s: Snapshot, info: FrameInfo = FrameInfo()) -> None:
        assert self.surf is not None, "Renderer not opened"
        assert self.cfg is not None, "Renderer config not set (call open first)"
        surf = self.surf
        c = self.cell

        surf.fill(theme.BG)
        if self.cfg.render_grid_lines:
            self._draw_grid(surf)

        for ax, ay in s.apples:
            pg.draw.rect(surf, theme.APPLE, pg.Rect(ax * c, ay * c, c, c))

        # segments may be translucent, so they go through an alpha layer
        layer = pg.Surface(surf.get_size(), pg.SRCALPHA)
        for (x, y), col in zip(s.snake, self._segment_colors(len(s.snake), info.gradient)):
            layer.fill(col, pg.Rect(x * c, y * c, c, c))
        surf.blit(layer, (0, 0))

        if self.cfg.render_show_hud:
            self._blit_text(
                f"Score: {s.score}   Best: {info.best}   Speed: {info.tick_ms} ms   "
                f"Apples: {info.apples}   Warp: {'on' if s.wrap_walls else 'off'}   "
                f"Gradient: {'on' if info.gradient else 'off'}",
                (6, 4),
            )

        if s.terminated:
            self._draw_death_screen(s, info)

        if self._auto_flip:
            pg.display.flip()

        if self.cfg.render_record_dir:
            self._save_surface_frame()

    def tick(self, fps: int) -> None:
        if self.clock:
            self.clock.tick(fps)

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None
            self.clock = None
            self.font = None

    def save_frame(self, s: Snapshot) -> None:
        assert self.cfg is not None, "Renderer config not set (call open first)"
        if not self.cfg.render_record_dir or self.surf is None:
            return
        self._save_surface_frame()

    # internals
    def _segment_colors(self, n: int, gradient: bool) -> List[tuple]:
        accent = self.cfg.accent if self.cfg else theme.ACCENT
        if gradient:
            return [theme.to_pg(col) for col in theme.gradient_ramp(n, theme.TAIL, accent)]
        return [theme.to_pg(theme.parse_hex(accent))] * n

    def _draw_grid(self, surf: pg.Surface) -> None:
        c, n = self.cell, self._grid
        for i in range(1, n):
            pg.draw.line(surf, theme.GRID, (i * c, 0), (i * c, n * c))
            pg.draw.line(surf, theme.GRID, (0, i * c), (n * c, i * c))

    def _draw_death_screen(self, s: Snapshot, info: FrameInfo) -> None:
        surf = self.surf
        shade = pg.Surface(surf.get_size(), pg.SRCALPHA)
        shade.fill(theme.OVERLAY)
        surf.blit(shade, (0, 0))
        lines = [
            f"Final Score: {s.score}",
            f"Best: {info.best}",
            "Press Space or Enter to restart",
        ]
        w, h = surf.get_size()
        y = h // 2 - 30
        for line in lines:
            img = self.font.render(line, True, theme.TEXT)
            surf.blit(img, img.get_rect(center=(w // 2, y)))
            y += 26

    def _blit_text(self, text: str, pos: tuple) -> None:
        img = self.font.render(text, True, theme.TEXT)
        self.surf.blit(img, pos)

    def _save_surface_frame(self) -> None:
        assert self.surf is not None
        assert self.cfg is not None
        rec_dir: PathLike = self.cfg.render_record_dir
        if not isinstance(rec_dir, (str, bytes, os.PathLike)):
            raise TypeError(f"render_record_dir must be path-like, got {type(rec_dir)}")
        fname = os.path.join(rec_dir, f"frame_{self._frame_idx:06d}.png")
        pg.image.save(self.surf, fname)
        self._frame_idx += 1
