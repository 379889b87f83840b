# main.py
import argparse

from config import AppConfig
from runners.run_snake import main as snake


def parse_args(argv=None):
    d = AppConfig()
    p = argparse.ArgumentParser(description="Snake on a square grid.")
    p.add_argument("--grid-size", type=int, default=d.grid_size)
    p.add_argument("--start-len", type=int, default=d.start_len)
    p.add_argument("--speed", type=int, default=d.tick_ms, help="tick interval in ms")
    p.add_argument("--apples", type=int, default=d.apples)
    p.add_argument("--warp", action="store_true", help="wrap around the walls")
    p.add_argument("--gradient", action="store_true", help="fade the body from tail to head")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--cell-px", type=int, default=d.render_cell)
    p.add_argument("--grid-lines", action="store_true")
    p.add_argument("--no-hud", action="store_true")
    p.add_argument("--best-file", default=d.best_score_path)
    p.add_argument("--log-file", default=None, help="CSV file to append finished games to")
    p.add_argument("--record-dir", default=None, help="save every frame here as PNG")
    p.add_argument("--headless", action="store_true", help="no window; play one game without input, capped at --max-frames (default 20000)")
    p.add_argument("--max-frames", type=int, default=None)
    return p.parse_args(argv)


def build_config(args) -> AppConfig:
    return AppConfig(
        grid_size=args.grid_size,
        start_len=args.start_len,
        tick_ms=args.speed,
        apples=args.apples,
        wrap_walls=args.warp,
        gradient=args.gradient,
        seed=args.seed,
        render_cell=args.cell_px,
        render_grid_lines=args.grid_lines,
        render_show_hud=not args.no_hud,
        best_score_path=args.best_file or None,
        game_log_path=args.log_file,
        render_record_dir=args.record_dir,
    ).clamped()


def main(argv=None):
    args = parse_args(argv)
    cfg = build_config(args)
    snake(cfg, headless=args.headless, max_frames=args.max_frames)


if __name__ == "__main__":
    main()
