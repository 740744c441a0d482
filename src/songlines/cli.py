"""
Command line entry point.

    songlines --time 7500 --out peak.png
    songlines --frames 450 --fps 30 --out-dir frames/
    songlines --gif loop.gif --size 480 --seed 7
    songlines --live
"""

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import ConfigManager
from .errors import SonglinesError
from .runner import render_gif, render_sequence, run_live, save_still
from .scene import Scene


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Songlines - generative circles joined by animated songlines")
    parser.add_argument("--config", type=Path, default=None, help="YAML or JSON config file")
    parser.add_argument("--size", type=int, default=None, help="Canvas size in pixels (square)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed (default: fresh every run)")
    parser.add_argument("--fps", type=float, default=None, help="Frames per second")
    parser.add_argument("--frames", type=int, default=None, help="Number of frames for sequences and GIFs")
    parser.add_argument("--no-dots", action="store_true", help="Disable the background dot texture")

    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("--out", type=Path, help="Render a single still PNG")
    mode.add_argument("--out-dir", type=Path, help="Render a numbered PNG sequence")
    mode.add_argument("--gif", type=Path, help="Render an animated GIF")
    mode.add_argument("--live", action="store_true", help="Animate in a resizable window (needs pygame)")

    parser.add_argument("--time", type=float, default=7500.0, help="Timestamp in ms for --out (default: 7500, the peak)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config = ConfigManager(args.config).load()
    if args.size is not None:
        if args.size <= 0:
            parser.error("--size must be positive")
        config.canvas.width = config.canvas.height = args.size
    if args.seed is not None:
        config.output.seed = args.seed
    if args.fps is not None:
        if args.fps <= 0:
            parser.error("--fps must be positive")
        config.output.fps = args.fps
    if args.frames is not None:
        if args.frames <= 0:
            parser.error("--frames must be positive")
        config.output.frames = args.frames
    if args.no_dots:
        config.canvas.background_dots = False

    scene = Scene(config)
    try:
        if args.live:
            run_live(scene, config.canvas.width, config.canvas.height, fps=config.output.fps)
            return 0

        scene.rebuild(config.canvas.width, config.canvas.height)
        if args.out:
            save_still(scene, args.time, args.out)
        elif args.out_dir:
            render_sequence(scene, args.out_dir, config.output.frames, config.output.fps)
        else:
            render_gif(scene, args.gif, config.output.frames, config.output.fps)
    except SonglinesError as e:
        print(f"[Songlines] {e}", file=sys.stderr, flush=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
