"""
Runners - drive a Scene frame by frame.

Offline runners sample the loop at fixed timestamps (i * 1000 / fps) so the
output does not depend on how fast the machine renders:
- render_still: one PNG-ready image
- render_sequence: numbered PNG files
- render_gif: one looping animated GIF

run_live opens a resizable pygame window and follows the wall clock.
"""

import sys
from pathlib import Path
from typing import List, Optional

from PIL import Image

from .clock import MasterClock
from .display.design import COLORS
from .errors import BackendUnavailableError, OutputError
from .scene import Scene


def frame_times(frames: int, fps: float) -> List[float]:
    """Timestamps (ms) of each offline frame."""
    return [i * 1000.0 / fps for i in range(frames)]


def render_still(scene: Scene, time_ms: float) -> Image.Image:
    surface = scene.new_surface()
    scene.frame(surface, time_ms)
    return surface.image


def _ensure_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputError(f"Cannot create output directory {path}: {e}") from e


def save_still(scene: Scene, time_ms: float, path) -> Path:
    path = Path(path)
    _ensure_dir(path.parent)
    image = render_still(scene, time_ms)
    try:
        image.save(path)
    except OSError as e:
        raise OutputError(f"Cannot write {path}: {e}") from e
    print(f"[Runner] Saved frame at {time_ms:.0f}ms -> {path}", file=sys.stderr, flush=True)
    return path


def render_sequence(
    scene: Scene,
    out_dir,
    frames: int,
    fps: float,
    prefix: str = "songlines",
) -> List[Path]:
    """Write frames as prefix_0000.png, prefix_0001.png, ..."""
    out_dir = Path(out_dir)
    _ensure_dir(out_dir)
    paths = []
    for i, t in enumerate(frame_times(frames, fps)):
        path = out_dir / f"{prefix}_{i:04d}.png"
        try:
            render_still(scene, t).save(path)
        except OSError as e:
            raise OutputError(f"Cannot write {path}: {e}") from e
        paths.append(path)
    print(f"[Runner] Wrote {len(paths)} frames to {out_dir}", file=sys.stderr, flush=True)
    return paths


def render_gif(scene: Scene, path, frames: int, fps: float) -> Path:
    """Render frames into a looping animated GIF."""
    path = Path(path)
    if frames <= 0:
        raise OutputError("A GIF needs at least one frame")
    _ensure_dir(path.parent)
    images = [render_still(scene, t) for t in frame_times(frames, fps)]
    try:
        images[0].save(
            path,
            save_all=True,
            append_images=images[1:],
            duration=int(round(1000.0 / fps)),
            loop=0,
        )
    except OSError as e:
        raise OutputError(f"Cannot write {path}: {e}") from e
    print(f"[Runner] Wrote {len(images)}-frame GIF -> {path}", file=sys.stderr, flush=True)
    return path


def run_live(scene: Scene, width: int, height: int, fps: float = 60, max_frames: Optional[int] = None) -> int:
    """
    Animate in a resizable pygame window until it is closed.

    Resizing the window rebuilds the scene before the next frame.
    Returns the number of frames shown.
    """
    try:
        import pygame
    except ImportError as e:
        raise BackendUnavailableError("pygame is required for --live mode. Install songlines[live].") from e

    pygame.init()
    try:
        window = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption("Songlines")
        ticker = pygame.time.Clock()
        clock = MasterClock(scene.config.animation.loop_duration_ms)
        scene.rebuild(width, height)
        print(f"[Live] Window {width}x{height} at {fps} fps", file=sys.stderr, flush=True)

        shown = 0
        running = True
        while running and (max_frames is None or shown < max_frames):
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    window = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
                    scene.resize(event.w, event.h)
            if not running:
                break

            image = render_still(scene, clock.now_ms())
            frame = pygame.image.frombuffer(image.tobytes(), image.size, "RGB")
            window.fill(COLORS.BACKGROUND)
            win_w, win_h = window.get_size()
            window.blit(frame, ((win_w - image.width) // 2, (win_h - image.height) // 2))
            pygame.display.flip()
            ticker.tick(fps)
            shown += 1
        return shown
    finally:
        pygame.quit()
