"""Tests for runner.py - offline rendering and the live backend guard."""

import sys

import pytest
from PIL import Image

from songlines.errors import BackendUnavailableError, OutputError
from songlines.runner import (
    frame_times,
    render_gif,
    render_sequence,
    render_still,
    run_live,
    save_still,
)

from conftest import make_scene


class TestFrameTimes:
    def test_fixed_step(self):
        assert frame_times(3, 10) == [0.0, 100.0, 200.0]

    def test_none(self):
        assert frame_times(0, 30) == []


class TestOffline:
    def test_render_still(self):
        image = render_still(make_scene(size=64), 7500)
        assert image.size == (64, 64)
        assert image.mode == "RGB"

    def test_save_still_creates_parents(self, tmp_path):
        path = save_still(make_scene(size=64), 1000, tmp_path / "a" / "b" / "still.png")
        assert path.exists()

    def test_sequence_names(self, tmp_path):
        paths = render_sequence(make_scene(size=48), tmp_path / "frames", frames=3, fps=10)
        assert [p.name for p in paths] == ["songlines_0000.png", "songlines_0001.png", "songlines_0002.png"]
        assert all(p.exists() for p in paths)

    def test_gif(self, tmp_path):
        path = render_gif(make_scene(size=48), tmp_path / "loop.gif", frames=3, fps=10)
        with Image.open(path) as gif:
            assert gif.n_frames == 3

    def test_gif_needs_frames(self, tmp_path):
        with pytest.raises(OutputError):
            render_gif(make_scene(size=48), tmp_path / "loop.gif", frames=0, fps=10)

    def test_unwritable_target(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("x")
        with pytest.raises(OutputError):
            save_still(make_scene(size=32), 0, blocker / "still.png")


class TestLive:
    def test_missing_pygame(self, monkeypatch):
        monkeypatch.setitem(sys.modules, "pygame", None)
        with pytest.raises(BackendUnavailableError):
            run_live(make_scene(size=32), 32, 32, max_frames=1)
