"""Tests for motif.py - layer staging, construction, and per-frame rendering."""

import dataclasses
import random

import pytest

from songlines.display.design import COLORS
from songlines.display.surface import RecordingSurface
from songlines.motif import LayerDurations, Motif, layer_progress

from conftest import make_motif, make_palette


class TestLayerDurations:
    def test_defaults(self):
        d = LayerDurations()
        assert (d.inner, d.middle, d.outer) == (800, 1200, 1500)
        assert d.total == 3500


class TestLayerProgress:
    def test_zero(self):
        p = layer_progress(0)
        assert (p.inner, p.middle, p.outer) == (0, 0, 0)

    def test_half_inner(self):
        """virtual time 400 with an 800 ms inner window."""
        p = layer_progress(400)
        assert p.inner == pytest.approx(0.5)
        assert p.middle == 0
        assert p.outer == 0

    def test_middle_window(self):
        p = layer_progress(800 + 600)
        assert p.inner == 1
        assert p.middle == pytest.approx(0.5)
        assert p.outer == 0

    def test_outer_window(self):
        p = layer_progress(2000 + 750)
        assert p.inner == 1
        assert p.middle == 1
        assert p.outer == pytest.approx(0.5)

    def test_full(self):
        p = layer_progress(3500)
        assert (p.inner, p.middle, p.outer) == (1, 1, 1)

    def test_beyond_full_clamps(self):
        p = layer_progress(10000)
        assert (p.inner, p.middle, p.outer) == (1, 1, 1)

    def test_ordering_invariant(self):
        for vt in range(0, 4001, 5):
            p = layer_progress(vt)
            if p.middle > 0:
                assert p.inner == 1
            if p.outer > 0:
                assert p.middle == 1

    def test_custom_durations(self):
        d = LayerDurations(inner=100, middle=100, outer=100)
        p = layer_progress(150, d)
        assert p.inner == 1
        assert p.middle == pytest.approx(0.5)


class TestMotifProgress:
    def test_master_progress_maps_to_virtual_time(self):
        motif = make_motif()
        p = motif.layer_progress(400 / 3500)
        assert p.inner == pytest.approx(0.5)
        assert p.middle == 0
        assert p.outer == 0

    def test_peak_resolves_all_layers(self):
        p = make_motif().layer_progress(1.0)
        assert (p.inner, p.middle, p.outer) == (1, 1, 1)


class TestMotifCreate:
    def test_variants_in_range(self):
        rng = random.Random(3)
        for _ in range(50):
            m = Motif.create(0, 0, 10, rng)
            assert m.inner_variant in (0, 1)
            assert m.middle_variant in (0, 1, 2, 3)
            assert m.outer_variant in (0, 1, 2, 3)

    def test_colors_from_palettes(self):
        rng = random.Random(5)
        for _ in range(50):
            m = Motif.create(0, 0, 10, rng)
            assert m.palette.base in COLORS.BASE_PALETTE
            assert m.palette.inner in COLORS.PATTERN_PALETTE
            assert m.palette.middle in COLORS.PATTERN_PALETTE
            assert m.palette.outer in COLORS.PATTERN_PALETTE

    def test_same_seed_same_motif(self):
        a = Motif.create(1, 2, 3, random.Random(9))
        b = Motif.create(1, 2, 3, random.Random(9))
        assert (a.inner_variant, a.middle_variant, a.outer_variant) == (
            b.inner_variant, b.middle_variant, b.outer_variant)
        assert a.palette == b.palette

    def test_motifs_compare_by_identity(self):
        a = make_motif()
        b = make_motif()
        assert a != b
        assert a == a

    def test_center(self):
        assert make_motif(x=3, y=4).center == (3, 4)


class TestMotifRender:
    def test_zero_progress_draws_only_mask(self, rng):
        surface = RecordingSurface(400, 400)
        motif = make_motif(x=200, y=200, radius=50)
        motif.render(surface, 0.0, rng)
        assert len(surface.ops) == 1
        mask = surface.ops[0]
        assert mask.closed
        assert mask.style.fill[:3] == COLORS.BACKGROUND
        assert mask.style.stroke is None

    def test_mask_is_slightly_larger_than_motif(self, rng):
        surface = RecordingSurface(400, 400)
        make_motif(x=200, y=200, radius=50).render(surface, 0.0, rng)
        xs = [x for x, _ in surface.ops[0].points]
        assert max(xs) - 200 > 50
        assert max(xs) - 200 < 50 * 1.05 * 1.05

    def test_mask_centered_on_motif(self, rng):
        surface = RecordingSurface(400, 400)
        make_motif(x=120, y=80, radius=40).render(surface, 0.0, rng)
        points = surface.ops[0].points
        cx = sum(x for x, _ in points) / len(points)
        cy = sum(y for _, y in points) / len(points)
        assert cx == pytest.approx(120, abs=2)
        assert cy == pytest.approx(80, abs=2)

    def test_full_progress_draws_all_layers(self, rng):
        surface = RecordingSurface(400, 400)
        progress = make_motif(x=200, y=200, radius=50, inner=0, middle=2, outer=2).render(surface, 1.0, rng)
        assert (progress.inner, progress.middle, progress.outer) == (1, 1, 1)
        # mask + base disc + blob + 2 solid rings + 2 striped rings
        assert len(surface.ops) == 7

    def test_inner_only(self, rng):
        surface = RecordingSurface(400, 400)
        motif = make_motif(x=200, y=200, radius=50, inner=0, middle=2, outer=2)
        motif.render(surface, 400 / 3500, rng)
        # mask + base disc + blob
        assert len(surface.ops) == 3

    def test_surface_state_restored(self, rng):
        surface = RecordingSurface(400, 400)
        surface.stroke((1, 2, 3))
        make_motif(x=200, y=200, inner=1, middle=1, outer=1).render(surface, 1.0, rng)
        assert surface.style.stroke == (1, 2, 3, 255)
        assert surface.transform_point(0, 0) == (0, 0)

    def test_pattern_colors_used(self, rng):
        surface = RecordingSurface(400, 400)
        motif = make_motif(x=200, y=200, inner=0, middle=2, outer=2)
        motif.render(surface, 1.0, rng)
        strokes = {op.style.stroke[:3] for op in surface.ops if op.style.stroke}
        fills = {op.style.fill[:3] for op in surface.ops if op.style.fill}
        assert motif.palette.middle in strokes
        assert motif.palette.outer in strokes
        assert motif.palette.base in fills
        assert motif.palette.inner in fills

    def test_layers_drawn_in_order(self, rng):
        """Mask first, then base, inner, middle, outer on top."""
        surface = RecordingSurface(400, 400)
        palette = make_palette(
            base=COLORS.BASE_PALETTE[0],
            inner=COLORS.PATTERN_PALETTE[2],
            middle=COLORS.PATTERN_PALETTE[3],
            outer=COLORS.PATTERN_PALETTE[4],
        )
        motif = make_motif(x=200, y=200, radius=50, inner=0, middle=2, outer=2, palette=palette)
        motif.render(surface, 1.0, rng)
        colors = [(op.style.fill or op.style.stroke)[:3] for op in surface.ops]
        assert colors == [
            COLORS.BACKGROUND,
            palette.base,
            palette.inner,
            palette.middle,
            palette.middle,
            palette.outer,
            palette.outer,
        ]

    def test_construction_choices_are_fixed(self):
        motif = make_motif()
        with pytest.raises(dataclasses.FrozenInstanceError):
            motif.outer_variant = 3
        with pytest.raises(dataclasses.FrozenInstanceError):
            motif.palette = make_palette()
