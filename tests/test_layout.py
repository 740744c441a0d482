"""Tests for layout.py - fixed diagonal placement and the connectable subset."""

import random

import pytest

from songlines.layout import create_fixed_layout, layout_centers, line_centers


class TestLineCenters:
    def test_arithmetic_progression(self):
        centers = line_centers(3, (10, 20), (5, 7))
        assert centers == [(10, 20), (15, 27), (20, 34)]


class TestLayoutCenters:
    def test_twenty_five_centers(self):
        assert len(layout_centers(800, 800)) == 25

    def test_first_line_start(self):
        centers = layout_centers(710, 710)
        assert centers[0] == pytest.approx((100, 100))

    def test_line_starts(self):
        w = h = 960
        centers = layout_centers(w, h)
        starts = [centers[i * 5] for i in range(5)]
        expected = [
            (w / 7.1, h / 7.1),
            (w / 2, h * 2 / 20),
            (w * 4 / 5, 0),
            (w / 20, h / 2.2),
            (0, h * 8 / 10),
        ]
        for got, want in zip(starts, expected):
            assert got == pytest.approx(want)

    def test_step_along_line(self):
        centers = layout_centers(480, 480)
        x0, y0 = centers[0]
        x1, y1 = centers[1]
        assert x1 - x0 == pytest.approx(100)
        assert y1 - y0 == pytest.approx(100)


class TestCreateFixedLayout:
    def test_motif_count_and_radius(self):
        layout = create_fixed_layout(800, 800, random.Random(1))
        assert len(layout.motifs) == 25
        assert all(m.radius == 100 for m in layout.motifs)

    def test_centers_independent_of_randomness(self):
        a = create_fixed_layout(640, 640, random.Random(1))
        b = create_fixed_layout(640, 640, random.Random(999))
        assert [m.center for m in a.motifs] == [m.center for m in b.motifs]

    def test_same_seed_reproduces_everything(self):
        a = create_fixed_layout(640, 640, random.Random(42))
        b = create_fixed_layout(640, 640, random.Random(42))
        assert [m.palette for m in a.motifs] == [m.palette for m in b.motifs]
        assert [m.center for m in a.nodes] == [m.center for m in b.nodes]

    def test_nodes_are_ordered_subset(self):
        layout = create_fixed_layout(800, 800, random.Random(3))
        positions = [layout.motifs.index(n) for n in layout.nodes]
        assert positions == sorted(positions)
        assert all(any(n is m for m in layout.motifs) for n in layout.nodes)

    def test_connect_probability_one(self):
        layout = create_fixed_layout(800, 800, random.Random(3), connect_probability=1.0)
        assert len(layout.nodes) == 25

    def test_connect_probability_zero(self):
        layout = create_fixed_layout(800, 800, random.Random(3), connect_probability=0.0)
        assert layout.nodes == []

    def test_roughly_seventy_percent_nodes(self):
        rng = random.Random(11)
        total = sum(len(create_fixed_layout(400, 400, rng).nodes) for _ in range(40))
        assert 0.6 < total / (40 * 25) < 0.8

    def test_zero_canvas_is_empty(self):
        layout = create_fixed_layout(0, 0, random.Random(1))
        assert layout.motifs == []
        assert layout.nodes == []
