"""
Tests for triangle subdivision and the centroid offset.
"""
import math
import random

import pytest

from triangle_sketches.geometry import (dist, lerp, equalf, longest_edge, subdivide,
                                        subdivide_all, centroid, offset, offset_all)
from conftest import FixedRandom

DEFAULT = ((0.1, 0.1), (0.1, 0.9), (0.9, 0.1))
EQUILATERAL = ((0.0, 0.0), (1.0, 0.0), (0.5, math.sqrt(3) / 2))


def signed_area(tri):
    (x1, y1), (x2, y2), (x3, y3) = tri
    return 0.5 * ((x2 - x1) * (y3 - y1) - (x3 - x1) * (y2 - y1))


def assert_points_close(p, q, tol=1e-12):
    assert p[0] == pytest.approx(q[0], abs=tol)
    assert p[1] == pytest.approx(q[1], abs=tol)


class TestHelpers:

    def test_dist(self):
        assert dist((0, 0), (3, 4)) == pytest.approx(5.0)

    def test_lerp_ends_and_middle(self):
        assert lerp((0, 0), (2, 4), 0) == (0, 0)
        assert lerp((0, 0), (2, 4), 1) == (2, 4)
        assert lerp((0, 0), (2, 4), 0.5) == (1, 2)

    def test_lerp_extrapolates(self):
        assert_points_close(lerp((0, 0), (1, 0), 1.5), (1.5, 0))

    def test_equalf_uses_tolerance(self):
        assert equalf(1.0, 1.0 + 1e-12)
        assert not equalf(1.0, 1.001)


class TestLongestEdge:

    def test_default_triangle_splits_bc(self):
        """AB = CA = 0.8, BC ~ 1.131, so BC is split and A is opposite."""
        a, b, c = DEFAULT
        assert longest_edge(DEFAULT) == (b, c, a)

    def test_equilateral_picks_ab(self):
        a, b, c = EQUILATERAL
        assert longest_edge(EQUILATERAL) == (a, b, c)

    def test_near_tie_goes_to_first_edge(self):
        """BC is longer than AB by less than the tolerance."""
        tri = ((0.0, 0.0), (1.0, 0.0), (0.5, 1e-13 + math.sqrt(0.75)))
        a, b, c = tri
        assert longest_edge(tri) == (a, b, c)

    def test_ca_longest(self):
        tri = ((0.0, 0.0), (0.5, 0.1), (1.0, 0.0))
        a, b, c = tri
        assert longest_edge(tri) == (c, a, b)


class TestSubdivide:

    def test_end_to_end_default_triangle(self):
        rng = FixedRandom(gauss_value=0.5)
        first, second = subdivide(DEFAULT, rng)
        a, b, c = DEFAULT
        assert_points_close(first[0], (0.5, 0.5))
        assert first[1:] == (b, a)
        assert second[0] == first[0]
        assert second[1:] == (c, a)

    def test_split_ratio_is_gaussian_around_half(self):
        rng = FixedRandom()
        subdivide(DEFAULT, rng)
        assert rng.gauss_calls == [(0.5, 0.08)]

    def test_new_point_on_longest_edge(self):
        rng = FixedRandom(gauss_value=0.3)
        a, b, c = DEFAULT
        first, second = subdivide(DEFAULT, rng)
        assert_points_close(first[0], lerp(b, c, 0.3))

    def test_children_tile_parent(self):
        """(P, e2, opp) and (e1, P, opp) add up to the parent for any ratio."""
        rng = random.Random(7)
        for i in range(20):
            tri = tuple((rng.random(), rng.random()) for _ in range(3))
            first, second = subdivide(tri, rng)
            assert signed_area(second) - signed_area(first) == pytest.approx(
                signed_area(tri), abs=1e-12)
            # children share P and the opposite vertex
            assert first[0] == second[0]
            assert first[2] == second[2]

    def test_area_preserved_inside_edge(self):
        rng = FixedRandom(gauss_value=0.42)
        first, second = subdivide(EQUILATERAL, rng)
        total = abs(signed_area(first)) + abs(signed_area(second))
        assert total == pytest.approx(abs(signed_area(EQUILATERAL)))

    def test_ratio_outside_unit_interval_is_not_clamped(self):
        rng = FixedRandom(gauss_value=1.25)
        first, second = subdivide(EQUILATERAL, rng)
        assert_points_close(first[0], (1.25, 0.0))

    def test_degenerate_triangles_do_not_raise(self):
        rng = FixedRandom()
        collinear = ((0.0, 0.0), (0.5, 0.5), (1.0, 1.0))
        point = ((0.3, 0.3), (0.3, 0.3), (0.3, 0.3))
        assert len(subdivide(collinear, rng)) == 2
        first, second = subdivide(point, rng)
        assert first == ((0.3, 0.3), (0.3, 0.3), (0.3, 0.3))

    def test_subdivide_all_doubles(self):
        rng = random.Random(1)
        triangles = (DEFAULT,)
        for n in range(1, 7):
            triangles = subdivide_all(triangles, rng)
            assert len(triangles) == 2 ** n

    def test_subdivide_all_keeps_order(self):
        rng = FixedRandom()
        triangles = subdivide_all((DEFAULT, EQUILATERAL), rng)
        assert triangles[:2] == tuple(subdivide(DEFAULT, rng))
        assert triangles[2:] == tuple(subdivide(EQUILATERAL, rng))

    def test_same_seed_same_result(self):
        assert subdivide_all((DEFAULT,), random.Random(5)) == \
            subdivide_all((DEFAULT,), random.Random(5))


class TestOffset:

    def test_centroid(self):
        assert_points_close(centroid(((0, 0), (3, 0), (0, 3))), (1, 1))

    def test_zero_amount_is_identity(self):
        for tri in (DEFAULT, EQUILATERAL):
            for p, q in zip(offset(tri, 0), tri):
                assert_points_close(p, q)

    def test_farthest_vertex_moves_by_amount(self):
        c = centroid(DEFAULT)
        before = [dist(p, c) for p in DEFAULT]
        after = [dist(p, c) for p in offset(DEFAULT, 0.01)]
        i = before.index(max(before))
        assert before[i] - after[i] == pytest.approx(0.01)

    def test_moves_proportional_to_distance(self):
        c = centroid(DEFAULT)
        before = [dist(p, c) for p in DEFAULT]
        after = [dist(p, c) for p in offset(DEFAULT, 0.01)]
        for d0, d1 in zip(before, after):
            assert d1 / d0 == pytest.approx(1 - 0.01 / max(before))

    def test_negative_amount_grows(self):
        c = centroid(DEFAULT)
        grown = offset(DEFAULT, -0.05)
        assert all(dist(p, c) > dist(q, c) for p, q in zip(grown, DEFAULT))

    def test_offset_and_back(self):
        there = offset(DEFAULT, 0.001)
        back = offset(there, -0.001)
        for p, q in zip(back, DEFAULT):
            assert_points_close(p, q, tol=1e-9)

    def test_collapsed_triangle_unchanged(self):
        point = ((0.4, 0.4), (0.4, 0.4), (0.4, 0.4))
        assert offset(point, 0.1) == point

    def test_collapsed_with_rounded_centroid(self):
        """The centroid of three equal points can be off by rounding."""
        for xy in ((0.1, 0.7), (0.3, 0.3), (0.9, 0.2)):
            point = (xy, xy, xy)
            assert offset(point, 0.1) == point
            assert offset(point, -0.1) == point

    def test_no_clamping(self):
        """Pushing past the centroid flips the triangle."""
        flipped = offset(EQUILATERAL, 2 * dist(EQUILATERAL[0], centroid(EQUILATERAL)))
        assert signed_area(flipped) == pytest.approx(signed_area(EQUILATERAL))
        c = centroid(EQUILATERAL)
        assert flipped[0][0] > c[0]

    def test_offset_all(self):
        shrunk = offset_all((DEFAULT, EQUILATERAL), 0.001)
        assert len(shrunk) == 2
        assert shrunk[1] == offset(EQUILATERAL, 0.001)
