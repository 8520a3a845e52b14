"""Point and segment primitive tests."""
import math

import pytest

from bimgeom.core.primitives import (
    extend_segment_ends,
    is_finite_point,
    is_finite_polygon,
    m_to_mm,
    mm_to_m,
    point_to_segment_dist_sq,
    polygon_centroid_m,
    segment_angle,
    segment_center_m,
    segment_length,
)

NAN = float("nan")
INF = float("inf")


def test_is_finite_point():
    assert is_finite_point((1.0, 2.0))
    assert is_finite_point([0, -3])
    assert not is_finite_point((NAN, 0.0))
    assert not is_finite_point((0.0, INF))
    assert not is_finite_point(None)
    assert not is_finite_point(("1", 2))
    assert not is_finite_point((1.0,))


def test_is_finite_polygon():
    assert is_finite_polygon([(0, 0), (1, 0), (0, 1)])
    assert not is_finite_polygon([(0, 0), (1, 0)])
    assert not is_finite_polygon([(0, 0), (1, 0), (NAN, 1)])
    assert not is_finite_polygon(None)


def test_segment_length_zero_and_symmetric():
    p = (123.5, -42.0)
    assert segment_length(p, p) == 0
    a, b = (0.0, 0.0), (3.0, 4.0)
    assert segment_length(a, b) == 5.0
    assert segment_length(a, b) == segment_length(b, a)


def test_segment_length_invalid_is_zero():
    assert segment_length((NAN, 0), (1, 1)) == 0
    assert segment_length((0, 0), (INF, 1)) == 0


@pytest.mark.parametrize("t", [0.0, 0.25, 0.5, 1.0])
def test_point_on_segment_has_zero_distance(t):
    p0, p1 = (0.0, 0.0), (100.0, 0.0)
    p = (p0[0] + t * (p1[0] - p0[0]), 0.0)
    assert point_to_segment_dist_sq(p, p0, p1) == 0


def test_point_to_segment_clamps_to_endpoints():
    p0, p1 = (0.0, 0.0), (10.0, 0.0)
    assert point_to_segment_dist_sq((-3.0, 4.0), p0, p1) == pytest.approx(25.0)
    assert point_to_segment_dist_sq((13.0, 4.0), p0, p1) == pytest.approx(25.0)
    assert point_to_segment_dist_sq((5.0, 2.0), p0, p1) == pytest.approx(4.0)


def test_point_to_degenerate_segment():
    assert point_to_segment_dist_sq((3.0, 4.0), (0.0, 0.0), (0.0, 0.0)) == pytest.approx(25.0)


def test_point_to_segment_invalid_is_infinite():
    assert point_to_segment_dist_sq((NAN, 0), (0, 0), (1, 0)) == math.inf
    assert point_to_segment_dist_sq((0, 0), (0, 0), (INF, 0)) == math.inf


def test_segment_angle():
    assert segment_angle((0, 0), (0, 10)) == pytest.approx(math.pi / 2)
    assert segment_angle((0, 0), (-1, 0)) == pytest.approx(math.pi)
    assert segment_angle((NAN, 0), (1, 0)) == 0


def test_segment_center_and_centroid_in_meters():
    assert segment_center_m((0, 0), (2000, 4000)) == pytest.approx((1.0, 2.0))
    assert segment_center_m((0, NAN), (1, 1)) == (0.0, 0.0)
    square = [(0, 0), (1000, 0), (1000, 1000), (0, 1000)]
    assert polygon_centroid_m(square) == pytest.approx((0.5, 0.5))
    assert polygon_centroid_m([]) == (0.0, 0.0)
    assert polygon_centroid_m([(0, 0), (INF, 0), (1, 1)]) == (0.0, 0.0)


def test_unit_round_trip():
    for v in (0.0, 1.0, 1234.5, -987.25, 1e7):
        assert m_to_mm(mm_to_m(v)) == pytest.approx(v)


def test_extend_segment_ends():
    p0, p1 = extend_segment_ends((0.0, 0.0), (1000.0, 0.0), 200.0)
    assert p0 == pytest.approx((-100.0, 0.0))
    assert p1 == pytest.approx((1100.0, 0.0))


def test_extend_short_segment_unchanged():
    assert extend_segment_ends((0.0, 0.0), (0.5, 0.0), 200.0) == ((0.0, 0.0), (0.5, 0.0))
