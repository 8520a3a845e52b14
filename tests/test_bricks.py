"""Brick instancing layout tests."""
import logging
import math

import pytest

from bimgeom.models import GeometryParams, Point2D, Wall
from bimgeom.core.bricks import brick_transforms, get_brick_count, layout_bricks


def test_brick_count_grid():
    count = get_brick_count(4.0, 2.5, 0.2)
    assert (count.n_length, count.n_height, count.n_layers) == (20, 38, 2)
    assert count.total == 20 * 38 * 2
    assert not count.truncated


def test_each_dimension_at_least_one():
    count = get_brick_count(0.0, 0.01, -1.0)
    assert (count.n_length, count.n_height, count.n_layers) == (1, 1, 1)
    assert count.total == 1


@pytest.mark.parametrize("dims", [
    (1e6, 1e6, 1e6),
    (100.0, 50.0, 3.0),
    (float("inf"), 3.0, 0.2),
    (1e308, 3.0, 0.2),
    (0.2, 1e308, 1e308),
    (float("nan"), float("nan"), float("nan")),
])
def test_total_never_negative_or_above_cap(dims):
    count = get_brick_count(*dims)
    assert 0 <= count.total <= 65535


def test_cap_is_reported():
    count = get_brick_count(100.0, 50.0, 3.0)
    assert count.truncated
    assert count.total == 65535
    assert count.requested > count.total
    assert count.dropped == count.requested - 65535


def test_custom_cap():
    count = get_brick_count(4.0, 2.5, 0.2, GeometryParams(max_brick_instances=100))
    assert count.total == 100 and count.truncated


def test_overflowing_extent_counts_as_capped():
    count = get_brick_count(1e308, 3.0, 0.2)
    assert count.n_length == 65535
    assert count.total == 65535
    assert count.truncated


def wall_along_x(length=1.0, height=0.13, thickness=0.1):
    return Wall(id="b", start=Point2D(x=0, y=0), end=Point2D(x=length, y=0),
                height=height, thickness=thickness)


def translation(m):
    return (m[3], m[7], m[11])


def test_running_bond_stagger():
    transforms = brick_transforms(wall_along_x())
    # 5 columns, 2 rows, 1 layer
    assert len(transforms) == 10
    assert translation(transforms[0]) == pytest.approx((0.0, 0.0, 0.0))
    assert translation(transforms[1]) == pytest.approx((0.2, 0.0, 0.0))
    # Second row shifted by half a brick and raised by one brick height
    assert translation(transforms[5]) == pytest.approx((0.1, 0.065, 0.0))


def test_layers_step_along_left_normal():
    transforms = brick_transforms(wall_along_x(thickness=0.2))
    n_per_layer = 5 * 2
    assert translation(transforms[n_per_layer]) == pytest.approx((0.0, 0.0, 0.1))


def test_rotation_matches_wall_direction():
    wall = Wall(id="r", start=Point2D(x=0, y=0), end=Point2D(x=0, y=1), height=0.065, thickness=0.1)
    m = brick_transforms(wall)[0]
    rot_y = -math.pi / 2
    assert m[0] == pytest.approx(math.cos(rot_y))
    assert m[2] == pytest.approx(math.sin(rot_y))
    assert m[8] == pytest.approx(-math.sin(rot_y))
    assert m[12:] == (0.0, 0.0, 0.0, 1.0)
    # Second column steps along +z
    assert translation(brick_transforms(wall)[1]) == pytest.approx((0.0, 0.0, 0.2))


def test_transforms_are_reproducible():
    wall = Wall(id="x", start=Point2D(x=1.3, y=-0.7), end=Point2D(x=4.9, y=2.2))
    assert brick_transforms(wall) == brick_transforms(wall)


def test_layout_truncates_and_warns(caplog):
    wall = Wall(id="big", start=Point2D(x=0, y=0), end=Point2D(x=100, y=0),
                height=50.0, thickness=0.2)
    with caplog.at_level(logging.WARNING, logger="bimgeom.core.bricks"):
        layout = layout_bricks(wall)
    assert layout.count.truncated
    assert len(layout.transforms) == 65535
    assert "big" in caplog.text
