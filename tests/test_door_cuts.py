"""Door cut segmenting and door-to-wall association tests."""
import logging

import pytest

from bimgeom.models import BIMDoor, DoorOpening, PartitionWall, PerimeterWall
from bimgeom.core.door_cuts import (
    DoorWallIndex,
    get_wall_thickness_for_door,
    merge_openings,
    segment_with_door_cuts,
)


def door(x, y, width=1000.0, id="d"):
    return BIMDoor(id=id, width=width, height=2100, position=(x, y))


def as_pairs(segments):
    return [(s.p0, s.p1) for s in segments]


class TestSegmentWithDoorCuts:

    def test_single_centered_door_splits_in_two(self):
        out = segment_with_door_cuts((0, 0), (10000, 0), [door(5000, 0)], 300)
        assert len(out) == 2
        (a0, a1), (b0, b1) = as_pairs(out)
        assert a0 == pytest.approx((0, 0))
        assert a1 == pytest.approx((4500, 0))
        assert b0 == pytest.approx((5500, 0))
        assert b1 == (10000, 0)

    def test_no_door_in_range_returns_segment_unchanged(self):
        out = segment_with_door_cuts((0, 0), (10000, 0), [door(5000, 800)], 300)
        assert as_pairs(out) == [((0, 0), (10000, 0))]

    def test_no_doors(self):
        assert as_pairs(segment_with_door_cuts((0, 0), (10000, 0), [])) == [((0, 0), (10000, 0))]

    def test_door_beyond_segment_end_ignored(self):
        out = segment_with_door_cuts((0, 0), (1000, 0), [door(1500, 0, width=200)], 300)
        assert len(out) == 1

    def test_door_at_joint_within_tolerance_is_cut(self):
        out = segment_with_door_cuts((0, 0), (10000, 0), [door(10050, 0, width=1000)], 300)
        assert len(out) == 1
        assert out[0].p1 == pytest.approx((9500, 0))

    def test_overlapping_doors_merge_into_one_hole(self):
        doors = [door(4000, 0, 1000, "a"), door(4600, 0, 1000, "b")]
        out = segment_with_door_cuts((0, 0), (10000, 0), doors, 300)
        # Independent cuts would leave three pieces
        assert len(out) == 2
        assert out[0].p1 == pytest.approx((3500, 0))
        assert out[1].p0 == pytest.approx((5100, 0))

    def test_separate_doors_leave_three_pieces(self):
        doors = [door(2000, 0, 1000, "a"), door(7000, 0, 1000, "b")]
        assert len(segment_with_door_cuts((0, 0), (10000, 0), doors, 300)) == 3

    def test_slivers_below_minimum_are_dropped(self):
        # Door edge lands 10mm from the segment start
        out = segment_with_door_cuts((0, 0), (10000, 0), [door(510, 0, 1000)], 300)
        assert len(out) == 1
        assert out[0].p0 == pytest.approx((1010, 0))

    def test_door_covering_whole_segment_leaves_nothing(self):
        assert segment_with_door_cuts((0, 0), (800, 0), [door(400, 0, 1000)], 300) == []

    def test_non_finite_endpoint_returns_nothing(self):
        assert segment_with_door_cuts((float("nan"), 0), (10, 0), [door(5, 0)]) == []

    @pytest.mark.parametrize("width", [float("nan"), float("inf"), -500.0])
    def test_door_with_unusable_width_is_ignored(self, width):
        out = segment_with_door_cuts((0, 0), (10000, 0), [door(5000, 0, width=width)], 300)
        assert as_pairs(out) == [((0, 0), (10000, 0))]

    def test_nan_door_position_is_ignored(self):
        out = segment_with_door_cuts((0, 0), (10000, 0), [door(float("nan"), 0)], 300)
        assert as_pairs(out) == [((0, 0), (10000, 0))]

    def test_near_zero_segment_returned_unchanged(self):
        out = segment_with_door_cuts((0, 0), (0.5, 0), [door(0, 0)])
        assert as_pairs(out) == [((0, 0), (0.5, 0))]

    def test_diagonal_segment(self):
        out = segment_with_door_cuts((0, 0), (3000, 4000), [door(1500, 2000, 1000)], 300)
        assert len(out) == 2
        assert out[0].p1 == pytest.approx((1200, 1600))
        assert out[1].p0 == pytest.approx((1800, 2400))

    def test_accepts_duck_typed_doors(self):
        class Simple:
            position = (5000, 0)
            width = 1000

        assert len(segment_with_door_cuts((0, 0), (10000, 0), [Simple()])) == 2


def test_merge_openings_sorts_and_merges_touching():
    merged = merge_openings([
        DoorOpening(t0=0.6, t1=0.7),
        DoorOpening(t0=0.1, t1=0.2),
        DoorOpening(t0=0.2, t1=0.3),
        DoorOpening(t0=0.5, t1=0.5),
    ])
    assert [(o.t0, o.t1) for o in merged] == [(0.1, 0.3), (0.6, 0.7)]


WALLS = [
    PerimeterWall(id="outer", thickness=200, height=2800,
                  polygon=[(0, 0), (10000, 0), (10000, 10000), (0, 10000)]),
    PartitionWall(id="inner", thickness=120, height=2800, path=[(5000, 0), (5000, 10000)]),
]


class TestDoorOwnership:

    def test_door_on_partition(self):
        assert get_wall_thickness_for_door(door(5000, 3000), WALLS) == 120

    def test_door_on_perimeter(self):
        assert get_wall_thickness_for_door(door(2000, 10000), WALLS) == 200

    def test_first_match_wins_when_in_range_of_two(self):
        # Near the perimeter top edge and the partition
        assert get_wall_thickness_for_door(door(5100, 9900), WALLS) == 200
        assert get_wall_thickness_for_door(door(5100, 9900), list(reversed(WALLS))) == 120

    def test_fallback_to_thinnest_wall(self):
        assert get_wall_thickness_for_door(door(2500, 5000), WALLS) == 120

    def test_fallback_default_without_walls(self):
        assert get_wall_thickness_for_door(door(0, 0), []) == 200

    def test_index_matches_function(self):
        index = DoorWallIndex(WALLS)
        for d in (door(5000, 3000), door(2000, 10000), door(2500, 5000)):
            assert index.thickness_for(d) == get_wall_thickness_for_door(d, WALLS)
        assert len(index) == 5

    def test_index_reports_ambiguity(self, caplog):
        index = DoorWallIndex(WALLS)
        d = door(5100, 9900, id="amb")
        assert [w.id for w in index.candidates(d)] == ["outer", "inner"]
        with caplog.at_level(logging.WARNING, logger="bimgeom.core.door_cuts"):
            assert index.owner(d).id == "outer"
        assert "amb" in caplog.text

    def test_index_no_owner(self):
        assert DoorWallIndex(WALLS).owner(door(2500, 5000)) is None
