"""Unit tests for masonry value objects and entities.

These tests verify:
- BrickDimensions defaults, derived course height and validation
- Envelope construction and containment
- Brick geometry helpers
- StridePlan joins placement records with bricks by id
"""

from types import MappingProxyType

import pytest

from masonry.domain import (
    BondType,
    Brick,
    BrickDimensions,
    BrickType,
    Envelope,
    PlacedBrick,
    PlacementRecord,
    Stride,
    StridePlan,
)


def _brick(brick_id: str, x: float, length: float, course: int = 0) -> Brick:
    return Brick(
        id=brick_id,
        x=x,
        y=course * 62.5,
        length=length,
        brick_type=BrickType.FULL,
        course=course,
    )


# =============================================================================
# BrickDimensions
# =============================================================================


class TestBrickDimensions:
    """Tests for BrickDimensions value object."""

    def test_standard_defaults(self) -> None:
        dims = BrickDimensions()
        assert dims.full_length == 210.0
        assert dims.half_length == 100.0
        assert dims.height == 50.0
        assert dims.head_joint == 10.0
        assert dims.queen_closer_length == 40.0
        assert dims.flemish_closer_length == 45.0

    def test_course_height_includes_bed_joint(self) -> None:
        assert BrickDimensions().course_height == 62.5

    def test_nominal_lengths(self) -> None:
        dims = BrickDimensions()
        assert dims.nominal_length(BrickType.FULL) == 210.0
        assert dims.nominal_length(BrickType.HALF) == 100.0
        assert dims.nominal_length(BrickType.QUEEN_CLOSER) == 40.0
        assert dims.nominal_length(BrickType.FLEMISH_CLOSER) == 45.0

    def test_cut_has_no_nominal_length(self) -> None:
        with pytest.raises(ValueError):
            BrickDimensions().nominal_length(BrickType.CUT)

    def test_rejects_half_not_shorter_than_full(self) -> None:
        with pytest.raises(ValueError) as exc_info:
            BrickDimensions(full_length=100.0, half_length=100.0)
        assert "shorter" in str(exc_info.value)

    def test_rejects_non_positive_height(self) -> None:
        with pytest.raises(ValueError):
            BrickDimensions(height=0)

    def test_rejects_negative_joint(self) -> None:
        with pytest.raises(ValueError):
            BrickDimensions(head_joint=-1.0)

    def test_is_frozen(self) -> None:
        dims = BrickDimensions()
        with pytest.raises(AttributeError):
            dims.height = 60.0  # type: ignore


class TestEnums:
    """Enum values double as configuration strings."""

    def test_bond_type_values(self) -> None:
        assert [b.value for b in BondType] == ["stretcher", "english_cross", "flemish"]

    def test_bond_type_from_string(self) -> None:
        assert BondType("flemish") is BondType.FLEMISH


# =============================================================================
# Envelope
# =============================================================================


class TestEnvelope:
    """Tests for Envelope value object."""

    def test_at_builds_from_corner_and_size(self) -> None:
        env = Envelope.at(100.0, 62.5, 800.0, 1300.0)
        assert env.min_x == 100.0
        assert env.min_y == 62.5
        assert env.max_x == 900.0
        assert env.max_y == 1362.5
        assert env.width == 800.0
        assert env.height == 1300.0

    def test_rejects_inverted_bounds(self) -> None:
        with pytest.raises(ValueError):
            Envelope(min_x=10.0, min_y=0.0, max_x=5.0, max_y=10.0)

    def test_contains_brick_on_boundary(self) -> None:
        env = Envelope.at(0.0, 0.0, 210.0, 50.0)
        assert env.contains(_brick("a", 0.0, 210.0), brick_height=50.0)

    def test_excludes_brick_crossing_right_edge(self) -> None:
        env = Envelope.at(0.0, 0.0, 200.0, 1300.0)
        assert not env.contains(_brick("a", 0.0, 210.0), brick_height=50.0)

    def test_excludes_brick_crossing_top_edge(self) -> None:
        env = Envelope.at(0.0, 0.0, 800.0, 100.0)
        assert not env.contains(_brick("a", 0.0, 210.0, course=1), brick_height=50.0)

    def test_to_dict(self) -> None:
        env = Envelope.at(0.0, 0.0, 800.0, 1300.0)
        assert env.to_dict() == {
            "min_x": 0.0,
            "min_y": 0.0,
            "max_x": 800.0,
            "max_y": 1300.0,
        }


# =============================================================================
# Entities
# =============================================================================


class TestBrick:
    """Tests for Brick entity."""

    def test_right_edge(self) -> None:
        assert _brick("a", 110.0, 210.0).right == 320.0

    def test_overlap_with(self) -> None:
        upper = _brick("u", 110.0, 210.0, course=1)
        assert upper.overlap_with(_brick("a", 0.0, 210.0)) == 100.0
        assert upper.overlap_with(_brick("b", 220.0, 210.0)) == 100.0
        assert upper.overlap_with(_brick("c", 440.0, 210.0)) == 0.0

    def test_rejects_zero_length(self) -> None:
        with pytest.raises(ValueError) as exc_info:
            _brick("a", 0.0, 0.0)
        assert "must be positive" in str(exc_info.value)

    def test_rejects_negative_course(self) -> None:
        with pytest.raises(ValueError):
            Brick(id="a", x=0, y=0, length=10, brick_type=BrickType.CUT, course=-1)

    def test_is_frozen(self) -> None:
        brick = _brick("a", 0.0, 210.0)
        with pytest.raises(AttributeError):
            brick.x = 5.0  # type: ignore


class TestStridePlan:
    """Tests for StridePlan aggregate."""

    @pytest.fixture
    def plan(self) -> StridePlan:
        a = _brick("a", 0.0, 210.0)
        b = _brick("b", 220.0, 210.0)
        c = _brick("c", 110.0, 210.0, course=1)
        strides = (
            Stride(index=0, envelope=Envelope.at(0, 0, 800, 1300), bricks=(a, b)),
            Stride(
                index=1,
                envelope=Envelope.at(0, 62.5, 800, 1300),
                bricks=(c,),
                forced=True,
            ),
        )
        placements = {
            "a": PlacementRecord("a", 0, 0),
            "b": PlacementRecord("b", 0, 1),
            "c": PlacementRecord("c", 1, 0),
        }
        return StridePlan(strides=strides, placements=MappingProxyType(placements))

    def test_counts(self, plan: StridePlan) -> None:
        assert plan.stride_count == 2
        assert plan.brick_count == 3

    def test_envelopes_keyed_by_stride_index(self, plan: StridePlan) -> None:
        assert plan.envelopes[1].min_y == 62.5

    def test_forced_brick_ids(self, plan: StridePlan) -> None:
        assert plan.forced_brick_ids == ("c",)

    def test_placed_bricks_in_build_order(self, plan: StridePlan) -> None:
        placed = plan.placed_bricks()
        assert [p.id for p in placed] == ["a", "b", "c"]
        assert [(p.stride_index, p.order_in_stride) for p in placed] == [
            (0, 0),
            (0, 1),
            (1, 0),
        ]

    def test_unplaced_brick_reports_unassigned(self) -> None:
        placed = PlacedBrick(brick=_brick("a", 0.0, 210.0))
        assert placed.stride_index == PlacedBrick.UNASSIGNED
        assert placed.order_in_stride == PlacedBrick.UNASSIGNED

    def test_stride_courses(self, plan: StridePlan) -> None:
        assert plan.strides[0].courses == (0,)
        assert len(plan.strides[0]) == 2

    def test_empty_plan(self) -> None:
        plan = StridePlan()
        assert plan.stride_count == 0
        assert plan.placed_bricks() == []
        assert plan.placement_for("missing") is None
