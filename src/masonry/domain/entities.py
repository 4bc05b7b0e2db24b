"""Domain entities for brick layouts and stride plans."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from .value_objects import BrickType, Envelope


@dataclass(frozen=True)
class Brick:
    """A single masonry unit placed in the wall.

    Bricks are created once by the layout generator and never mutated.
    Placement in a stride is recorded separately in a PlacementRecord.

    Attributes:
        id: Stable identity, ``brick-<course>-<index in course>``.
        x: Left edge in mm.
        y: Bottom edge in mm (``course * course_height``).
        length: Extent along x in mm.
        brick_type: Kind of unit (full, half, closer, cut).
        course: Zero-based course index; course 0 sits on the foundation.
    """

    id: str
    x: float
    y: float
    length: float
    brick_type: BrickType
    course: int

    def __post_init__(self) -> None:
        if self.length <= 0:
            raise ValueError("Brick length must be positive")
        if self.course < 0:
            raise ValueError("Course index must be non-negative")

    @property
    def right(self) -> float:
        """X coordinate of the brick's right edge."""
        return self.x + self.length

    def overlap_with(self, other: Brick) -> float:
        """Horizontal overlap length with another brick (0 if disjoint)."""
        return max(0.0, min(self.right, other.right) - max(self.x, other.x))


@dataclass(frozen=True)
class PlacementRecord:
    """Where a brick landed in the build sequence."""

    brick_id: str
    stride_index: int
    order_in_stride: int


@dataclass(frozen=True)
class PlacedBrick:
    """A brick joined with its placement record, ready for rendering."""

    UNASSIGNED = -1

    brick: Brick
    placement: PlacementRecord | None = None

    @property
    def id(self) -> str:
        return self.brick.id

    @property
    def x(self) -> float:
        return self.brick.x

    @property
    def y(self) -> float:
        return self.brick.y

    @property
    def length(self) -> float:
        return self.brick.length

    @property
    def brick_type(self) -> BrickType:
        return self.brick.brick_type

    @property
    def stride_index(self) -> int:
        return self.placement.stride_index if self.placement else self.UNASSIGNED

    @property
    def order_in_stride(self) -> int:
        return self.placement.order_in_stride if self.placement else self.UNASSIGNED


@dataclass(frozen=True)
class Stride:
    """Bricks laid from one envelope position, in build order.

    Attributes:
        index: Position of the stride in the overall sequence.
        envelope: Reach rectangle the stride was planned from.
        bricks: Bricks ordered by (course, x).
        forced: True when no brick was supportable and the lowest brick
            was placed on its own to keep the plan moving.
    """

    index: int
    envelope: Envelope
    bricks: tuple[Brick, ...]
    forced: bool = False

    def __len__(self) -> int:
        return len(self.bricks)

    @property
    def courses(self) -> tuple[int, ...]:
        """Distinct course indices touched by this stride, ascending."""
        return tuple(sorted({brick.course for brick in self.bricks}))


@dataclass(frozen=True)
class StridePlan:
    """Ordered strides plus the placement record of every brick."""

    strides: tuple[Stride, ...] = ()
    placements: Mapping[str, PlacementRecord] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @property
    def stride_count(self) -> int:
        return len(self.strides)

    @property
    def brick_count(self) -> int:
        return sum(len(stride) for stride in self.strides)

    @property
    def envelopes(self) -> dict[int, Envelope]:
        """Mapping of stride index to the envelope it was planned from."""
        return {stride.index: stride.envelope for stride in self.strides}

    @property
    def forced_brick_ids(self) -> tuple[str, ...]:
        return tuple(
            brick.id
            for stride in self.strides
            if stride.forced
            for brick in stride.bricks
        )

    def placement_for(self, brick_id: str) -> PlacementRecord | None:
        return self.placements.get(brick_id)

    def placed_bricks(self) -> list[PlacedBrick]:
        """All planned bricks in build order, joined with their records."""
        return [
            PlacedBrick(brick=brick, placement=self.placements[brick.id])
            for stride in self.strides
            for brick in stride.bricks
        ]
