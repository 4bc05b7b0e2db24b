"""Value objects for masonry layouts and robot reach envelopes.

All dimensions are in millimetres. ``x`` grows to the right and ``y``
grows upward from the foundation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .entities import Brick


# Slack applied to every geometric comparison so float rounding
# (e.g. 100 * 0.9 == 90.00000000000001) never flips a decision.
GEOMETRY_TOLERANCE: float = 1e-6


class BondType(str, Enum):
    """Repeating brick patterns supported by the layout generator."""

    STRETCHER = "stretcher"
    ENGLISH_CROSS = "english_cross"
    FLEMISH = "flemish"


class BrickType(str, Enum):
    """Kinds of masonry units that appear in a generated course.

    - FULL: Standard stretcher
    - HALF: Half bat / header face
    - QUEEN_CLOSER: Short closer opening English-cross courses 1 and 3
    - FLEMISH_CLOSER: Short header closer opening Flemish B rows
    - CUT: Wall-edge piece cut to the exact remaining span
    """

    FULL = "full"
    HALF = "half"
    QUEEN_CLOSER = "queen_closer"
    FLEMISH_CLOSER = "flemish_closer"
    CUT = "cut"


class SupportPolicy(str, Enum):
    """How the course below must carry a brick before it may be laid.

    - OVERLAP: Summed overlap must reach a fraction of the brick length
    - CONTINUOUS: Supports must run unbroken (up to a joint gap) under the
      whole brick
    """

    OVERLAP = "overlap"
    CONTINUOUS = "continuous"


class CandidateScope(str, Enum):
    """Which uncommitted bricks seed candidate envelope positions."""

    FRONTIER = "frontier"
    ALL = "all"


@dataclass(frozen=True)
class BrickDimensions:
    """Brick and mortar dimensions in millimetres.

    Attributes:
        full_length: Length of a full stretcher.
        half_length: Length of a half brick.
        height: Physical brick height (without the bed joint).
        head_joint: Vertical mortar joint between bricks in a course.
        bed_joint: Horizontal mortar joint between courses.
        queen_closer_length: Length of the English-cross queen closer.
        flemish_closer_length: Length of the Flemish header closer.
    """

    full_length: float = 210.0
    half_length: float = 100.0
    height: float = 50.0
    head_joint: float = 10.0
    bed_joint: float = 12.5
    queen_closer_length: float = 40.0
    flemish_closer_length: float = 45.0

    def __post_init__(self) -> None:
        if self.full_length <= 0 or self.half_length <= 0 or self.height <= 0:
            raise ValueError("Brick dimensions must be positive")
        if self.queen_closer_length <= 0 or self.flemish_closer_length <= 0:
            raise ValueError("Closer lengths must be positive")
        if self.head_joint < 0 or self.bed_joint < 0:
            raise ValueError("Joint sizes must be non-negative")
        if self.half_length >= self.full_length:
            raise ValueError("Half brick must be shorter than a full brick")

    @property
    def course_height(self) -> float:
        """Vertical pitch of one course (brick height plus bed joint)."""
        return self.height + self.bed_joint

    def nominal_length(self, brick_type: BrickType) -> float:
        """Return the uncut length of a brick type.

        Raises:
            ValueError: For ``BrickType.CUT``, which has no fixed length.
        """
        lengths = {
            BrickType.FULL: self.full_length,
            BrickType.HALF: self.half_length,
            BrickType.QUEEN_CLOSER: self.queen_closer_length,
            BrickType.FLEMISH_CLOSER: self.flemish_closer_length,
        }
        if brick_type not in lengths:
            raise ValueError(f"Brick type '{brick_type.value}' has no nominal length")
        return lengths[brick_type]


@dataclass(frozen=True)
class Envelope:
    """Rectangle the robot can reach from one position."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def __post_init__(self) -> None:
        if self.max_x < self.min_x or self.max_y < self.min_y:
            raise ValueError("Envelope maximum must not be below its minimum")

    @classmethod
    def at(cls, x: float, y: float, width: float, height: float) -> Envelope:
        """Build an envelope from its bottom-left corner and size."""
        return cls(min_x=x, min_y=y, max_x=x + width, max_y=y + height)

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def contains(self, brick: Brick, brick_height: float) -> bool:
        """Check whether a brick lies fully inside the envelope."""
        return (
            brick.x >= self.min_x - GEOMETRY_TOLERANCE
            and brick.right <= self.max_x + GEOMETRY_TOLERANCE
            and brick.y >= self.min_y - GEOMETRY_TOLERANCE
            and brick.y + brick_height <= self.max_y + GEOMETRY_TOLERANCE
        )

    def to_dict(self) -> dict[str, float]:
        return {
            "min_x": self.min_x,
            "min_y": self.min_y,
            "max_x": self.max_x,
            "max_y": self.max_y,
        }
