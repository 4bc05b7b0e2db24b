"""Brick layout generation for stretcher, English-cross and Flemish bonds.

Each course is laid left to right. The bond pattern picks a nominal brick
type for every position in the course; the nominal type is then fitted to
the span that is left before the wall edge:

- a full brick degrades to a half brick, then to a cut piece
- a half brick or closer degrades straight to a cut piece

A cut piece is sized to the exact remaining span, so the last brick of a
course always finishes flush with the wall edge.
"""

from __future__ import annotations

import logging
import math
from typing import Callable

from ..entities import Brick
from ..value_objects import GEOMETRY_TOLERANCE, BondType, BrickDimensions, BrickType

logger = logging.getLogger(__name__)

# (course index, position in course) -> nominal brick type
CoursePattern = Callable[[int, int], BrickType]


def _stretcher_pattern(course: int, position: int) -> BrickType:
    # Odd courses open with a half brick to stagger the head joints.
    if position == 0 and course % 2 == 1:
        return BrickType.HALF
    return BrickType.FULL


def _english_cross_pattern(course: int, position: int) -> BrickType:
    course_type = course % 4
    if course_type == 0:
        return BrickType.FULL
    if course_type in (1, 3):
        return BrickType.QUEEN_CLOSER if position == 0 else BrickType.HALF
    return BrickType.HALF if position == 0 else BrickType.FULL


def _flemish_pattern(course: int, position: int) -> BrickType:
    if course % 2 == 0:
        return BrickType.FULL if position % 2 == 0 else BrickType.HALF
    if position == 0:
        return BrickType.FLEMISH_CLOSER
    return BrickType.HALF if (position - 1) % 2 == 0 else BrickType.FULL


BOND_PATTERNS: dict[BondType, CoursePattern] = {
    BondType.STRETCHER: _stretcher_pattern,
    BondType.ENGLISH_CROSS: _english_cross_pattern,
    BondType.FLEMISH: _flemish_pattern,
}


def brick_id(course: int, position: int) -> str:
    """Stable brick identity derived from its course and position."""
    return f"brick-{course}-{position}"


class BondLayoutGenerator:
    """Lays out every course of a rectangular wall for a given bond.

    The generator is pure and deterministic: identical arguments always
    produce identical brick lists (same ids, positions and order).
    """

    def __init__(self, dimensions: BrickDimensions | None = None) -> None:
        self.dimensions = dimensions or BrickDimensions()

    def course_count(self, wall_height: float) -> int:
        """Number of whole courses that fit in the wall height."""
        if wall_height <= 0:
            return 0
        return math.floor(wall_height / self.dimensions.course_height)

    def generate(
        self,
        bond_type: BondType | str,
        wall_width: float,
        wall_height: float,
    ) -> list[Brick]:
        """Generate the full brick set for a wall.

        Args:
            bond_type: Bond pattern to lay.
            wall_width: Wall width in mm.
            wall_height: Wall height in mm.

        Returns:
            Bricks ordered course by course, left to right. Empty when
            either wall dimension is not positive.
        """
        if wall_width <= 0 or wall_height <= 0:
            return []

        pattern = BOND_PATTERNS[BondType(bond_type)]
        bricks: list[Brick] = []
        for course in range(self.course_count(wall_height)):
            bricks.extend(self._lay_course(pattern, course, wall_width))

        logger.debug(
            "Generated %d bricks in %d courses for %s bond (%.1f x %.1f mm)",
            len(bricks),
            self.course_count(wall_height),
            BondType(bond_type).value,
            wall_width,
            wall_height,
        )
        return bricks

    def _lay_course(
        self, pattern: CoursePattern, course: int, wall_width: float
    ) -> list[Brick]:
        y = course * self.dimensions.course_height

        # Too narrow for any bond: one piece cut to the wall width.
        if wall_width < self.dimensions.full_length:
            return [
                Brick(
                    id=brick_id(course, 0),
                    x=0.0,
                    y=y,
                    length=wall_width,
                    brick_type=BrickType.CUT,
                    course=course,
                )
            ]

        bricks: list[Brick] = []
        x = 0.0
        position = 0
        while wall_width - x > GEOMETRY_TOLERANCE:
            brick_type, length = self._fit(pattern(course, position), wall_width - x)
            bricks.append(
                Brick(
                    id=brick_id(course, position),
                    x=x,
                    y=y,
                    length=length,
                    brick_type=brick_type,
                    course=course,
                )
            )
            x += length
            # No head joint after the brick that reaches the wall edge
            if x < wall_width - GEOMETRY_TOLERANCE:
                x += self.dimensions.head_joint
            position += 1
        return bricks

    def _fit(self, nominal: BrickType, remaining: float) -> tuple[BrickType, float]:
        """Pick the largest allowed brick for the remaining span."""
        if nominal is BrickType.FULL:
            options = (BrickType.FULL, BrickType.HALF)
        else:
            options = (nominal,)

        for brick_type in options:
            length = self.dimensions.nominal_length(brick_type)
            if remaining >= length - GEOMETRY_TOLERANCE:
                return brick_type, length
        return BrickType.CUT, remaining


def generate_brick_layout(
    bond_type: BondType | str,
    wall_width: float,
    wall_height: float,
    dimensions: BrickDimensions | None = None,
) -> list[Brick]:
    """Generate the brick set for a wall (functional entry point)."""
    return BondLayoutGenerator(dimensions).generate(bond_type, wall_width, wall_height)
