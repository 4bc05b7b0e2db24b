"""Structural support test for bricks above the foundation course.

A brick may only be laid once the bricks beneath it carry it. Two policies
are available (see ``SupportPolicy``):

- OVERLAP sums the true geometric overlap of the laid bricks in the course
  below (overlapping supports are merged, never double-counted) and
  requires a fraction of the brick's length.
- CONTINUOUS scans the laid supports left to right and requires unbroken
  coverage of the brick's span, bridging gaps up to the joint tolerance.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Container, Iterable

from ..entities import Brick
from ..value_objects import GEOMETRY_TOLERANCE, SupportPolicy

DEFAULT_SUPPORT_RATIO = 0.9
DEFAULT_JOINT_TOLERANCE = 10.0


class SupportChecker:
    """Answers "is this brick supported?" for one wall's brick set.

    Attributes:
        policy: Support policy in force.
        support_ratio: Fraction of the brick length that must be carried
            under the OVERLAP policy.
        joint_tolerance: Widest gap bridged under the CONTINUOUS policy.
    """

    def __init__(
        self,
        bricks: Iterable[Brick],
        policy: SupportPolicy = SupportPolicy.OVERLAP,
        support_ratio: float = DEFAULT_SUPPORT_RATIO,
        joint_tolerance: float = DEFAULT_JOINT_TOLERANCE,
    ) -> None:
        if not 0 < support_ratio <= 1:
            raise ValueError("Support ratio must be in (0, 1]")
        if joint_tolerance < 0:
            raise ValueError("Joint tolerance must be non-negative")

        self.policy = SupportPolicy(policy)
        self.support_ratio = support_ratio
        self.joint_tolerance = joint_tolerance

        courses: dict[int, list[Brick]] = defaultdict(list)
        for brick in bricks:
            courses[brick.course].append(brick)
        self._courses = {
            course: sorted(members, key=lambda b: b.x)
            for course, members in courses.items()
        }

    def supports_below(self, brick: Brick, committed: Container[str]) -> list[Brick]:
        """Laid bricks in the course below that overlap the brick's span.

        Returns:
            Supporting bricks sorted by x.
        """
        if brick.course == 0:
            return []
        return [
            below
            for below in self._courses.get(brick.course - 1, ())
            if below.x < brick.right
            and below.right > brick.x
            and below.id in committed
        ]

    def supported_length(self, brick: Brick, committed: Container[str]) -> float:
        """Length of the brick's span carried by laid bricks below it."""
        total = 0.0
        covered_to = brick.x
        for below in self.supports_below(brick, committed):
            start = max(below.x, covered_to)
            end = min(below.right, brick.right)
            if end > start:
                total += end - start
                covered_to = end
        return total

    def is_supported(self, brick: Brick, committed: Container[str]) -> bool:
        """Check whether a brick may be laid given the committed ids.

        Args:
            brick: Brick to test.
            committed: Ids of bricks already laid (global commits plus any
                bricks admitted earlier in the stride being built).

        Returns:
            True for foundation-course bricks; otherwise the policy result.
        """
        if brick.course == 0:
            return True
        if self.policy is SupportPolicy.CONTINUOUS:
            return self._is_continuously_supported(brick, committed)
        required = brick.length * self.support_ratio
        return self.supported_length(brick, committed) >= required - GEOMETRY_TOLERANCE

    def _is_continuously_supported(
        self, brick: Brick, committed: Container[str]
    ) -> bool:
        supports = self.supports_below(brick, committed)
        if not supports:
            return False
        reach = brick.x
        for below in supports:
            if below.x > reach + self.joint_tolerance + GEOMETRY_TOLERANCE:
                return False
            reach = max(reach, below.right)
            if reach >= brick.right - self.joint_tolerance - GEOMETRY_TOLERANCE:
                return True
        return reach >= brick.right - self.joint_tolerance - GEOMETRY_TOLERANCE


def is_supported(
    brick: Brick,
    committed: Iterable[Brick],
    policy: SupportPolicy = SupportPolicy.OVERLAP,
    support_ratio: float = DEFAULT_SUPPORT_RATIO,
    joint_tolerance: float = DEFAULT_JOINT_TOLERANCE,
) -> bool:
    """Support test against an explicit set of already-laid bricks."""
    laid = list(committed)
    checker = SupportChecker(laid, policy, support_ratio, joint_tolerance)
    return checker.is_supported(brick, {b.id for b in laid})
