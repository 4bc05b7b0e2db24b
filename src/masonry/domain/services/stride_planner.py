"""Greedy stride planner for the bricklaying robot.

A stride is the batch of bricks the robot lays from one envelope position.
The planner repeatedly:

1. finds the lowest course that still has unlaid bricks (the frontier);
2. proposes envelope left edges flush with the left or right edge of each
   seed brick, clamped to the wall;
3. for every candidate, admits the contained bricks in (course, x) order
   while each one is supported by laid or already-admitted bricks;
4. commits the candidate that admits the most bricks (first in x order on
   ties), or, when none admits anything, the lowest unlaid brick alone.

Every iteration commits at least one brick, so planning always finishes.
The planner does not search for a globally minimal stride count.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Sequence

from ..entities import Brick, PlacementRecord, Stride, StridePlan
from ..value_objects import BrickDimensions, CandidateScope, Envelope, SupportPolicy
from .support import DEFAULT_JOINT_TOLERANCE, DEFAULT_SUPPORT_RATIO, SupportChecker

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlannerSettings:
    """Tunable policies of the stride planner.

    Attributes:
        support_policy: How the course below must carry a brick.
        support_ratio: Carried fraction required by the OVERLAP policy.
        joint_tolerance: Widest bridged gap for the CONTINUOUS policy (mm).
        candidate_scope: Which bricks seed candidate envelope positions.
        dimensions: Brick geometry; its height bounds vertical containment.
    """

    support_policy: SupportPolicy = SupportPolicy.OVERLAP
    support_ratio: float = DEFAULT_SUPPORT_RATIO
    joint_tolerance: float = DEFAULT_JOINT_TOLERANCE
    candidate_scope: CandidateScope = CandidateScope.FRONTIER
    dimensions: BrickDimensions = field(default_factory=BrickDimensions)

    def __post_init__(self) -> None:
        if not 0 < self.support_ratio <= 1:
            raise ValueError("Support ratio must be in (0, 1]")
        if self.joint_tolerance < 0:
            raise ValueError("Joint tolerance must be non-negative")


@dataclass
class _Candidate:
    envelope: Envelope
    bricks: list[Brick]


@dataclass
class _PlanState:
    """Working set owned by one planning run."""

    uncommitted: list[Brick]
    committed_ids: set[str] = field(default_factory=set)
    strides: list[Stride] = field(default_factory=list)
    placements: dict[str, PlacementRecord] = field(default_factory=dict)

    @property
    def done(self) -> bool:
        return not self.uncommitted


class StridePlanner:
    """Partitions a brick layout into an ordered sequence of strides."""

    def __init__(self, settings: PlannerSettings | None = None) -> None:
        self.settings = settings or PlannerSettings()

    def plan(
        self,
        bricks: Sequence[Brick],
        envelope_width: float,
        envelope_height: float,
        wall_width: float,
    ) -> StridePlan:
        """Plan the build sequence for a brick layout.

        Args:
            bricks: Complete brick layout (typically from the generator).
            envelope_width: Robot reach width in mm.
            envelope_height: Robot reach height in mm.
            wall_width: Wall width in mm, used to clamp envelope positions.

        Returns:
            StridePlan whose strides cover every brick exactly once. Empty
            when there are no bricks or any dimension is not positive.

        Envelopes always keep the full envelope width. When the envelope is
        wider than the wall it is pinned to x = 0 and extends past the
        wall's right edge.
        """
        if not bricks or min(envelope_width, envelope_height, wall_width) <= 0:
            return StridePlan()

        checker = SupportChecker(
            bricks,
            policy=self.settings.support_policy,
            support_ratio=self.settings.support_ratio,
            joint_tolerance=self.settings.joint_tolerance,
        )
        state = _PlanState(uncommitted=list(bricks))

        while not state.done:
            bottom_y = min(brick.y for brick in state.uncommitted)
            best: _Candidate | None = None
            for x in self._candidate_positions(state, bottom_y, envelope_width, wall_width):
                candidate = self._evaluate(
                    state,
                    checker,
                    Envelope.at(x, bottom_y, envelope_width, envelope_height),
                )
                if best is None or len(candidate.bricks) > len(best.bricks):
                    best = candidate

            if best is not None and best.bricks:
                self._commit(state, best, forced=False)
            else:
                self._commit(
                    state,
                    self._fallback(state, envelope_width, envelope_height, wall_width),
                    forced=True,
                )

        logger.debug(
            "Planned %d bricks in %d strides", len(state.placements), len(state.strides)
        )
        return StridePlan(
            strides=tuple(state.strides),
            placements=MappingProxyType(dict(state.placements)),
        )

    def _candidate_positions(
        self,
        state: _PlanState,
        bottom_y: float,
        envelope_width: float,
        wall_width: float,
    ) -> list[float]:
        """Clamped, de-duplicated envelope left edges in ascending order."""
        if self.settings.candidate_scope is CandidateScope.ALL:
            seeds = state.uncommitted
        else:
            seeds = [brick for brick in state.uncommitted if brick.y == bottom_y]

        positions: set[float] = set()
        for brick in seeds:
            positions.add(_clamp(brick.x, envelope_width, wall_width))
            positions.add(_clamp(brick.right - envelope_width, envelope_width, wall_width))
        return sorted(positions)

    def _evaluate(
        self, state: _PlanState, checker: SupportChecker, envelope: Envelope
    ) -> _Candidate:
        """Tentatively build a stride from one envelope position."""
        height = self.settings.dimensions.height
        reachable = sorted(
            (brick for brick in state.uncommitted if envelope.contains(brick, height)),
            key=lambda b: (b.y, b.x),
        )
        laid = set(state.committed_ids)
        admitted: list[Brick] = []
        for brick in reachable:
            if checker.is_supported(brick, laid):
                admitted.append(brick)
                laid.add(brick.id)
        return _Candidate(envelope=envelope, bricks=admitted)

    def _fallback(
        self,
        state: _PlanState,
        envelope_width: float,
        envelope_height: float,
        wall_width: float,
    ) -> _Candidate:
        lowest = min(state.uncommitted, key=lambda b: (b.y, b.x))
        logger.warning(
            "No supported brick reachable; forcing %s into a stride on its own",
            lowest.id,
        )
        envelope = Envelope.at(
            _clamp(lowest.x, envelope_width, wall_width),
            lowest.y,
            envelope_width,
            envelope_height,
        )
        return _Candidate(envelope=envelope, bricks=[lowest])

    def _commit(self, state: _PlanState, candidate: _Candidate, forced: bool) -> None:
        index = len(state.strides)
        ordered = sorted(candidate.bricks, key=lambda b: (b.course, b.x))
        for order, brick in enumerate(ordered):
            state.placements[brick.id] = PlacementRecord(
                brick_id=brick.id, stride_index=index, order_in_stride=order
            )
            state.committed_ids.add(brick.id)
        state.uncommitted = [
            brick for brick in state.uncommitted if brick.id not in state.committed_ids
        ]
        state.strides.append(
            Stride(
                index=index,
                envelope=candidate.envelope,
                bricks=tuple(ordered),
                forced=forced,
            )
        )
        logger.debug(
            "Stride %d: %d bricks from x=%.1f, y=%.1f",
            index,
            len(ordered),
            candidate.envelope.min_x,
            candidate.envelope.min_y,
        )


def _clamp(x: float, envelope_width: float, wall_width: float) -> float:
    """Keep an envelope left edge within [0, wall_width - envelope_width].

    The lower bound wins when the envelope is wider than the wall.
    """
    return max(0.0, min(x, wall_width - envelope_width))


def plan_strides(
    bricks: Sequence[Brick],
    envelope_width: float,
    envelope_height: float,
    wall_width: float,
    settings: PlannerSettings | None = None,
) -> StridePlan:
    """Plan strides for a brick layout (functional entry point)."""
    return StridePlanner(settings).plan(bricks, envelope_width, envelope_height, wall_width)
