"""Application commands (use cases) for wall planning."""

from __future__ import annotations

import logging

from masonry.domain import (
    BondLayoutGenerator,
    BondType,
    PlannerSettings,
    StridePlan,
    StridePlanner,
)

from .dtos import EnvelopeInput, PlanOutput, WallInput

logger = logging.getLogger(__name__)


class PlanWallCommand:
    """Command to lay out a wall and plan its build sequence.

    Generates the brick set once, runs the stride planner once, and turns
    force-placed bricks into warnings for the caller.
    """

    def __init__(
        self,
        settings: PlannerSettings | None = None,
        layout_generator: BondLayoutGenerator | None = None,
        stride_planner: StridePlanner | None = None,
    ) -> None:
        self.settings = settings or PlannerSettings()
        self.layout_generator = layout_generator or BondLayoutGenerator(
            self.settings.dimensions
        )
        self.stride_planner = stride_planner or StridePlanner(self.settings)

    def execute(self, wall_input: WallInput, envelope_input: EnvelopeInput) -> PlanOutput:
        """Execute the planning command.

        Args:
            wall_input: Wall dimensions and bond type.
            envelope_input: Robot reach envelope.

        Returns:
            PlanOutput with the brick layout and stride plan, or with
            errors when the inputs are invalid.
        """
        errors = wall_input.validate() + envelope_input.validate()
        if errors:
            return PlanOutput(
                bricks=[],
                plan=StridePlan(),
                wall=wall_input,
                envelope=envelope_input,
                errors=errors,
            )

        bricks = self.layout_generator.generate(
            BondType(wall_input.bond_type), wall_input.width, wall_input.height
        )
        plan = self.stride_planner.plan(
            bricks, envelope_input.width, envelope_input.height, wall_input.width
        )

        warnings: list[str] = []
        if not bricks:
            warnings.append("Wall is lower than one course; nothing to build")
        for stride in plan.strides:
            if stride.forced:
                warnings.append(
                    f"Stride {stride.index}: brick {stride.bricks[0].id} could not "
                    "be supported and was placed on its own"
                )
        if warnings:
            logger.info("Plan finished with %d warning(s)", len(warnings))

        return PlanOutput(
            bricks=bricks,
            plan=plan,
            wall=wall_input,
            envelope=envelope_input,
            warnings=warnings,
        )
