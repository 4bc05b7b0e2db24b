"""Adapter to convert MasonryConfiguration into DTOs and domain objects.

The configuration schema is nested the way users write JSON; the planning
command works on flat DTOs plus a ``PlannerSettings`` value object.
"""

from masonry.application.config.schema import MasonryConfiguration
from masonry.application.dtos import EnvelopeInput, WallInput
from masonry.domain import BrickDimensions, PlannerSettings


def config_to_dtos(config: MasonryConfiguration) -> tuple[WallInput, EnvelopeInput]:
    """Convert a MasonryConfiguration to WallInput and EnvelopeInput DTOs."""
    wall_input = WallInput(
        width=config.wall.width,
        height=config.wall.height,
        bond_type=config.wall.bond.value,
    )
    envelope_input = EnvelopeInput(
        width=config.envelope.width,
        height=config.envelope.height,
    )
    return wall_input, envelope_input


def config_to_dimensions(config: MasonryConfiguration) -> BrickDimensions:
    """Build the brick and joint dimensions described by a configuration."""
    return BrickDimensions(
        full_length=config.brick.full_length,
        half_length=config.brick.half_length,
        height=config.brick.height,
        head_joint=config.joints.head,
        bed_joint=config.joints.bed,
        queen_closer_length=config.brick.queen_closer_length,
        flemish_closer_length=config.brick.flemish_closer_length,
    )


def config_to_planner_settings(config: MasonryConfiguration) -> PlannerSettings:
    """Build planner settings (policies plus dimensions) from a configuration."""
    return PlannerSettings(
        support_policy=config.planner.support_policy,
        support_ratio=config.planner.support_ratio,
        joint_tolerance=config.planner.joint_tolerance,
        candidate_scope=config.planner.candidate_scope,
        dimensions=config_to_dimensions(config),
    )
