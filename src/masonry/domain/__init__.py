"""Domain layer - brick layouts and stride planning."""

from .entities import Brick, PlacedBrick, PlacementRecord, Stride, StridePlan
from .services import (
    BondLayoutGenerator,
    PlannerSettings,
    StridePlanner,
    SupportChecker,
    generate_brick_layout,
    is_supported,
    plan_strides,
)
from .value_objects import (
    GEOMETRY_TOLERANCE,
    BondType,
    BrickDimensions,
    BrickType,
    CandidateScope,
    Envelope,
    SupportPolicy,
)

__all__ = [
    "GEOMETRY_TOLERANCE",
    "BondLayoutGenerator",
    "BondType",
    "Brick",
    "BrickDimensions",
    "BrickType",
    "CandidateScope",
    "Envelope",
    "PlacedBrick",
    "PlacementRecord",
    "PlannerSettings",
    "Stride",
    "StridePlan",
    "StridePlanner",
    "SupportChecker",
    "SupportPolicy",
    "generate_brick_layout",
    "is_supported",
    "plan_strides",
]
