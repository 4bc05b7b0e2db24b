"""Domain services: layout generation, support testing and stride planning."""

from .bond_layout import BOND_PATTERNS, BondLayoutGenerator, brick_id, generate_brick_layout
from .stride_planner import PlannerSettings, StridePlanner, plan_strides
from .support import (
    DEFAULT_JOINT_TOLERANCE,
    DEFAULT_SUPPORT_RATIO,
    SupportChecker,
    is_supported,
)

__all__ = [
    "BOND_PATTERNS",
    "BondLayoutGenerator",
    "DEFAULT_JOINT_TOLERANCE",
    "DEFAULT_SUPPORT_RATIO",
    "PlannerSettings",
    "StridePlanner",
    "SupportChecker",
    "brick_id",
    "generate_brick_layout",
    "is_supported",
    "plan_strides",
]
