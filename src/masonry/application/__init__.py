"""Application layer - use cases and orchestration."""

from .commands import PlanWallCommand
from .dtos import EnvelopeInput, PlanOutput, WallInput

__all__ = [
    "EnvelopeInput",
    "PlanOutput",
    "PlanWallCommand",
    "WallInput",
]
