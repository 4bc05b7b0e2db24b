"""Infrastructure layer - report formatters and exporters."""

from .formatters import BrickListFormatter, PlanJsonExporter, StrideSummaryFormatter

__all__ = [
    "BrickListFormatter",
    "PlanJsonExporter",
    "StrideSummaryFormatter",
]
