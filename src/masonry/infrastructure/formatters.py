"""Output formatters and exporters for brick layouts and stride plans."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from masonry.application.dtos import PlanOutput
from masonry.domain import Brick, Stride, StridePlan

logger = logging.getLogger(__name__)

# Current schema version for JSON plan output
SCHEMA_VERSION = "1.0"


def _course_range(stride: Stride) -> str:
    courses = stride.courses
    if not courses:
        return "-"
    if courses[0] == courses[-1]:
        return str(courses[0])
    return f"{courses[0]}-{courses[-1]}"


class StrideSummaryFormatter:
    """Formats a stride plan as one row per stride."""

    def format(self, output: PlanOutput) -> str:
        """Format the plan as a table, followed by any warnings."""
        if not output.is_valid:
            return "\n".join(f"Error: {error}" for error in output.errors)

        plan = output.plan
        if not plan.strides:
            return "No bricks to plan."

        lines = [
            "STRIDE PLAN",
            "=" * 70,
            f"{'Stride':<8} {'Envelope x':<20} {'Envelope y':<20} "
            f"{'Bricks':<8} {'Courses':<8} {'Forced'}",
            "-" * 70,
        ]
        for stride in plan.strides:
            env = stride.envelope
            x_span = f"{env.min_x:.1f}-{env.max_x:.1f}"
            y_span = f"{env.min_y:.1f}-{env.max_y:.1f}"
            lines.append(
                f"{stride.index:<8} {x_span:<20} {y_span:<20} "
                f"{len(stride):<8} {_course_range(stride):<8} "
                f"{'yes' if stride.forced else ''}"
            )
        lines.append("-" * 70)
        lines.append(
            f"{plan.stride_count} strides, {plan.brick_count} bricks"
        )

        if output.warnings:
            lines.append("")
            lines.append("WARNINGS")
            lines.extend(f"  - {warning}" for warning in output.warnings)

        return "\n".join(lines)


class BrickListFormatter:
    """Formats bricks as one row each.

    With a plan the rows follow build order and carry the stride and the
    position within it; without one they follow generation order.
    """

    def format(self, bricks: list[Brick], plan: StridePlan | None = None) -> str:
        if not bricks:
            return "No bricks in layout."

        if plan is None:
            return self._format_layout(bricks)
        return self._format_build_order(plan)

    def _format_layout(self, bricks: list[Brick]) -> str:
        lines = [
            "BRICK LAYOUT",
            "=" * 70,
            f"{'Brick':<16} {'Type':<16} {'Course':<8} {'X':<10} {'Y':<10} {'Length'}",
            "-" * 70,
        ]
        for brick in bricks:
            lines.append(
                f"{brick.id:<16} {brick.brick_type.value:<16} {brick.course:<8} "
                f"{brick.x:<10.1f} {brick.y:<10.1f} {brick.length:.1f}"
            )
        lines.append("-" * 70)
        lines.append(f"{len(bricks)} bricks")
        return "\n".join(lines)

    def _format_build_order(self, plan: StridePlan) -> str:
        lines = [
            "BUILD ORDER",
            "=" * 70,
            f"{'Stride':<8} {'Order':<6} {'Brick':<16} {'Type':<16} "
            f"{'X':<10} {'Y':<10}",
            "-" * 70,
        ]
        placed = plan.placed_bricks()
        for entry in placed:
            lines.append(
                f"{entry.stride_index:<8} {entry.order_in_stride:<6} {entry.id:<16} "
                f"{entry.brick_type.value:<16} {entry.x:<10.1f} {entry.y:<10.1f}"
            )
        lines.append("-" * 70)
        lines.append(f"{len(placed)} bricks in {plan.stride_count} strides")
        return "\n".join(lines)


class PlanJsonExporter:
    """Exports a planned wall as JSON.

    The document holds the wall and envelope inputs, every stride with its
    envelope and brick ids, a stride-index to envelope mapping, and every
    brick with its placement record.
    """

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def format(self, output: PlanOutput) -> dict[str, Any]:
        """Build the JSON-ready structure for a plan output."""
        if not output.is_valid:
            return {"errors": list(output.errors)}

        plan = output.plan
        data: dict[str, Any] = {"schema_version": SCHEMA_VERSION}
        if output.wall is not None:
            data["wall"] = {
                "width": output.wall.width,
                "height": output.wall.height,
                "bond": output.wall.bond_type,
            }
        if output.envelope is not None:
            data["envelope"] = {
                "width": output.envelope.width,
                "height": output.envelope.height,
            }
        data["strides"] = [
            {
                "index": stride.index,
                "envelope": stride.envelope.to_dict(),
                "forced": stride.forced,
                "bricks": [brick.id for brick in stride.bricks],
            }
            for stride in plan.strides
        ]
        data["envelopes"] = {
            str(index): envelope.to_dict() for index, envelope in plan.envelopes.items()
        }
        data["bricks"] = [self._format_brick(brick, plan) for brick in output.bricks]
        data["warnings"] = list(output.warnings)
        return data

    def export_string(self, output: PlanOutput) -> str:
        return json.dumps(self.format(output), indent=self.indent)

    def export(self, output: PlanOutput, path: Path) -> None:
        """Write the JSON document to a file."""
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.info("Exported stride plan JSON to %s", path)

    def _format_brick(self, brick: Brick, plan: StridePlan) -> dict[str, Any]:
        record = plan.placement_for(brick.id)
        return {
            "id": brick.id,
            "type": brick.brick_type.value,
            "course": brick.course,
            "x": brick.x,
            "y": brick.y,
            "length": brick.length,
            "stride_index": record.stride_index if record else None,
            "order_in_stride": record.order_in_stride if record else None,
        }
