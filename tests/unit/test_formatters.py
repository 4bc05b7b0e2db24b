"""Unit tests for plan formatters and the JSON exporter."""

import json
from pathlib import Path

import pytest

from masonry.application import EnvelopeInput, PlanOutput, PlanWallCommand, WallInput
from masonry.domain import StridePlan
from masonry.infrastructure import (
    BrickListFormatter,
    PlanJsonExporter,
    StrideSummaryFormatter,
)


@pytest.fixture
def output() -> PlanOutput:
    return PlanWallCommand().execute(WallInput(2300.0, 500.0), EnvelopeInput())


@pytest.fixture
def forced_output() -> PlanOutput:
    return PlanWallCommand().execute(
        WallInput(2300.0, 130.0), EnvelopeInput(width=150.0, height=1300.0)
    )


# =============================================================================
# Stride summary
# =============================================================================


class TestStrideSummaryFormatter:
    """Tests for StrideSummaryFormatter."""

    def test_one_row_per_stride(self, output: PlanOutput) -> None:
        text = StrideSummaryFormatter().format(output)
        lines = text.splitlines()

        assert lines[0] == "STRIDE PLAN"
        assert lines[1] == "=" * 70
        assert lines[-1] == (
            f"{output.plan.stride_count} strides, {output.plan.brick_count} bricks"
        )
        # header block (4 lines) + rows + rule + total
        assert len(lines) == 4 + output.plan.stride_count + 2

    def test_forced_strides_flagged_and_warned(self, forced_output: PlanOutput) -> None:
        text = StrideSummaryFormatter().format(forced_output)

        assert "yes" in text
        assert "WARNINGS" in text
        assert "could not be supported" in text

    def test_errors(self) -> None:
        failed = PlanOutput(bricks=[], plan=StridePlan(), errors=["Wall width must be positive"])
        assert StrideSummaryFormatter().format(failed) == "Error: Wall width must be positive"

    def test_empty_plan(self) -> None:
        empty = PlanOutput(bricks=[], plan=StridePlan())
        assert StrideSummaryFormatter().format(empty) == "No bricks to plan."


# =============================================================================
# Brick list
# =============================================================================


class TestBrickListFormatter:
    """Tests for BrickListFormatter."""

    def test_layout_rows(self, output: PlanOutput) -> None:
        text = BrickListFormatter().format(output.bricks)

        assert text.startswith("BRICK LAYOUT")
        assert "brick-0-0" in text
        assert text.splitlines()[-1] == f"{len(output.bricks)} bricks"

    def test_build_order_rows(self, output: PlanOutput) -> None:
        text = BrickListFormatter().format(output.bricks, output.plan)
        lines = text.splitlines()

        assert lines[0] == "BUILD ORDER"
        first_row = lines[4].split()
        assert first_row[:3] == ["0", "0", "brick-0-0"]
        assert lines[-1] == (
            f"{len(output.bricks)} bricks in {output.plan.stride_count} strides"
        )

    def test_empty(self) -> None:
        assert BrickListFormatter().format([]) == "No bricks in layout."


# =============================================================================
# JSON export
# =============================================================================


class TestPlanJsonExporter:
    """Tests for PlanJsonExporter."""

    def test_structure(self, output: PlanOutput) -> None:
        data = json.loads(PlanJsonExporter().export_string(output))

        assert data["schema_version"] == "1.0"
        assert data["wall"] == {"width": 2300.0, "height": 500.0, "bond": "stretcher"}
        assert data["envelope"] == {"width": 800.0, "height": 1300.0}
        assert len(data["strides"]) == output.plan.stride_count
        assert set(data["envelopes"]) == {str(s.index) for s in output.plan.strides}
        assert len(data["bricks"]) == len(output.bricks)
        assert data["warnings"] == []

    def test_stride_entries(self, output: PlanOutput) -> None:
        data = PlanJsonExporter().format(output)
        stride = data["strides"][0]

        assert stride["index"] == 0
        assert stride["envelope"]["min_y"] == 0.0
        assert stride["forced"] is False
        assert stride["bricks"][0] == "brick-0-0"

    def test_brick_entries_carry_placement(self, output: PlanOutput) -> None:
        data = PlanJsonExporter().format(output)
        first = data["bricks"][0]

        assert first["id"] == "brick-0-0"
        assert first["type"] == "full"
        assert first["course"] == 0
        assert first["length"] == 210.0
        assert first["stride_index"] == 0
        assert first["order_in_stride"] == 0

    def test_errors_only(self) -> None:
        failed = PlanOutput(bricks=[], plan=StridePlan(), errors=["bad"])
        assert PlanJsonExporter().format(failed) == {"errors": ["bad"]}

    def test_export_writes_file(self, output: PlanOutput, tmp_path: Path) -> None:
        path = tmp_path / "plan.json"
        PlanJsonExporter(indent=4).export(output, path)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert len(data["bricks"]) == len(output.bricks)
