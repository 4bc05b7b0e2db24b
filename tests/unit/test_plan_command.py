"""Unit tests for PlanWallCommand and its DTOs."""

import pytest

from masonry.application import EnvelopeInput, PlanWallCommand, WallInput
from masonry.domain import CandidateScope, PlannerSettings, SupportPolicy


class TestInputValidation:
    """Tests for DTO validation."""

    def test_valid_wall_input(self) -> None:
        assert WallInput(width=2300.0, height=2000.0).validate() == []

    def test_wall_input_errors(self) -> None:
        errors = WallInput(width=0.0, height=-1.0, bond_type="herringbone").validate()
        assert "Wall width must be positive" in errors
        assert "Wall height must be positive" in errors
        assert any("Bond type must be one of" in e for e in errors)

    def test_envelope_defaults(self) -> None:
        envelope = EnvelopeInput()
        assert envelope.width == 800.0
        assert envelope.height == 1300.0
        assert envelope.validate() == []

    def test_envelope_input_errors(self) -> None:
        errors = EnvelopeInput(width=-5.0, height=0.0).validate()
        assert len(errors) == 2


class TestPlanWallCommand:
    """Tests for PlanWallCommand.execute."""

    @pytest.fixture
    def command(self) -> PlanWallCommand:
        return PlanWallCommand()

    def test_plans_every_generated_brick(self, command: PlanWallCommand) -> None:
        output = command.execute(WallInput(2300.0, 2000.0), EnvelopeInput())

        assert output.is_valid
        assert output.warnings == []
        assert output.plan.brick_count == len(output.bricks) == 352
        assert output.plan.envelopes[0].min_y == 0.0

    def test_invalid_input_returns_errors_without_planning(
        self, command: PlanWallCommand
    ) -> None:
        output = command.execute(WallInput(-1.0, 2000.0), EnvelopeInput())

        assert not output.is_valid
        assert output.bricks == []
        assert output.plan.stride_count == 0

    def test_wall_lower_than_course_warns(self, command: PlanWallCommand) -> None:
        output = command.execute(WallInput(2300.0, 40.0), EnvelopeInput())

        assert output.is_valid
        assert output.bricks == []
        assert output.warnings == ["Wall is lower than one course; nothing to build"]

    def test_forced_strides_become_warnings(self, command: PlanWallCommand) -> None:
        output = command.execute(
            WallInput(2300.0, 200.0), EnvelopeInput(width=150.0, height=1300.0)
        )

        assert output.is_valid
        assert output.warnings
        assert len(output.warnings) == len(output.plan.forced_brick_ids)
        assert all("could not be supported" in w for w in output.warnings)

    @pytest.mark.parametrize("bond", ["stretcher", "english_cross", "flemish"])
    def test_bond_types(self, command: PlanWallCommand, bond: str) -> None:
        output = command.execute(WallInput(2300.0, 1000.0, bond), EnvelopeInput())
        assert output.plan.brick_count == len(output.bricks)

    def test_settings_reach_planner(self) -> None:
        settings = PlannerSettings(
            support_policy=SupportPolicy.CONTINUOUS,
            candidate_scope=CandidateScope.ALL,
        )
        command = PlanWallCommand(settings=settings)
        assert command.stride_planner.settings is settings
        assert command.layout_generator.dimensions is settings.dimensions
