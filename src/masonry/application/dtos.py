"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from masonry.domain import BondType, Brick, StridePlan


@dataclass
class WallInput:
    """Input DTO for the wall to be built."""

    width: float
    height: float
    bond_type: str = BondType.STRETCHER.value

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if self.width <= 0:
            errors.append("Wall width must be positive")
        if self.height <= 0:
            errors.append("Wall height must be positive")
        valid_bonds = [b.value for b in BondType]
        if self.bond_type not in valid_bonds:
            errors.append(f"Bond type must be one of: {', '.join(valid_bonds)}")
        return errors


@dataclass
class EnvelopeInput:
    """Input DTO for the robot reach envelope."""

    width: float = 800.0
    height: float = 1300.0

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if self.width <= 0:
            errors.append("Envelope width must be positive")
        if self.height <= 0:
            errors.append("Envelope height must be positive")
        return errors


@dataclass
class PlanOutput:
    """Output DTO containing the generated layout and its stride plan.

    Attributes:
        bricks: Brick layout in generation order.
        plan: Stride plan covering every brick.
        wall: The wall input the layout was generated for.
        envelope: The envelope input the plan was computed with.
        errors: Blocking input errors; bricks and plan are empty when set.
        warnings: Non-fatal diagnostics such as force-placed bricks.
    """

    bricks: list[Brick]
    plan: StridePlan
    wall: WallInput | None = None
    envelope: EnvelopeInput | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the plan was generated successfully."""
        return len(self.errors) == 0
