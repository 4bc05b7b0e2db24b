"""Pydantic models for wall planning configuration files.

The root model, ``MasonryConfiguration``, mirrors the JSON layout:

    {
      "schema_version": "1.0",
      "wall": {"width": 2300, "height": 2000, "bond": "stretcher"},
      "brick": {...}, "joints": {...}, "envelope": {...},
      "planner": {...}, "output": {...}
    }

Only ``wall.width`` and ``wall.height`` are required; every other value
defaults to the standard brick and robot dimensions.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from masonry.domain.value_objects import BondType, CandidateScope, SupportPolicy

# Supported schema versions for configuration files
# Version 1.0: Initial schema with wall, brick, joint, envelope and planner settings
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

OutputFormat = Literal["summary", "bricks", "json"]


class WallConfig(BaseModel):
    """Wall to be built.

    Attributes:
        width: Wall width in mm
        height: Wall height in mm
        bond: Bond pattern to lay
    """

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., gt=0, le=100_000.0)
    height: float = Field(..., gt=0, le=20_000.0)
    bond: BondType = BondType.STRETCHER


class BrickConfig(BaseModel):
    """Brick geometry in mm."""

    model_config = ConfigDict(extra="forbid")

    full_length: float = Field(default=210.0, gt=0)
    half_length: float = Field(default=100.0, gt=0)
    height: float = Field(default=50.0, gt=0)
    queen_closer_length: float = Field(default=40.0, gt=0)
    flemish_closer_length: float = Field(default=45.0, gt=0)

    @model_validator(mode="after")
    def validate_piece_lengths(self) -> "BrickConfig":
        """Closers must be shorter than a half brick, halves than a full."""
        if self.half_length >= self.full_length:
            raise ValueError("half_length must be shorter than full_length")
        for name in ("queen_closer_length", "flemish_closer_length"):
            if getattr(self, name) >= self.half_length:
                raise ValueError(f"{name} must be shorter than half_length")
        return self


class JointConfig(BaseModel):
    """Mortar joint sizes in mm."""

    model_config = ConfigDict(extra="forbid")

    head: float = Field(default=10.0, ge=0, le=50.0)
    bed: float = Field(default=12.5, ge=0, le=50.0)


class EnvelopeConfig(BaseModel):
    """Robot reach envelope in mm."""

    model_config = ConfigDict(extra="forbid")

    width: float = Field(default=800.0, gt=0)
    height: float = Field(default=1300.0, gt=0)


class PlannerConfig(BaseModel):
    """Stride planner policies.

    Attributes:
        support_policy: "overlap" (ratio of carried length) or "continuous"
            (unbroken coverage within the joint tolerance)
        support_ratio: Required carried fraction for the overlap policy
        joint_tolerance: Widest gap bridged by the continuous policy, in mm
        candidate_scope: "frontier" (lowest open course) or "all" bricks
            seed envelope positions
    """

    model_config = ConfigDict(extra="forbid")

    support_policy: SupportPolicy = SupportPolicy.OVERLAP
    support_ratio: float = Field(default=0.9, gt=0, le=1.0)
    joint_tolerance: float = Field(default=10.0, ge=0)
    candidate_scope: CandidateScope = CandidateScope.FRONTIER


class OutputConfig(BaseModel):
    """Output settings.

    Attributes:
        format: "summary" (one row per stride), "bricks" (one row per brick)
            or "json"
        file: Optional path the report is written to instead of stdout
    """

    model_config = ConfigDict(extra="forbid")

    format: OutputFormat = "summary"
    file: str | None = None


class MasonryConfiguration(BaseModel):
    """Root configuration model for a wall planning run."""

    model_config = ConfigDict(extra="forbid")

    schema_version: str = "1.0"
    wall: WallConfig
    brick: BrickConfig = Field(default_factory=BrickConfig)
    joints: JointConfig = Field(default_factory=JointConfig)
    envelope: EnvelopeConfig = Field(default_factory=EnvelopeConfig)
    planner: PlannerConfig = Field(default_factory=PlannerConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_schema_version(cls, v: str) -> str:
        """Reject configuration files written for an unknown schema."""
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version '{v}'. Supported versions: {supported}"
            )
        return v
