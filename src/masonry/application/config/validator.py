"""Validation structures and planning advisory checks.

Pydantic handles structural validation when a configuration is loaded.
The checks here look at how the values combine: an envelope that can
never contain a brick is an error, while geometry that produces forced
strides or trivial plans is reported as a warning.
"""

from dataclasses import dataclass, field
from typing import Any

from masonry.application.config.schema import MasonryConfiguration


@dataclass
class ValidationError:
    """Represents a blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "envelope.height")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """Represents a non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def check_envelope_advisories(config: MasonryConfiguration) -> ValidationResult:
    """Check the robot envelope against the brick and the wall.

    Advisories checked:
    - Envelope lower than a brick (error: no brick is ever contained)
    - Envelope narrower than a full brick (full bricks get force-placed)
    - Envelope wider than the wall (each stride takes whole courses)
    """
    result = ValidationResult()
    envelope = config.envelope
    brick = config.brick

    if envelope.height < brick.height:
        result.add_error(
            path="envelope.height",
            message=(
                f"Envelope height of {envelope.height:g}mm is below the brick "
                f"height of {brick.height:g}mm; no brick can be reached"
            ),
            value=envelope.height,
        )

    if envelope.width < brick.full_length:
        result.add_warning(
            path="envelope.width",
            message=(
                f"Envelope width of {envelope.width:g}mm is narrower than a "
                f"full brick ({brick.full_length:g}mm)"
            ),
            suggestion="Full bricks will be placed one per stride without a reach check",
        )

    if envelope.width > config.wall.width:
        result.add_warning(
            path="envelope.width",
            message=(
                f"Envelope width of {envelope.width:g}mm exceeds the wall width "
                f"of {config.wall.width:g}mm"
            ),
            suggestion="Every stride will span whole courses",
        )

    return result


def check_wall_advisories(config: MasonryConfiguration) -> ValidationResult:
    """Check that the wall is large enough to produce a meaningful layout."""
    result = ValidationResult()
    wall = config.wall
    course_height = config.brick.height + config.joints.bed

    if wall.width < config.brick.full_length:
        result.add_warning(
            path="wall.width",
            message=(
                f"Wall width of {wall.width:g}mm is narrower than a full brick "
                f"({config.brick.full_length:g}mm)"
            ),
            suggestion="Each course will be a single brick cut to the wall width",
        )

    if wall.height < course_height:
        result.add_warning(
            path="wall.height",
            message=(
                f"Wall height of {wall.height:g}mm is lower than one course "
                f"({course_height:g}mm)"
            ),
            suggestion="The layout will be empty",
        )

    return result


def validate_config(config: MasonryConfiguration) -> ValidationResult:
    """Perform full validation of a masonry configuration.

    Args:
        config: A MasonryConfiguration instance (already validated by pydantic)

    Returns:
        ValidationResult containing any errors or warnings
    """
    result = ValidationResult()
    result.merge(check_envelope_advisories(config))
    result.merge(check_wall_advisories(config))
    return result
