"""Configuration schema and loading for wall planning runs.

Public API:
    - MasonryConfiguration: Root configuration model
    - load_config / load_config_from_dict: Load and validate a configuration
    - ConfigError: Exception for configuration errors
    - merge_config_with_cli: Apply CLI overrides to a configuration
    - validate_config: Planning advisory checks
    - config_to_dtos / config_to_dimensions / config_to_planner_settings:
      Convert a configuration to application and domain objects

Example:
    >>> from pathlib import Path
    >>> from masonry.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("wall.json"))
    ...     print(f"Wall: {config.wall.width}x{config.wall.height}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from masonry.application.config.adapter import (
    config_to_dimensions,
    config_to_dtos,
    config_to_planner_settings,
)
from masonry.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from masonry.application.config.merger import merge_config_with_cli
from masonry.application.config.schema import (
    SUPPORTED_VERSIONS,
    BrickConfig,
    EnvelopeConfig,
    JointConfig,
    MasonryConfiguration,
    OutputConfig,
    PlannerConfig,
    WallConfig,
)
from masonry.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "BrickConfig",
    "ConfigError",
    "EnvelopeConfig",
    "JointConfig",
    "MasonryConfiguration",
    "OutputConfig",
    "PlannerConfig",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "WallConfig",
    "config_to_dimensions",
    "config_to_dtos",
    "config_to_planner_settings",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
    "validate_config",
]
