"""Merging of CLI options over configuration file values.

Precedence: CLI args > config values > defaults. Only CLI arguments that
are not None override the configuration.
"""

from typing import Any

from masonry.application.config.loader import load_config_from_dict
from masonry.application.config.schema import MasonryConfiguration


def merge_config_with_cli(
    config: MasonryConfiguration,
    *,
    width: float | None = None,
    height: float | None = None,
    bond: str | None = None,
    envelope_width: float | None = None,
    envelope_height: float | None = None,
    support_policy: str | None = None,
    candidate_scope: str | None = None,
    output_format: str | None = None,
    output_file: str | None = None,
) -> MasonryConfiguration:
    """Merge CLI arguments with configuration values.

    Returns:
        A new, re-validated MasonryConfiguration; the input is not modified.

    Raises:
        ConfigError: If an override produces an invalid configuration.

    Example:
        >>> merged = merge_config_with_cli(config, envelope_width=1000.0)
        >>> merged.envelope.width
        1000.0
    """
    data = config.model_dump(mode="json")

    _override(data["wall"], "width", width)
    _override(data["wall"], "height", height)
    _override(data["wall"], "bond", bond)
    _override(data["envelope"], "width", envelope_width)
    _override(data["envelope"], "height", envelope_height)
    _override(data["planner"], "support_policy", support_policy)
    _override(data["planner"], "candidate_scope", candidate_scope)
    _override(data["output"], "format", output_format)
    _override(data["output"], "file", output_file)

    return load_config_from_dict(data)


def _override(section: dict[str, Any], key: str, value: Any) -> None:
    if value is not None:
        section[key] = value
