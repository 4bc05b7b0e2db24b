"""CLI command implementations for the masonry application.

- validate: Validate a configuration file
"""

from masonry.cli.commands.validate import validate_command

__all__ = ["validate_command"]
