"""Typer CLI for brick layouts and robot build sequences."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from masonry.application import PlanOutput, PlanWallCommand
from masonry.application.config import (
    ConfigError,
    MasonryConfiguration,
    config_to_dimensions,
    config_to_dtos,
    config_to_planner_settings,
    load_config,
    load_config_from_dict,
    merge_config_with_cli,
    validate_config,
)
from masonry.domain import BondLayoutGenerator, BondType
from masonry.infrastructure import (
    BrickListFormatter,
    PlanJsonExporter,
    StrideSummaryFormatter,
)
from masonry.cli.commands import validate_command


app = typer.Typer(
    name="masonry",
    help="Lay out brick bonds and plan the build sequence of a bricklaying robot.",
)

# Register validate command
app.command(name="validate")(validate_command)


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _resolve_config(
    config_file: Path | None,
    width: float | None,
    height: float | None,
    **overrides,
) -> MasonryConfiguration:
    """Load the configuration file (or start from defaults) and apply CLI overrides.

    Raises:
        typer.Exit: With code 1 when the configuration cannot be built.
    """
    try:
        if config_file is not None:
            config = load_config(config_file)
        else:
            if width is None or height is None:
                typer.echo(
                    "Error: --width and --height are required when --config is not provided",
                    err=True,
                )
                raise typer.Exit(code=1)
            config = load_config_from_dict({"wall": {"width": width, "height": height}})
        config = merge_config_with_cli(config, width=width, height=height, **overrides)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    result = validate_config(config)
    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error.path}: {error.message}", err=True)
        raise typer.Exit(code=1)
    for warning in result.warnings:
        typer.echo(f"Warning: {warning.path}: {warning.message}", err=True)

    return config


def _emit(content: str, output_file: Path | None) -> None:
    if output_file is None:
        typer.echo(content)
        return
    output_file.write_text(content + "\n", encoding="utf-8")
    typer.echo(f"Written to: {output_file}")


@app.command()
def plan(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    width: Annotated[
        float | None,
        typer.Option("--width", "-w", help="Wall width in mm"),
    ] = None,
    height: Annotated[
        float | None,
        typer.Option("--height", "-h", help="Wall height in mm"),
    ] = None,
    bond: Annotated[
        str | None,
        typer.Option("--bond", "-b", help="Bond: stretcher, english_cross, flemish"),
    ] = None,
    envelope_width: Annotated[
        float | None,
        typer.Option("--envelope-width", help="Robot reach width in mm (default: 800)"),
    ] = None,
    envelope_height: Annotated[
        float | None,
        typer.Option("--envelope-height", help="Robot reach height in mm (default: 1300)"),
    ] = None,
    support_policy: Annotated[
        str | None,
        typer.Option("--support-policy", help="Support rule: overlap, continuous"),
    ] = None,
    candidate_scope: Annotated[
        str | None,
        typer.Option("--candidate-scope", help="Envelope seeds: frontier, all"),
    ] = None,
    output_format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Output format: summary, bricks, json"),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the report to a file"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log planner decisions"),
    ] = False,
) -> None:
    """Generate a bond layout and plan the strides that build it.

    You can provide dimensions via CLI options or via a JSON configuration file.
    When using --config, CLI options override config file values.

    Examples:
        masonry plan --width 2300 --height 2000
        masonry plan --width 2300 --height 2000 --bond flemish --format json
        masonry plan --config wall.json --envelope-width 1000
    """
    _configure_logging(verbose)

    config = _resolve_config(
        config_file,
        width,
        height,
        bond=bond,
        envelope_width=envelope_width,
        envelope_height=envelope_height,
        support_policy=support_policy,
        candidate_scope=candidate_scope,
        output_format=output_format,
        output_file=str(output_file) if output_file is not None else None,
    )

    wall_input, envelope_input = config_to_dtos(config)
    command = PlanWallCommand(settings=config_to_planner_settings(config))
    result = command.execute(wall_input, envelope_input)

    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    destination = Path(config.output.file) if config.output.file else None
    fmt = config.output.format
    if fmt == "json":
        _emit(PlanJsonExporter().export_string(result), destination)
    elif fmt == "bricks":
        _emit(BrickListFormatter().format(result.bricks, result.plan), destination)
        _echo_warnings(result)
    else:
        _emit(StrideSummaryFormatter().format(result), destination)


def _echo_warnings(result: PlanOutput) -> None:
    for warning in result.warnings:
        typer.echo(f"Warning: {warning}", err=True)


@app.command()
def layout(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    width: Annotated[
        float | None,
        typer.Option("--width", "-w", help="Wall width in mm"),
    ] = None,
    height: Annotated[
        float | None,
        typer.Option("--height", "-h", help="Wall height in mm"),
    ] = None,
    bond: Annotated[
        str | None,
        typer.Option("--bond", "-b", help="Bond: stretcher, english_cross, flemish"),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the brick list to a file"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log layout decisions"),
    ] = False,
) -> None:
    """Generate the bond layout only and print the brick list.

    Examples:
        masonry layout --width 2300 --height 2000 --bond english_cross
    """
    _configure_logging(verbose)

    config = _resolve_config(config_file, width, height, bond=bond)

    generator = BondLayoutGenerator(config_to_dimensions(config))
    bricks = generator.generate(
        BondType(config.wall.bond), config.wall.width, config.wall.height
    )
    _emit(BrickListFormatter().format(bricks), output_file)


if __name__ == "__main__":
    app()
