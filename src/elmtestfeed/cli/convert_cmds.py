# src/elmtestfeed/cli/convert_cmds.py

from pathlib import Path
from typing import TextIO

import attrs
import click
import structlog

from elmtestfeed.cli.utils import (
    FeedSession,
    config_option,
    load_config_or_exit,
    logging_options,
    output_options,
    setup_logging_from_context,
)
from elmtestfeed.telemetry import StructLogger

log: StructLogger = structlog.get_logger("cli.convert")


@click.command(name="convert")
@click.argument("input_file", type=click.File("r", encoding="utf-8"), default="-")
@config_option
@output_options
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Exit with status 1 if any non-empty line is not a run event.",
)
@logging_options
@click.pass_context
def convert_cli(
    ctx: click.Context,
    input_file: TextIO,
    config_path: Path | None,
    output_format: str | None,
    color: bool | None,
    strict: bool | None,
    **kwargs,
):
    """Convert a saved elm-test JSON report (or stdin) into tree deltas."""
    config = load_config_or_exit(ctx, config_path)
    setup_logging_from_context(
        ctx,
        local_log_level=kwargs.get("log_level"),
        local_log_file=kwargs.get("log_file"),
        local_json_logs=kwargs.get("json_logs"),
        default_log_level=config.global_config.log_level,
    )

    output = config.output
    overrides = {
        key: value
        for key, value in (("format", output_format), ("color", color), ("strict", strict))
        if value is not None
    }
    output = attrs.evolve(output, **overrides)
    config = attrs.evolve(config, output=output)

    log.info("Converting report", source=input_file.name, format=output.format)
    session = FeedSession.from_config(config)
    try:
        for line in input_file:
            session.echo_line(line.rstrip("\r\n"))
    except Exception as e:
        log.critical("An unexpected error occurred during 'convert'", error=str(e), exc_info=True)
        click.echo(f"Error: An unexpected issue occurred: {e}", err=True)
        ctx.exit(2)

    if output.format == "text":
        click.echo(session.summary())

    if output.strict and session.skipped_lines:
        log.warning("Report contained lines that are not run events", count=session.skipped_lines)
        click.echo(
            f"Error: {session.skipped_lines} line(s) were not run events.",
            err=True,
        )
        ctx.exit(1)

# 🔼⚙️
