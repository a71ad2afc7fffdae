# src/elmtestfeed/cli/main.py

"""
Main CLI entry point for elmtestfeed using Click.
Handles global options like logging level.
"""

from importlib.metadata import PackageNotFoundError, version

import click
import structlog

from elmtestfeed.cli.config_cmds import config_cli
from elmtestfeed.cli.convert_cmds import convert_cli
from elmtestfeed.cli.run_cmds import run_cli
from elmtestfeed.cli.utils import logging_options, setup_logging_from_context
from elmtestfeed.telemetry import StructLogger

try:
    __version__ = version("elmtestfeed")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

log: StructLogger = structlog.get_logger("cli.main")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", package_name="elmtestfeed")
@logging_options
@click.pass_context
def cli(
    ctx: click.Context,
    log_level: str | None,
    log_file: str | None,
    json_logs: bool | None,
):
    """
    Elmtestfeed: elm-test report to test-tree deltas.

    Reads elm-test's JSON report line by line and emits suite and test
    start/finish/failure notifications for a live results tree.

    Settings come from an optional TOML file (-c, or ELMTESTFEED_CONF).
    ELMTESTFEED_LOG_LEVEL and ELMTESTFEED_OUTPUT_FORMAT override the file,
    and command options such as --log-level and --format override both.
    """
    ctx.ensure_object(dict)
    ctx.obj.update(
        LOG_LEVEL=log_level,
        LOG_FILE=log_file,
        JSON_LOGS=bool(json_logs),
    )

    setup_logging_from_context(ctx, default_log_level="WARNING")
    log.debug(
        "Main CLI group initialized",
        log_level=log_level,
        log_file=log_file,
        json_logs=json_logs,
    )


cli.add_command(config_cli)
cli.add_command(convert_cli)
cli.add_command(run_cli)

if __name__ == "__main__":
    cli()

# 🖥️⚙️
