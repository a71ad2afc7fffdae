# src/elmtestfeed/cli/run_cmds.py

import asyncio
import logging
import sys
from pathlib import Path

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
from elmtestfeed.config import FeedConfig
from elmtestfeed.exceptions import ElmTestFeedError
from elmtestfeed.telemetry import StructLogger
from elmtestfeed.testing import get_report_runner

log: StructLogger = structlog.get_logger("cli.run")


def _run_report_stream(config: FeedConfig, session: FeedSession) -> int:
    """
    Runs the configured test command, rendering deltas as report lines arrive.

    Returns the runner's exit code, 130 on CTRL-C, 1 if the runner failed, or 2
    for any other error.
    """
    try:
        runner = get_report_runner(config.runner.runner)
        result = asyncio.run(
            runner.stream(config.runner.command, config.runner.working_dir, session.echo_line)
        )
    except KeyboardInterrupt:
        log.warning("Shutdown initiated by KeyboardInterrupt (CTRL-C).")
        return 130
    except ElmTestFeedError as e:
        log.error("Test runner failed", error=str(e))
        click.echo(f"Error: {e}", err=True)
        return 1
    except Exception as e:
        log.critical("An unexpected error occurred during 'run'", error=str(e), exc_info=True)
        click.echo(f"Error: An unexpected issue occurred: {e}", err=True)
        return 2
    finally:
        logging.shutdown()

    if not result.success and result.stderr:
        click.echo(result.stderr.rstrip("\n"), err=True)
    return result.exit_code


@click.command(
    name="run",
    context_settings={"ignore_unknown_options": True},
)
@config_option
@output_options
@click.option(
    "-C",
    "--working-dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Directory to run the test command in.",
)
@logging_options
@click.argument("command", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def run_cli(
    ctx: click.Context,
    config_path: Path | None,
    output_format: str | None,
    color: bool | None,
    working_dir: Path | None,
    command: tuple[str, ...],
    **kwargs,
):
    """Run the test command and stream its report as tree deltas.

    Pass the command after '--' to override the configured one, e.g.
    'elmtestfeed run -- npx elm-test --report json'.
    """
    config = load_config_or_exit(ctx, config_path)
    setup_logging_from_context(
        ctx,
        local_log_level=kwargs.get("log_level"),
        local_log_file=kwargs.get("log_file"),
        local_json_logs=kwargs.get("json_logs"),
        default_log_level=config.global_config.log_level,
    )

    runner_overrides = {
        key: value
        for key, value in (("command", command or None), ("working_dir", working_dir))
        if value is not None
    }
    output_overrides = {
        key: value
        for key, value in (("format", output_format), ("color", color))
        if value is not None
    }
    config = attrs.evolve(
        config,
        runner=attrs.evolve(config.runner, **runner_overrides),
        output=attrs.evolve(config.output, **output_overrides),
    )

    session = FeedSession.from_config(config)
    exit_code = _run_report_stream(config, session)

    if config.output.format == "text":
        click.echo(session.summary())
    if exit_code != 0:
        sys.exit(exit_code)

# 🔼⚙️
