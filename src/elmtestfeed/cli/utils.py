# src/elmtestfeed/cli/utils.py

import logging
from pathlib import Path

import click
import structlog
from attrs import define, field

from elmtestfeed.config import OUTPUT_FORMATS, FeedConfig, load_config
from elmtestfeed.exceptions import ConfigurationError
from elmtestfeed.rendering import DeltaRenderer, RunTally, get_renderer
from elmtestfeed.runtime import TestEventProcessor
from elmtestfeed.telemetry.logger import setup_logging as core_setup_logging

log = structlog.get_logger("cli.utils")

LOG_LEVEL_CHOICES = click.Choice(list(logging._nameToLevel.keys()), case_sensitive=False)


def logging_options(f):
    """Decorator to add logging options to any command."""
    f = click.option(
        "-l",
        "--log-level",
        type=LOG_LEVEL_CHOICES,
        default=None,
        envvar="ELMTESTFEED_LOG_LEVEL",
        help="Set the logging level (overrides config file).",
    )(f)
    f = click.option(
        "--log-file",
        type=click.Path(dir_okay=False, writable=True, resolve_path=True),
        default=None,
        envvar="ELMTESTFEED_LOG_FILE",
        help="Path to write logs to a file (JSON format).",
    )(f)
    f = click.option(
        "--json-logs",
        is_flag=True,
        default=None,
        envvar="ELMTESTFEED_JSON_LOGS",
        help="Output console logs as JSON.",
    )(f)
    return f


def config_option(f):
    """Decorator adding the optional configuration file option."""
    return click.option(
        "-c",
        "--config-path",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True, path_type=Path),
        default=None,
        envvar="ELMTESTFEED_CONF",
        help="Path to an elmtestfeed TOML configuration file.",
        show_envvar=True,
    )(f)


def output_options(f):
    """Decorator adding the delta output options."""
    f = click.option(
        "-f",
        "--format",
        "output_format",
        type=click.Choice(list(OUTPUT_FORMATS)),
        default=None,
        help="Render deltas as an indented tree or as JSON lines.",
    )(f)
    f = click.option(
        "--color/--no-color",
        default=None,
        help="Colorize the text tree.",
    )(f)
    return f


def setup_logging_from_context(
    ctx: click.Context,
    local_log_level: str | None = None,
    local_log_file: str | None = None,
    local_json_logs: bool | None = None,
    default_log_level: str = "WARNING",
) -> None:
    """
    Setup logging using context values, allowing local overrides.
    """
    obj = ctx.obj or {}
    log_level_str = local_log_level or obj.get("LOG_LEVEL") or default_log_level
    log_file_path = local_log_file or obj.get("LOG_FILE")
    use_json_logs = local_json_logs if local_json_logs is not None else obj.get("JSON_LOGS", False)

    numeric_level = logging.getLevelName(log_level_str.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING
        log_level_str = "WARNING"

    core_setup_logging(
        level=numeric_level,
        json_logs=use_json_logs,
        log_file=log_file_path,
    )

    log.debug(
        "CLI logging initialized via utils",
        level=log_level_str,
        file=log_file_path or "console",
        json=use_json_logs,
    )


def load_config_or_exit(ctx: click.Context, config_path: Path | None) -> FeedConfig:
    """Loads configuration, reporting problems on stderr and exiting with 1."""
    try:
        return load_config(config_path)
    except ConfigurationError as e:
        log.error("Failed to load or validate configuration", error=str(e))
        click.echo(f"Error: Configuration problem: {e}", err=True)
        ctx.exit(1)


@define(slots=True)
class FeedSession:
    """
    Feeds report lines through one processor and renders the resulting deltas.

    Blank lines are ignored; any other line that is not a run event is counted
    as skipped.
    """
    renderer: DeltaRenderer
    processor: TestEventProcessor = field(factory=TestEventProcessor)
    tally: RunTally = field(factory=RunTally)
    skipped_lines: int = 0

    @classmethod
    def from_config(cls, config: FeedConfig) -> "FeedSession":
        return cls(renderer=get_renderer(config.output.format, color=config.output.color))

    def handle_line(self, line: str) -> list[str]:
        """Processes one line and returns the rendered output lines."""
        if not line.strip():
            return []
        deltas = self.processor.accept(line)
        if deltas is None:
            self.skipped_lines += 1
            log.debug("Skipping line that is not a run event", line=line[:120])
            return []
        output: list[str] = []
        for delta in deltas:
            self.tally.record(delta)
            output.extend(self.renderer.render(delta))
        return output

    def echo_line(self, line: str) -> None:
        for rendered in self.handle_line(line):
            click.echo(rendered)

    def summary(self) -> str:
        text = self.tally.summary()
        if self.skipped_lines:
            text += f", {self.skipped_lines} non-event line(s) skipped"
        return text

# ⚙️🛠️
