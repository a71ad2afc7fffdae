#
# config/loader.py
#
"""
Loads elmtestfeed configuration from a TOML file plus environment overrides.
"""

import os
import shlex
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import attrs
import structlog

from elmtestfeed.config.models import FeedConfig, GlobalConfig, OutputConfig, RunnerConfig
from elmtestfeed.exceptions import ConfigurationError
from elmtestfeed.telemetry import StructLogger

log: StructLogger = structlog.get_logger("config.loader")

ENV_LOG_LEVEL = "ELMTESTFEED_LOG_LEVEL"
ENV_OUTPUT_FORMAT = "ELMTESTFEED_OUTPUT_FORMAT"


def _table(data: Mapping[str, Any], name: str) -> dict[str, Any]:
    value = data.get(name, {})
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Section [{name}] must be a table, got {type(value).__name__}")
    return dict(value)


def _build(cls: type, section: str, values: dict[str, Any]) -> Any:
    known = {a.name for a in attrs.fields(cls)}
    unknown = set(values) - known
    if unknown:
        log.warning("Ignoring unknown configuration keys", section=section, keys=sorted(unknown))
    try:
        return cls(**{k: v for k, v in values.items() if k in known})
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid [{section}] configuration: {e}") from e


def load_config(config_path: Path | None = None) -> FeedConfig:
    """
    Builds the effective configuration.

    Args:
        config_path: Optional TOML file with ``[global]``, ``[runner]`` and
            ``[output]`` tables. ``None`` means defaults plus environment.

    Raises:
        ConfigurationError: The file is missing, unreadable, not valid TOML,
            or holds invalid values.
    """
    data: dict[str, Any] = {}
    if config_path is not None:
        log.debug("Loading configuration file", path=str(config_path), emoji_key="load")
        try:
            with config_path.open("rb") as fh:
                data = tomllib.load(fh)
        except FileNotFoundError as e:
            raise ConfigurationError(f"Configuration file not found: '{config_path}'") from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(f"Invalid TOML in '{config_path}': {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read '{config_path}': {e}") from e

    global_values = _table(data, "global")
    runner_values = _table(data, "runner")
    output_values = _table(data, "output")

    if env_level := os.environ.get(ENV_LOG_LEVEL):
        global_values["log_level"] = env_level
    if env_format := os.environ.get(ENV_OUTPUT_FORMAT):
        output_values["format"] = env_format

    if isinstance(runner_values.get("command"), str):
        runner_values["command"] = shlex.split(runner_values["command"])
    if isinstance(runner_values.get("working_dir"), str):
        working_dir = Path(runner_values["working_dir"]).expanduser()
        if not working_dir.is_absolute() and config_path is not None:
            working_dir = config_path.parent / working_dir
        runner_values["working_dir"] = working_dir

    config = FeedConfig(
        global_config=_build(GlobalConfig, "global", global_values),
        runner=_build(RunnerConfig, "runner", runner_values),
        output=_build(OutputConfig, "output", output_values),
    )
    log.debug("Configuration loaded", emoji_key="validate")
    return config

# 🔼⚙️
