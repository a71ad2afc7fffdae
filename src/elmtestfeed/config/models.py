#
# config/models.py
#
"""
Attrs-based data models for elmtestfeed configuration structure.
"""

import logging
from pathlib import Path
from typing import Any

from attrs import define, field

OUTPUT_FORMATS = ("text", "json")
DEFAULT_COMMAND = ("elm-test", "--report", "json")


# --- Validators ---
def _validate_log_level(inst: Any, attr: Any, value: str) -> None:
    """Validator for standard logging level names."""
    valid = logging._nameToLevel.keys()
    if value.upper() not in valid:
        raise ValueError(f"Invalid log_level '{value}'. Must be one of {list(valid)}.")


def _validate_output_format(inst: Any, attr: Any, value: str) -> None:
    if value not in OUTPUT_FORMATS:
        raise ValueError(f"Invalid output format '{value}'. Must be one of {list(OUTPUT_FORMATS)}.")


def _validate_command(inst: Any, attr: Any, value: tuple[str, ...]) -> None:
    if not value or not all(isinstance(part, str) and part for part in value):
        raise ValueError(f"Field '{attr.name}' must be a non-empty list of strings, got {value!r}")


@define(frozen=True, slots=True)
class GlobalConfig:
    """Global default settings for elmtestfeed."""
    log_level: str = field(default="WARNING", validator=_validate_log_level)

    @property
    def numeric_log_level(self) -> int:
        return logging.getLevelName(self.log_level.upper())


@define(frozen=True, slots=True)
class RunnerConfig:
    """How the external test runner is launched."""
    runner: str = field(default="subprocess")
    command: tuple[str, ...] = field(default=DEFAULT_COMMAND, converter=tuple, validator=_validate_command)
    working_dir: Path | None = field(default=None)


@define(frozen=True, slots=True)
class OutputConfig:
    """How deltas are written out."""
    format: str = field(default="text", validator=_validate_output_format)
    strict: bool = field(default=False)
    color: bool = field(default=True)


@define(frozen=True, slots=True)
class FeedConfig:
    """Root configuration object for the elmtestfeed application."""
    global_config: GlobalConfig = field(factory=GlobalConfig, metadata={"toml_name": "global"})
    runner: RunnerConfig = field(factory=RunnerConfig)
    output: OutputConfig = field(factory=OutputConfig)


# 🔼⚙️
