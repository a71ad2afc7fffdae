#
# config/__init__.py
#
"""
Configuration handling sub-package for elmtestfeed.

Exports the loading function and core configuration model.
"""

from .loader import load_config
from .models import (
    OUTPUT_FORMATS,
    FeedConfig,
    GlobalConfig,
    OutputConfig,
    RunnerConfig,
)

__all__ = [
    "OUTPUT_FORMATS",
    "FeedConfig",
    "GlobalConfig",
    "OutputConfig",
    "RunnerConfig",
    "load_config",
]

# 🔼⚙️
