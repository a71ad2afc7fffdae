#
# src/elmtestfeed/telemetry/__init__.py
#
"""
Logging setup for elmtestfeed.
"""
from .logger import StructLogger, setup_logging

__all__ = ["StructLogger", "setup_logging"]

# 🔼⚙️
