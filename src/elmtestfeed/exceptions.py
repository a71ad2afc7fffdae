#
# src/elmtestfeed/exceptions.py
#
"""
Exception hierarchy for elmtestfeed.
"""


class ElmTestFeedError(Exception):
    """Base class for all elmtestfeed errors."""


class ConfigurationError(ElmTestFeedError):
    """Raised when configuration cannot be loaded or fails validation."""


class EventDecodeError(ElmTestFeedError):
    """Raised when a report line cannot be turned into a run event."""

    def __init__(self, reason: str, line: str | None = None):
        self.reason = reason
        self.line = line
        super().__init__(reason)
        if line is not None and hasattr(self, "add_note"):
            self.add_note(f"Offending line: {line[:200]!r}")


class RunnerError(ElmTestFeedError):
    """Raised when the external test runner cannot be executed."""

    def __init__(self, message: str, command: list[str] | None = None):
        self.command = command
        full_message = f"[Runner] {message}"
        if command:
            full_message += f" (Command: '{' '.join(command)}')"
        super().__init__(full_message)


# 🔼⚙️
