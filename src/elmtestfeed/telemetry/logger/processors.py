# src/elmtestfeed/telemetry/logger/processors.py

import logging
from typing import Any

from structlog.typing import EventDict

# Keys used by callers to steer rendering; never shown in the output.
_CONTROL_KEYS = ("emoji_key",)


def add_emoji_processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Prefixes the event with an emoji chosen by ``emoji_key`` or the log level."""
    from elmtestfeed.telemetry.logger.base import LOG_EMOJIS

    emoji_key = event_dict.get("emoji_key")
    level = logging.getLevelName(method_name.upper())
    emoji = LOG_EMOJIS.get(emoji_key) or LOG_EMOJIS.get(level) or LOG_EMOJIS["general"]
    event = event_dict.get("event")
    if isinstance(event, str):
        event_dict["event"] = f"{emoji} {event}"
    return event_dict


def remove_extra_keys_processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    for key in _CONTROL_KEYS:
        event_dict.pop(key, None)
    return event_dict
