"""
Log messages a server sends to its client, and the request to filter them.
"""

from typing import Any, ClassVar, Literal, Optional, get_args

from mcp_types.models.base import WireModel

# Ordered from least to most severe
LoggingLevel = Literal[
    "debug", "info", "notice", "warning", "error", "critical", "alert", "emergency"
]

LOGGING_LEVELS = get_args(LoggingLevel)


def level_at_least(level: LoggingLevel, threshold: LoggingLevel) -> bool:
    """True if ``level`` is as severe as ``threshold`` or more."""
    return LOGGING_LEVELS.index(level) >= LOGGING_LEVELS.index(threshold)


class LogEntry(WireModel):
    """Params of ``notifications/message``."""

    METHOD: ClassVar[str] = "notifications/message"

    level: LoggingLevel
    data: Any
    logger: Optional[str] = None

    @classmethod
    def new(cls, level: LoggingLevel, data: Any) -> "LogEntry":
        return cls(level=level, data=data)

    @classmethod
    def with_logger(cls, level: LoggingLevel, data: Any, logger: str) -> "LogEntry":
        return cls(level=level, data=data, logger=logger)


class SetLoggingLevelRequest(WireModel):
    METHOD: ClassVar[str] = "logging/setLevel"

    level: LoggingLevel
