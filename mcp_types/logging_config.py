# mcp_types/logging_config.py
import logging
import structlog
from typing import Optional, Union
import sys

from mcp_types.config import settings


def setup_logging(log_level: Optional[Union[int, str]] = None):
    """Set up structured logging for an application using these types.

    This configures structlog and applies it to the root logger,
    ensuring all logs use the same format and level filtering.
    The library itself never calls this on import.
    """
    if log_level is None:
        log_level = settings.LOG_LEVEL

    # Convert string log level to integer if needed
    if isinstance(log_level, str):
        log_level = getattr(logging, log_level.upper())

    # --- Structlog configuration ---
    shared_processors = [
        # Add context from contextvars
        structlog.contextvars.merge_contextvars,
        # Add log level name
        structlog.stdlib.add_log_level,
        # Add logger name
        structlog.stdlib.add_logger_name,
        # Format any exc_info
        structlog.processors.format_exc_info,
        # Add timestamp
        structlog.processors.TimeStamper("iso"),
    ]

    structlog.configure(
        processors=shared_processors + [structlog.dev.ConsoleRenderer(colors=True)],
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Filter logs according to level *before* processing
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        cache_logger_on_first_use=True,
    )

    # --- Standard library logging integration ---

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=structlog.dev.ConsoleRenderer(colors=True),
        # Processors to apply to logs from non-structlog loggers
        foreign_pre_chain=shared_processors,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    handler.setLevel(log_level)

    root_logger = logging.getLogger()
    root_logger.handlers = []
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    return None
