"""
Logging setup shared by the Streamlit app and the command line tools.

structlog renders structured events through the standard library, so module
level `logging.getLogger(__name__)` loggers and `structlog.get_logger()`
loggers end up on the same handler.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

import structlog

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_console_handler: Optional[logging.Handler] = None


def configure_logging(log_level: Optional[str] = None) -> None:
    """
    Configure structlog and the root logger.

    Safe to call more than once: the console handler is replaced, not stacked.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL (defaults to LOG_LEVEL env, then INFO)
    """
    global _console_handler

    level_name = (log_level or os.getenv("LOG_LEVEL", "INFO")).upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {level_name}")

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Console output goes to stderr; stdout is reserved for command output
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root_logger = logging.getLogger()
    if _console_handler is not None:
        root_logger.removeHandler(_console_handler)
    root_logger.addHandler(console_handler)
    root_logger.setLevel(level)
    _console_handler = console_handler

    # SQLAlchemy is noisy at INFO
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
