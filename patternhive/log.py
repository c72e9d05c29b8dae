"""
Logging setup: structlog bound loggers rendered through stdlib logging.

Demo output goes to stdout via print; diagnostics go through these loggers
to stderr.
"""

from __future__ import annotations
import logging
import sys
import threading
from typing import Optional

import structlog

_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

_configured = False
_configure_lock = threading.Lock()


def _configure_structlog() -> None:
    global _configured

    with _configure_lock:
        if _configured:
            return
        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.stdlib.PositionalArgumentsFormatter(),
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.KeyValueRenderer(key_order=["event"]),
            ],
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        _configured = True


def setup_logging(level: str = "WARNING", stream=None) -> structlog.stdlib.BoundLogger:
    """
    Configure the root logger and structlog.

    Args:
        level: stdlib level name (DEBUG, INFO, WARNING, ...)
        stream: handler stream, stderr when omitted

    Returns:
        The package logger.
    """
    _configure_structlog()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    root_logger.addHandler(console_handler)

    logger = get_logger("patternhive")
    logger.debug("Logging configured", log_level=level.upper())
    return logger


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    _configure_structlog()
    return structlog.get_logger(name)
