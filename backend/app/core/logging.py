"""Logging configuration using structlog.

Events are rendered as JSON lines on stdout through stdlib logging.
"""

import structlog
import logging
from structlog import contextvars as structlog_contextvars

# Stdlib loggers that stay at WARNING unless the app runs at DEBUG
NOISY_LOGGERS = ("sqlalchemy.engine", "uvicorn.access")


def setup_logging(log_level: str = "INFO") -> None:
    """
    Configure structlog for structured logging.

    :param log_level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", level=level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(
            logging.DEBUG if level == logging.DEBUG else max(level, logging.WARNING)
        )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog_contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
