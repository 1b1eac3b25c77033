import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

import structlog

from patternbook.config.schemas import LogDestination, LoggingConfig

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s"


class DetailedFormatter(logging.Formatter):
    """Formatter that adds module, function and line number to each record."""

    def format(self, record):
        record.caller_info = f"{record.module}.{record.funcName}:{record.lineno}"
        return super().format(record)


def _configure_structlog() -> None:
    """Route structlog through the stdlib logging tree."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def setup_logging(config: Optional[LoggingConfig] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application using structlog.

    Args:
        config: Logging configuration. Defaults are used when omitted.
    Returns:
        Configured structlog logger instance.
    """
    if config is None:
        config = LoggingConfig()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.level.value))

    handlers = []

    if config.destination in (LogDestination.FILE, LogDestination.BOTH):
        log_file = os.path.expandvars(config.file_path)
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=config.max_size_mb * 1024 * 1024,
            backupCount=config.backup_count
        )
        file_handler.setFormatter(DetailedFormatter(LOG_FORMAT))
        handlers.append(file_handler)

    if config.destination in (LogDestination.STDOUT, LogDestination.BOTH):
        # Log records go to stderr so they never interleave with demo output on stdout
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(DetailedFormatter(LOG_FORMAT))
        handlers.append(console_handler)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    for handler in handlers:
        root_logger.addHandler(handler)

    _configure_structlog()

    logger = structlog.get_logger("patternbook")
    logger.debug(
        "Logging configured",
        log_level=config.level.value,
        log_destination=config.destination.value,
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger bound to the given module name."""
    return structlog.get_logger(name)


# Loggers obtained before setup_logging() still go through stdlib
_configure_structlog()
