import logging
import os
import sys
from typing import Optional

import structlog

from cloud_data_sources.helpers.utils import ensure_directory_exists

DEFAULT_LOG_FILENAME = "cloud_data_sources.log"

_SHARED_PROCESSORS = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]


def setup_logging(
    log_level: str = "INFO",
    log_destination: str = "console",
    log_dir: Optional[str] = None,
    log_filename: Optional[str] = None,
    json_format: bool = False,
) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application using structlog.

    :param log_level: Logging level (e.g., DEBUG, INFO, WARNING, ERROR, CRITICAL).
    :param log_destination: Where to send logs ("file", "console", or "both").
    :param log_dir: Directory where the log file will be stored.
    :param log_filename: Name of the log file.
    :param json_format: Render events as JSON instead of the console format.
    :return: Configured structlog logger instance.
    """
    renderer = (
        structlog.processors.JSONRenderer()
        if json_format
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=_SHARED_PROCESSORS,
    )

    handlers: list[logging.Handler] = []
    if log_destination in ("file", "both"):
        log_dir = log_dir or os.environ.get("CDS_LOG_DIR", "./logs")
        ensure_directory_exists(log_dir)
        handlers.append(
            logging.FileHandler(os.path.join(log_dir, log_filename or DEFAULT_LOG_FILENAME))
        )

    if log_destination in ("console", "both"):
        # console logs go to stderr, stdout carries command output
        handlers.append(logging.StreamHandler(sys.stderr))

    for handler in handlers:
        handler.setFormatter(formatter)

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    return structlog.get_logger("cloud_data_sources")


def get_logger(name: str):
    """Return a structlog logger bound to ``name``."""
    return structlog.get_logger(name)


def configure_library_logging() -> None:
    """
    Route structlog through stdlib ``logging`` without installing handlers.

    Until ``setup_logging`` runs, events reach whatever handlers the host
    application configured (or stdlib's last-resort stderr handler), never stdout.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.render_to_log_kwargs,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        # loggers resolve again once setup_logging installs handlers
        cache_logger_on_first_use=False,
    )


configure_library_logging()
