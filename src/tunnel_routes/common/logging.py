"""Structured logging for the SDK, built on structlog."""

import logging
import sys
from typing import Any

import structlog
from structlog.typing import EventDict, Processor

from .utils import sanitize_log_data

# Transport libraries log every request at INFO; keep them out of SDK output.
NOISY_LOGGERS = ("httpx", "httpcore")


def mask_secrets(
    _logger: Any, _method_name: str, event_dict: EventDict
) -> EventDict:
    """structlog processor that masks credential-like keys in every event."""
    return sanitize_log_data(event_dict)


def setup_logging(
    level: str = "INFO",
    json_format: bool = False,
    log_file: str | None = None,
    transport_level: str = "WARNING",
) -> None:
    """Configure structured logging for applications using the SDK.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: If True, output JSON formatted logs
        log_file: Optional file path to write logs to
        transport_level: Level applied to the httpx/httpcore loggers
    """
    log_level = getattr(logging, level.upper())

    root_logger = logging.getLogger()
    root_logger.handlers = []
    root_logger.setLevel(log_level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(getattr(logging, transport_level.upper()))

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        mask_secrets,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        root_logger.addHandler(file_handler)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger bound to the given module name."""
    return structlog.get_logger(name)  # type: ignore[no-any-return]
