"""
Structured logging configuration using structlog.

- Console output for development
- JSON output for log aggregation
- Account numbers masked before rendering

Importing openiban only calls install_library_logging(); handlers and
renderers are left to the host unless it calls configure_from_settings().
"""

import logging
import sys
import time
from typing import Any, cast

import structlog
from structlog.types import EventDict, Processor

# Keys whose values are bank account identifiers
ACCOUNT_KEYS = {
    "account_number",
    "swift_account_number",
    "iban",
    "pseudo_iban",
}


def mask_account_numbers(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """
    Mask account identifiers in log entries, keeping the last four characters.

    Bank and branch codes are public routing data and are left untouched.
    """
    for key in ACCOUNT_KEYS:
        value = event_dict.get(key)
        if isinstance(value, str) and len(value) > 4:
            event_dict[key] = "*" * (len(value) - 4) + value[-4:]
    return event_dict


def add_app_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Add application context to every log entry."""
    from openiban import __version__

    event_dict["app"] = "openiban"
    event_dict["version"] = __version__
    return event_dict


def configure_logging(
    log_level: str = "WARNING",
    json_logs: bool = False,
    dev_mode: bool = True,
) -> None:
    """
    Configure structured logging for the library.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        json_logs: Whether to output JSON logs
        dev_mode: Whether to use development-friendly output
    """
    shared_processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        add_app_context,
        mask_account_numbers,
    ]

    if dev_mode:
        processors = shared_processors + [structlog.dev.ConsoleRenderer(colors=True)]
    elif json_logs:
        processors = shared_processors + [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.processors.KeyValueRenderer(key_order=["timestamp", "level", "event"]),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
    )


def install_library_logging() -> None:
    """
    Route library events to stdlib logging without taking over the process.

    Adds a ``NullHandler`` to the ``openiban`` logger so nothing is printed
    unless the host application configures handlers. structlog itself is
    only configured when the host hasn't done so; loggers are not cached,
    so a later ``structlog.configure`` by the host still takes effect.
    """
    package_logger = logging.getLogger("openiban")
    if not any(isinstance(h, logging.NullHandler) for h in package_logger.handlers):
        package_logger.addHandler(logging.NullHandler())

    if structlog.is_configured():
        return

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            mask_account_numbers,
            structlog.stdlib.render_to_log_kwargs,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Usage:
        logger = get_logger(__name__)
        logger.info("structures_loaded", countries=105)
    """
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))


class LogPerformance:
    """
    Context manager for logging performance metrics.

    Usage:
        with LogPerformance("structures_load", logger):
            # ... expensive operation
            pass
    """

    def __init__(self, operation: str, logger: structlog.stdlib.BoundLogger):
        self.operation = operation
        self.logger = logger
        self.start_time: float = 0

    def __enter__(self) -> "LogPerformance":
        self.start_time = time.perf_counter()
        self.logger.debug(f"{self.operation}_started")
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        duration = time.perf_counter() - self.start_time

        if exc_type is None:
            self.logger.info(
                f"{self.operation}_completed",
                duration_ms=round(duration * 1000, 2),
                operation=self.operation,
            )
        else:
            self.logger.error(
                f"{self.operation}_failed",
                duration_ms=round(duration * 1000, 2),
                operation=self.operation,
                error=str(exc_val),
                error_type=exc_type.__name__ if exc_type else None,
            )


def configure_from_settings(settings) -> None:
    """
    Configure process-wide logging from OpenIBAN settings.

    The library never calls this itself; applications and development
    scripts that want openiban's renderers call it explicitly.

    Args:
        settings: Settings instance (see openiban.utils.config)
    """
    configure_logging(
        log_level=settings.log_level,
        json_logs=settings.json_logs,
        dev_mode=settings.dev_mode,
    )
