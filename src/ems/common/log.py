"""Console tracing for controllers and services.

Every mutating operation writes start / validation / success / failure events
to stdout through structlog. Use ``get_logger(__name__)`` at module level.
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(service_name: str, log_level: str = "INFO", json_logs: bool = False) -> None:
    level = getattr(logging, str(log_level).upper(), logging.INFO)

    def add_service(logger, method_name, event_dict):
        event_dict["service"] = service_name
        return event_dict

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_service,
    ]
    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.WriteLoggerFactory(),
        # pytest swaps sys.stdout per test; a cached logger would keep a closed stream.
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    logging.getLogger("werkzeug").setLevel(max(level, logging.INFO))


def get_logger(name: str):
    return structlog.get_logger(name)


def log_validation_errors(logger, operation: str, errors: dict[str, list[str]]) -> None:
    for field, messages in errors.items():
        for message in messages:
            logger.info("validation_error", operation=operation, field=field or "form", error=message)
