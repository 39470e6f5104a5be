from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(log_level: str, log_format: str = "console") -> None:
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=log_level.upper())
    renderer = structlog.processors.JSONRenderer() if log_format == "json" else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.dict_tracebacks if log_format == "json" else structlog.dev.set_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(log_level.upper())),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )


logger = structlog.get_logger()


def get_logger(silent: bool = False):
    """
    Logger for one run. With `silent`, only error-level events get through.
    """
    if silent:
        return structlog.wrap_logger(None, wrapper_class=structlog.make_filtering_bound_logger(logging.ERROR))
    return structlog.get_logger()
