"""Structured logging setup for applications embedding uristore."""

import logging
import sys

import structlog

from uristore.config import settings


def setup_logging(*, level: str | None = None, json_output: bool | None = None) -> None:
    """Route structlog and standard library logging through one formatter.

    Defaults come from ``settings.log_level`` and ``settings.log_format``. The
    library never calls this itself; applications opt in.
    """
    if level is None:
        level = settings.log_level
    if json_output is None:
        json_output = settings.log_format == "json"

    common_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    renderer = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            *common_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=common_processors,
        processor=renderer,
    )

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    package_logger = logging.getLogger("uristore")
    package_logger.handlers = [stream_handler]
    package_logger.propagate = False
    package_logger.setLevel(level.upper())
