"""structlog setup for the carttool CLI."""

from __future__ import annotations

import logging
import os
import sys

import structlog

LOGGER_NAME = "carttool"

_PRE_CHAIN: list[structlog.types.Processor] = [
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="%H:%M:%S"),
]


def _renderer(log_format: str) -> structlog.types.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    # Xcode's build log shows escape codes verbatim
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def setup_logging(level: str | None = None) -> None:
    """Route carttool's structlog events to stderr.

    *level* overrides ``CARTTOOL_LOG_LEVEL`` (default INFO).
    ``CARTTOOL_LOG_FORMAT`` picks ``console`` or ``json`` output.
    Only the ``carttool`` logger tree gets a handler; stdout is left to
    command output.
    """
    log_level = (level or os.environ.get("CARTTOOL_LOG_LEVEL", "INFO")).upper()
    log_format = os.environ.get("CARTTOOL_LOG_FORMAT", "console").lower()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_PRE_CHAIN,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_PRE_CHAIN,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_format),
            ],
        )
    )

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers[:] = [handler]
    logger.setLevel(log_level)
    logger.propagate = False
