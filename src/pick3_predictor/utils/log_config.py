from __future__ import annotations

import logging
import sys

import structlog

from pick3_predictor.config import LOG_CONFIG, LogConfig


def configure_logging(config: LogConfig | None = None) -> None:
    """
    Route structlog through the stdlib logging module.

    Engine modules only call ``structlog.get_logger(__name__)``; this sets the
    level and renderer once per process (console by default, JSON when
    ``config.json_logs`` is set).
    """
    if config is None:
        config = LOG_CONFIG

    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {config.level!r}")

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level, force=True)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer() if config.json_logs
            else structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
