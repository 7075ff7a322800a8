"""structlog setup for podfeed.

Log records go to stderr so that command output on stdout stays clean.
"""

import logging
import sys

import structlog

from podfeed.config import Settings, get_settings

# Third-party loggers that report every HTTP request at INFO.
_CHATTY_LOGGERS = ("httpx", "httpcore", "hpack")


def setup_logging(settings: Settings | None = None) -> None:
    """Configure structlog from podfeed settings.

    Args:
        settings: Settings providing ``log_level`` and ``json_logs``;
            the cached application settings if None.
    """
    settings = settings or get_settings()
    level = logging.getLevelName(settings.log_level)

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if settings.json_logs:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
