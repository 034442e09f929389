"""Structured logging for the analysis pipeline.

Events are written to stderr so a caller printing results on stdout
(the CLI's --json mode) never has them interleaved with log lines.
"""

import logging
import sys
from typing import Any

import structlog

from site_analysis import __version__
from site_analysis.config import Settings, get_settings

PACKAGE_LOGGER = "site_analysis"

# Third-party loggers that log every request at INFO
QUIET_LOGGERS = ("httpx", "httpcore")


def resolve_log_level(settings: Settings) -> int:
    """Debug mode wins over the configured level."""
    if settings.debug:
        return logging.DEBUG
    return getattr(logging, settings.log_level.upper(), logging.INFO)


def _add_version(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    event_dict["version"] = __version__
    return event_dict


def _renderer(settings: Settings) -> Any:
    if settings.is_production:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=sys.stderr.isatty(),
        exception_formatter=structlog.dev.plain_traceback,
    )


def setup_logging() -> None:
    """Configure structlog and the stdlib bridge for site_analysis."""
    settings = get_settings()
    log_level = resolve_log_level(settings)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if settings.is_production:
        processors += [_add_version, structlog.processors.dict_tracebacks]
    else:
        processors.append(structlog.dev.set_exc_info)
    processors.append(_renderer(settings))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=log_level)
    logging.getLogger(PACKAGE_LOGGER).setLevel(log_level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
