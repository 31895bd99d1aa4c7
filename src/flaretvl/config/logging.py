"""Logging configuration using structlog.

Application modules log through ``structlog.get_logger(__name__)``; this
module only sets the renderer, level and third-party logger levels.
"""

import logging
import sys

import structlog

from flaretvl.config.settings import Settings, get_settings

# httpx logs every price request at INFO; gradio and uvicorn.access log every
# UI poll. Kept at WARNING unless the app itself runs at DEBUG.
NOISY_LOGGERS: tuple[str, ...] = ("httpx", "httpcore", "gradio", "uvicorn.access")


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog and stdlib logging for the dashboard.

    Args:
        settings: Settings to read level and debug flag from
            (default: cached settings).
    """
    settings = settings or get_settings()
    log_level = logging.getLevelName(settings.log_level)

    renderer: structlog.types.Processor = (
        structlog.dev.ConsoleRenderer()
        if settings.debug
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)

    third_party_level = logging.DEBUG if log_level == logging.DEBUG else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(third_party_level)

    structlog.get_logger(__name__).debug(
        "logging_configured",
        level=settings.log_level,
        renderer="console" if settings.debug else "json",
    )
