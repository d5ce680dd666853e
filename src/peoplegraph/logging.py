"""
Structured logging setup and per-request context
"""

import logging
import secrets
import sys

import structlog
from structlog.contextvars import bind_contextvars, get_contextvars, unbind_contextvars


def configure_logging(debug: bool = False, level: str | None = None) -> None:
    """Route structlog through stdlib logging on stdout.

    Args:
        debug: Colored console lines when True, one JSON object per line otherwise.
        level: Level name such as "error"; defaults to DEBUG in debug mode, else INFO.
    """
    if level:
        log_level = logging.getLevelName(level.upper())
        if not isinstance(log_level, int):
            raise ValueError(f"Unknown log level: {level}")
    else:
        log_level = logging.DEBUG if debug else logging.INFO

    logging.basicConfig(level=log_level, stream=sys.stdout, format="%(message)s", force=True)

    renderer = (
        structlog.dev.ConsoleRenderer(colors=True)
        if debug
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="ISO", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    return structlog.get_logger(name)


def set_request_context(request_id: str | None = None) -> str:
    """Bind a request id to every log line of the current request.

    A random 12-character id is generated when the caller has none.
    """
    request_id = request_id or secrets.token_urlsafe(9)
    bind_contextvars(request_id=request_id)
    return request_id


def clear_request_context() -> None:
    unbind_contextvars("request_id")


def get_request_id() -> str | None:
    return get_contextvars().get("request_id")
