"""
Structured logging for the bookshelf service

Events are emitted through structlog on top of the stdlib ``logging`` tree,
so uvicorn and strawberry records share the same handler and level.
"""

import base64
import logging
import secrets
import sys
import time
from contextvars import ContextVar
from typing import Any, TextIO

import structlog

# Set by LoggingContextMiddleware for the lifetime of one HTTP request
request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)


def add_request_id(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """structlog processor: tag the event with the current request id, if any."""
    request_id = request_id_ctx.get()
    if request_id is not None:
        event_dict.setdefault("request_id", request_id)
    return event_dict


def _build_processors(debug: bool) -> list[Any]:
    renderer: Any
    if debug:
        renderer = structlog.dev.ConsoleRenderer(colors=True)
    else:
        renderer = structlog.processors.JSONRenderer()

    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        add_request_id,
        structlog.processors.TimeStamper(fmt="ISO", utc=True),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        renderer,
    ]


def configure_logging(
    debug: bool = False, level: int | None = None, stream: TextIO | None = None
) -> None:
    """Install the bookshelf logging setup, replacing any previous one.

    ``debug`` selects coloured console output at DEBUG level; otherwise
    events are rendered as one JSON object per line at INFO. ``level``
    overrides the level and ``stream`` the destination (stdout by default),
    which lets the ``query`` command keep stdout for its result.
    """
    if level is None:
        level = logging.DEBUG if debug else logging.INFO

    logging.basicConfig(
        level=level,
        stream=stream or sys.stdout,
        format="%(message)s",
        force=True,
    )

    structlog.configure(
        processors=_build_processors(debug),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str, **initial_values: Any) -> structlog.BoundLogger:
    """Return a logger named ``name``, optionally pre-bound with ``initial_values``."""
    return structlog.get_logger(name, **initial_values)


def generate_request_id() -> str:
    """Return a 14 character URL-safe id: 8 bytes of microsecond clock, 2 random."""
    timestamp_us = int(time.time() * 1_000_000)
    raw = timestamp_us.to_bytes(8, byteorder="big") + secrets.token_bytes(2)
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def set_request_context(request_id: str | None = None) -> str:
    """Bind ``request_id`` (or a fresh one) to the current context and return it."""
    if request_id is None:
        request_id = generate_request_id()
    request_id_ctx.set(request_id)
    return request_id


def clear_request_context() -> None:
    request_id_ctx.set(None)


def get_request_id() -> str | None:
    return request_id_ctx.get()
