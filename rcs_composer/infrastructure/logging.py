"""
Logging configuration.

structlog over stdlib logging. Every event carries the service name and the
request's correlation ID. Free text typed by the author (message bodies, card
titles, file names) is truncated before rendering.
"""

import logging
import sys
import time
from contextvars import ContextVar, Token

import structlog

correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")

# Event keys holding author-entered text
USER_TEXT_FIELDS = frozenset({"text", "fallback", "title", "description", "reply", "file_name"})


def configure_logging(service_name: str, level: str = "INFO", json_output: bool = True) -> None:
    """
    Configure structured logging for the composer.

    Args:
        service_name: Value of the ``service`` key on every event
        level: Minimum stdlib level name, e.g. "DEBUG"
        json_output: JSON lines when true, key=value console output otherwise
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _request_context(service_name),
            _truncate_user_text,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


def _request_context(service_name: str):
    def processor(logger, method_name, event_dict):
        event_dict["service"] = service_name
        cid = correlation_id.get()
        if cid:
            event_dict["correlation_id"] = cid
        return event_dict

    return processor


def _truncate_user_text(logger, method_name, event_dict):
    for key in USER_TEXT_FIELDS & event_dict.keys():
        value = event_dict[key]
        if isinstance(value, str):
            event_dict[key] = sanitize_for_logging(value)
    return event_dict


def set_correlation_id(cid: str) -> Token:
    return correlation_id.set(cid)


def reset_correlation_id(token: Token) -> None:
    correlation_id.reset(token)


def get_correlation_id() -> str:
    return correlation_id.get()


class Timer:
    """
    Wall-clock timer for validation runs and requests.

    Usage:
        with Timer() as t:
            violations = validate_envelope(envelope)
        logger.info("Message validated", duration_ms=t.duration_ms)
    """

    def __init__(self):
        self._start: float = 0
        self.duration_ms: float = 0

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, *args) -> None:
        self.duration_ms = round((time.perf_counter() - self._start) * 1000, 2)


def sanitize_for_logging(value: str | None, visible_chars: int = 16) -> str:
    """Keep the first visible_chars characters of free text."""
    if not value:
        return ""
    if len(value) <= visible_chars:
        return value
    return value[:visible_chars] + "..."
