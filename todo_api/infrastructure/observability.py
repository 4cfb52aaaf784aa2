"""Structured Logging and Tracing — JSON log formatter plus a logging-backed span sink.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (task_id, error_code, span, request fields) surfaced when present
    - A span opened with Tracer.start_span() always ends, even if the body raises
    - NoopTracer records nothing and never raises

Design Decisions:
    - JSONFormatter over third-party libs: stdlib logging only
    - Tracer/Span are Protocols: the error renderer receives a sink as a
      dependency, tests swap in NoopTracer or a recording double
"""

import json
import logging
import time
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import ContextManager, Iterator, Protocol

_EXTRA_FIELDS = (
    "task_id", "error_code", "span", "duration_ms",
    "method", "path", "status_code", "error_type",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))


# ─── Tracing ─────────────────────────────────────────────────────

class Span(Protocol):
    def record_error(self, err: BaseException) -> None: ...


class Tracer(Protocol):
    def start_span(self, name: str) -> ContextManager[Span]: ...


class _LoggingSpan:
    def __init__(self, name: str, logger: logging.Logger):
        self.name = name
        self._logger = logger
        self.errors: list[BaseException] = []

    def record_error(self, err: BaseException) -> None:
        self.errors.append(err)
        self._logger.warning(
            f"{self.name}: {err}",
            extra={"span": self.name, "error_type": type(err).__name__},
        )


class LoggingTracer:
    """Emits span errors and span end events as log records."""

    def __init__(self, logger_name: str = "todo_api.trace"):
        self._logger = logging.getLogger(logger_name)

    @contextmanager
    def start_span(self, name: str) -> Iterator[_LoggingSpan]:
        span = _LoggingSpan(name, self._logger)
        start = time.perf_counter()
        try:
            yield span
        finally:
            self._logger.debug(
                f"span {name} ended",
                extra={
                    "span": name,
                    "duration_ms": round((time.perf_counter() - start) * 1000, 3),
                },
            )


class _NoopSpan:
    def record_error(self, err: BaseException) -> None:
        pass


class NoopTracer:
    @contextmanager
    def start_span(self, name: str) -> Iterator[_NoopSpan]:
        yield _NoopSpan()
