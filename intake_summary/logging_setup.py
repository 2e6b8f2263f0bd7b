"""Structured logging configuration.

Provides a JSON formatter and a request_id context variable. The FastAPI app
calls `configure_logging()` at startup and the submit route wraps each request
in `request_context(id)` so records emitted while compiling and delivering a
narrative carry the same correlation id.

Intake submissions are PHI: the formatter scrubs phone numbers, emails and
similar identifiers from messages and tracebacks before they are written.
"""

from __future__ import annotations

import json
import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Iterator

from intake_summary.utils.redact import redact_text

SERVICE_NAME = "intake-summary"

request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)

_STANDARD_FIELDS = {
    "name",
    "msg",
    "args",
    "levelname",
    "levelno",
    "pathname",
    "filename",
    "module",
    "exc_info",
    "exc_text",
    "stack_info",
    "lineno",
    "funcName",
    "created",
    "msecs",
    "relativeCreated",
    "thread",
    "threadName",
    "processName",
    "process",
    "taskName",
}

# Correlation ids and event names are never PHI and may look like digit runs.
_UNREDACTED_FIELDS = {"request_id", "trace_id", "event", "stage", "status"}


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        data: Dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "service": SERVICE_NAME,
            "msg": redact_text(record.getMessage()),
        }
        rid = request_id_var.get()
        if rid:
            data["request_id"] = rid
        if record.exc_info:
            data["exc_info"] = redact_text(self.formatException(record.exc_info))
        for key, value in record.__dict__.items():
            if key in _STANDARD_FIELDS or key.startswith("_"):
                continue
            if isinstance(value, str) and key not in _UNREDACTED_FIELDS:
                value = redact_text(value)
            data[key] = value
        return json.dumps(data, ensure_ascii=False, default=str)


def configure_logging(level: int = logging.INFO, force: bool = False) -> None:
    root = logging.getLogger()
    if force:
        for handler in list(root.handlers):
            root.removeHandler(handler)
    elif any(
        isinstance(h, logging.StreamHandler) for h in root.handlers
    ):  # already configured
        root.setLevel(level)
        for handler in root.handlers:
            handler.setLevel(level)
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())
    root.setLevel(level)
    root.addHandler(handler)


def set_request_id(rid: str | None) -> None:
    request_id_var.set(rid)


@contextmanager
def request_context(rid: str | None) -> Iterator[None]:
    token = request_id_var.set(rid)
    try:
        yield
    finally:
        request_id_var.reset(token)


__all__ = [
    "JsonFormatter",
    "configure_logging",
    "request_context",
    "request_id_var",
    "set_request_id",
]
