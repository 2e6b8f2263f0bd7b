"""Structured log helpers for submission telemetry.

Records carry an ``event`` name plus a small set of allowlisted fields (counts,
ids, outcomes). Anything else passed as a field is dropped, so form values and
narrative text never reach a log sink even if a caller passes them by mistake.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from intake_summary.services.interfaces import MetricsClient

STAGE_EVENT = "submission_stage"

SAFE_FIELDS: frozenset[str] = frozenset(
    {
        "attempt",
        "component",
        "content_type",
        "duration_ms",
        "error",
        "error_type",
        "event",
        "field_count",
        "message_id",
        "missing",
        "narrative_chars",
        "provider",
        "reason",
        "request_id",
        "section_count",
        "skip_reason",
        "stage",
        "status",
        "status_code",
        "trace_id",
    }
)


def safe_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    """Keep allowlisted, non-None fields."""
    return {k: v for k, v in fields.items() if k in SAFE_FIELDS and v is not None}


def structured_log(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:
    """Emit ``event`` as both the message and an ``event`` attribute."""
    extra = safe_fields(fields)
    extra["event"] = event
    logger.log(level, event, extra=extra)


@dataclass
class StageMarker:
    """Times one submission stage and logs ``started`` / ``completed`` / ``failed``.

    Usable with both ``with`` and ``async with``. When ``metrics`` is given the
    stage duration is also observed as ``stage_seconds``.
    """

    logger: logging.Logger
    stage: str
    fields: Dict[str, Any] = field(default_factory=dict)
    metrics: Optional["MetricsClient"] = None
    _notes: Dict[str, Any] = field(default_factory=dict, init=False)
    _started: float = field(default=0.0, init=False)

    def note(self, **fields: Any) -> None:
        """Attach fields to the closing record."""
        self._notes.update(safe_fields(fields))

    def _emit(self, level: int, status: str, **extra: Any) -> None:
        payload = dict(self.fields, **extra)
        payload.update(stage=self.stage, status=status)
        structured_log(self.logger, level, STAGE_EVENT, **payload)

    def _open(self) -> "StageMarker":
        self._started = time.perf_counter()
        self._emit(logging.INFO, "started")
        return self

    def _close(self, exc: BaseException | None) -> bool:
        elapsed = time.perf_counter() - self._started
        if self.metrics is not None:
            self.metrics.observe_latency("stage_seconds", elapsed, stage=self.stage)
        closing = dict(self._notes, duration_ms=int(elapsed * 1000))
        if exc is None:
            self._emit(logging.INFO, "completed", **closing)
        else:
            self._emit(logging.ERROR, "failed", error_type=type(exc).__name__, **closing)
        return False

    def __enter__(self) -> "StageMarker":
        return self._open()

    def __exit__(self, exc_type, exc, tb) -> bool:
        return self._close(exc)

    async def __aenter__(self) -> "StageMarker":
        return self._open()

    async def __aexit__(self, exc_type, exc, tb) -> bool:
        return self._close(exc)


def stage_marker(
    logger: logging.Logger,
    *,
    stage: str,
    metrics: Optional["MetricsClient"] = None,
    **fields: Any,
) -> StageMarker:
    return StageMarker(logger, stage, fields=safe_fields(fields), metrics=metrics)


def log_stage_skipped(
    logger: logging.Logger,
    *,
    stage: str,
    reason: str,
    level: int = logging.INFO,
    **fields: Any,
) -> None:
    """Record that ``stage`` did not run and why."""
    structured_log(logger, level, STAGE_EVENT, stage=stage, status="skipped", skip_reason=reason, **fields)


__all__ = [
    "SAFE_FIELDS",
    "STAGE_EVENT",
    "StageMarker",
    "log_stage_skipped",
    "safe_fields",
    "stage_marker",
    "structured_log",
]
