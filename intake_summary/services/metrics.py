"""Prometheus metrics for submission handling.

Two series cover the service: a counter of submission events (received,
delivered, delivery_failed) and a latency histogram per stage (compile,
deliver, submit). Labels never carry form content.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest
from starlette.responses import Response

from .interfaces import MetricsClient

LOG = logging.getLogger(__name__)

SUBMISSION_EVENTS = Counter(
    "intake_submissions_total",
    "Intake submission events by stage and outcome",
    ["stage", "name"],
)
STAGE_LATENCY = Histogram(
    "intake_stage_latency_seconds",
    "Intake stage latency in seconds",
    ["stage", "name"],
    buckets=(0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0),
)


class PrometheusMetrics(MetricsClient):
    def observe_latency(self, name: str, value: float, **labels: str) -> None:
        STAGE_LATENCY.labels(stage=labels.get("stage", "unknown"), name=name).observe(value)

    def increment(self, name: str, amount: int = 1, **labels: str) -> None:
        SUBMISSION_EVENTS.labels(stage=labels.get("stage", "unknown"), name=name).inc(amount)

    @classmethod
    def instrument_app(cls, app: FastAPI) -> "PrometheusMetrics":
        """Expose ``/metrics`` on ``app`` (idempotent) and return a client."""
        if not getattr(app.state, "metrics_route", False):
            app.add_api_route("/metrics", _metrics_endpoint, methods=["GET"], include_in_schema=False)
            app.state.metrics_route = True
        return cls()


async def _metrics_endpoint() -> Response:
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


class NullMetrics(MetricsClient):
    """Used when ENABLE_METRICS is off; drops every observation."""

    def observe_latency(self, name: str, value: float, **labels: str) -> None:
        LOG.debug("metric dropped: %s=%s", name, value)

    def increment(self, name: str, amount: int = 1, **labels: str) -> None:
        LOG.debug("counter dropped: %s+=%s", name, amount)


__all__ = ["NullMetrics", "PrometheusMetrics", "STAGE_LATENCY", "SUBMISSION_EVENTS"]
