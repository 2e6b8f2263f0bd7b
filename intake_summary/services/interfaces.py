"""Shared interfaces used across intake summary services."""

from __future__ import annotations

from typing import Protocol

from intake_summary.models.messages import DeliveryReceipt, NarrativeEmail


class NarrativeSender(Protocol):
    """Delivers a compiled narrative; raises EmailDeliveryError on failure."""

    async def send_narrative(self, email: NarrativeEmail) -> DeliveryReceipt: ...


class MetricsClient(Protocol):
    """Interface for emitting metrics to Prometheus."""

    def observe_latency(self, name: str, value: float, **labels: str) -> None: ...

    def increment(self, name: str, amount: int = 1, **labels: str) -> None: ...


__all__ = ["NarrativeSender", "MetricsClient"]
