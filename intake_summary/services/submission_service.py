"""Compile an intake submission into a narrative and hand it to a sender."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Mapping

from intake_summary.errors import EmailDeliveryError
from intake_summary.models.messages import DeliveryReceipt, NarrativeEmail
from intake_summary.narrative import render_sections
from intake_summary.utils.logging_utils import stage_marker, structured_log

from .interfaces import MetricsClient, NarrativeSender
from .metrics import NullMetrics

LOG = logging.getLogger(__name__)
_COMPONENT = "submission_service"


@dataclass(slots=True)
class CompiledNarrative:
    text: str
    section_count: int


@dataclass(slots=True)
class SubmissionOutcome:
    narrative: CompiledNarrative
    receipt: DeliveryReceipt


def compile_submission(
    submission: Mapping[str, Any], metrics: MetricsClient | None = None
) -> CompiledNarrative:
    with stage_marker(
        LOG, stage="compile", metrics=metrics, component=_COMPONENT, field_count=len(submission)
    ) as stage:
        sections = render_sections(submission)
        text = "".join(sections).strip()
        stage.note(section_count=len(sections), narrative_chars=len(text))
    return CompiledNarrative(text=text, section_count=len(sections))


class SubmissionService:
    """Turns one submitted form into a delivered office email."""

    def __init__(
        self,
        *,
        sender: NarrativeSender,
        from_address: str,
        office_email: str,
        metrics: MetricsClient | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.sender = sender
        self.from_address = from_address
        self.office_email = office_email
        self.metrics = metrics or NullMetrics()
        self._today = today

    async def submit(self, submission: Mapping[str, Any]) -> SubmissionOutcome:
        started = time.perf_counter()
        self.metrics.increment("received", stage="submit")
        compiled = compile_submission(submission, self.metrics)
        if not compiled.text:
            structured_log(LOG, logging.INFO, "empty_narrative", component=_COMPONENT, field_count=len(submission))
        email = NarrativeEmail.compose(
            submission=submission,
            narrative=compiled.text,
            sender=self.from_address,
            recipient=self.office_email,
            day=self._today(),
        )
        try:
            async with stage_marker(LOG, stage="deliver", metrics=self.metrics, component=_COMPONENT) as stage:
                receipt = await self.sender.send_narrative(email)
                stage.note(message_id=receipt.message_id, attempt=receipt.attempts)
        except EmailDeliveryError:
            self.metrics.increment("delivery_failed", stage="deliver")
            raise
        self.metrics.increment("delivered", stage="deliver")
        self.metrics.observe_latency("submit_seconds", time.perf_counter() - started, stage="submit")
        return SubmissionOutcome(narrative=compiled, receipt=receipt)


__all__ = ["CompiledNarrative", "SubmissionOutcome", "SubmissionService", "compile_submission"]
