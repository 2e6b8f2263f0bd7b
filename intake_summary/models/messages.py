"""Typed messages exchanged between the submit route and delivery transports."""

from __future__ import annotations

import html
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any, Mapping

ISO8601 = "%Y-%m-%dT%H:%M:%S.%fZ"
UNKNOWN_PATIENT = "Unknown"
HTML_TEMPLATE = '<pre style="font-family:sans-serif;white-space:pre-wrap;">{body}</pre>'


def _now_utc() -> str:
    return datetime.now(tz=timezone.utc).strftime(ISO8601)


def display_name(submission: Mapping[str, Any]) -> str:
    """Preferred name, then full name, as typed on the form."""
    for key in ("preferredName", "fullName"):
        value = submission.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return UNKNOWN_PATIENT


def format_subject(name: str, day: date) -> str:
    return f"New Patient Form: {name} - {day.month}/{day.day}/{day.year}"


def narrative_html(text: str) -> str:
    return HTML_TEMPLATE.format(body=html.escape(text, quote=False))


@dataclass(slots=True)
class NarrativeEmail:
    """One intake narrative addressed to the office mailbox."""

    sender: str
    recipient: str
    subject: str
    text: str
    html: str = ""
    created_at: str = field(default_factory=_now_utc)

    @classmethod
    def compose(
        cls,
        *,
        submission: Mapping[str, Any],
        narrative: str,
        sender: str,
        recipient: str,
        day: date,
    ) -> "NarrativeEmail":
        return cls(
            sender=sender,
            recipient=recipient,
            subject=format_subject(display_name(submission), day),
            text=narrative,
            html=narrative_html(narrative),
        )

    def to_form(self) -> dict[str, str]:
        return {
            "from": self.sender,
            "to": self.recipient,
            "subject": self.subject,
            "text": self.text,
            "html": self.html,
        }


@dataclass(slots=True)
class DeliveryReceipt:
    message_id: str | None
    provider: str
    attempts: int = 1
    delivered_at: str = field(default_factory=_now_utc)


__all__ = [
    "DeliveryReceipt",
    "NarrativeEmail",
    "display_name",
    "format_subject",
    "narrative_html",
]
