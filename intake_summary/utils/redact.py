"""Scrub patient identifiers from log lines and provider error bodies."""

from __future__ import annotations

import re

REDACTION_TOKEN = "[REDACTED]"

# Order matters: SSNs and long digit runs would otherwise be half-eaten by the phone pattern.
PHI_PATTERNS: dict[str, re.Pattern[str]] = {
    "email": re.compile(r"\b[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}\b", re.IGNORECASE),
    "ssn": re.compile(r"\b\d{3}-\d{2}-\d{4}\b"),
    "health_card": re.compile(r"\b\d{8,}\b"),
    "phone": re.compile(r"(?:\+?1[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}\b"),
}


def redact_text(value: str) -> str:
    """Replace every PHI pattern match with the redaction token."""
    for pattern in PHI_PATTERNS.values():
        value = pattern.sub(REDACTION_TOKEN, value)
    return value


def truncate_redacted(value: str, limit: int = 500) -> str:
    """Redact then clip a provider response body for error messages."""
    scrubbed = redact_text(value)
    if len(scrubbed) <= limit:
        return scrubbed
    return scrubbed[:limit] + "..."


__all__ = ["PHI_PATTERNS", "REDACTION_TOKEN", "redact_text", "truncate_redacted"]
