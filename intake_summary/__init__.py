"""Patient intake form → plain-text clinical narrative service."""

from intake_summary.narrative import build_narrative

__all__ = ["build_narrative"]
