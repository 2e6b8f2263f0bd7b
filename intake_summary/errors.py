"""Custom exception hierarchy for the intake summary service.

These errors provide typed failure modes so FastAPI handlers can map them to
HTTP responses and logs can be structured consistently. The narrative
compiler itself never raises for field content.
"""
from __future__ import annotations

class ValidationError(Exception):
    """Raised when a request body cannot be read as a field mapping."""


class ConfigurationError(RuntimeError):
    """Raised when email delivery settings are missing."""


class EmailDeliveryError(Exception):
    """Raised when the email provider rejects or never accepts a narrative."""


__all__ = [
    "ValidationError",
    "ConfigurationError",
    "EmailDeliveryError",
]
