from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

import pytest

from intake_summary.config import get_config
from intake_summary.errors import EmailDeliveryError
from intake_summary.models.messages import DeliveryReceipt, NarrativeEmail

EMAIL_ENV = {
    "MAILGUN_API_KEY": "key-test",
    "MAILGUN_DOMAIN": "mg.example.test",
    "OFFICE_EMAIL": "office@example.test",
    "FROM_EMAIL": "forms@example.test",
    "FROM_NAME": "Office Form",
}

_MANAGED_ENV = (*EMAIL_ENV.keys(), "MAILGUN_EU", "ALLOWED_ORIGINS", "ENABLE_METRICS", "MAILGUN_MAX_ATTEMPTS")


@dataclass
class RecordingSender:
    """In-memory NarrativeSender used in place of Mailgun."""

    fail: bool = False
    sent: List[NarrativeEmail] = field(default_factory=list)

    async def send_narrative(self, email: NarrativeEmail) -> DeliveryReceipt:
        if self.fail:
            raise EmailDeliveryError("provider rejected message")
        self.sent.append(email)
        return DeliveryReceipt(message_id=f"<msg-{len(self.sent)}@example.test>", provider="memory")


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    for name in _MANAGED_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("ENABLE_METRICS", "false")
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def email_env(monkeypatch):
    for name, value in EMAIL_ENV.items():
        monkeypatch.setenv(name, value)
    get_config.cache_clear()
    return EMAIL_ENV


@pytest.fixture
def recording_sender() -> RecordingSender:
    return RecordingSender()
