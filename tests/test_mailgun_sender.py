from __future__ import annotations

from datetime import date
from typing import List
from urllib.parse import parse_qs

import httpx
import pytest

from intake_summary.config import AppConfig
from intake_summary.errors import EmailDeliveryError
from intake_summary.models.messages import NarrativeEmail
from intake_summary.services.mailgun import MailgunSender


def _email() -> NarrativeEmail:
    return NarrativeEmail.compose(
        submission={"fullName": "Jane Doe"},
        narrative="CONTACT\nFull name: Jane Doe",
        sender="Office Form <forms@example.test>",
        recipient="office@example.test",
        day=date(2026, 3, 9),
    )


def _sender(handler, **kwargs) -> MailgunSender:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return MailgunSender(
        api_key="key-test",
        domain="mg.example.test",
        max_wait=0,
        client=client,
        **kwargs,
    )


@pytest.mark.asyncio
async def test_send_posts_form_to_messages_endpoint():
    seen: List[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"id": "<abc@mg.example.test>", "message": "Queued. Thank you."})

    receipt = await _sender(handler).send_narrative(_email())

    assert receipt.message_id == "<abc@mg.example.test>"
    assert receipt.provider == "mailgun"
    assert receipt.attempts == 1
    request = seen[0]
    assert str(request.url) == "https://api.mailgun.net/v3/mg.example.test/messages"
    assert request.headers["authorization"].startswith("Basic ")
    form = parse_qs(request.content.decode("utf-8"))
    assert form["to"] == ["office@example.test"]
    assert form["subject"] == ["New Patient Form: Jane Doe - 3/9/2026"]
    assert form["text"] == ["CONTACT\nFull name: Jane Doe"]


@pytest.mark.asyncio
async def test_send_retries_server_errors_then_succeeds():
    calls = {"count": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        calls["count"] += 1
        if calls["count"] < 3:
            return httpx.Response(503, text="unavailable")
        return httpx.Response(200, json={"id": "<ok@mg>"})

    receipt = await _sender(handler, max_attempts=3).send_narrative(_email())
    assert calls["count"] == 3
    assert receipt.attempts == 3


@pytest.mark.asyncio
async def test_send_gives_up_after_max_attempts():
    calls = {"count": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        calls["count"] += 1
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(EmailDeliveryError) as exc:
        await _sender(handler, max_attempts=2).send_narrative(_email())
    assert calls["count"] == 2
    assert "2 attempt" in str(exc.value)


@pytest.mark.asyncio
async def test_client_errors_are_not_retried_and_are_redacted():
    calls = {"count": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        calls["count"] += 1
        return httpx.Response(400, json={"message": "to parameter is not a valid address: bad@example"})

    with pytest.raises(EmailDeliveryError) as exc:
        await _sender(handler, max_attempts=3).send_narrative(_email())
    assert calls["count"] == 1
    assert "400" in str(exc.value)


@pytest.mark.asyncio
async def test_invalid_domain_fails_without_retry():
    calls = {"count": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        calls["count"] += 1
        return httpx.Response(200, json={"id": "<never@mg>"})

    sender = MailgunSender(
        api_key="key-test",
        domain="mg.example\x01.test",
        max_attempts=3,
        max_wait=0,
        client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )
    with pytest.raises(EmailDeliveryError) as exc:
        await sender.send_narrative(_email())
    assert calls["count"] == 0
    assert "not a valid URL" in str(exc.value)


def test_from_config_uses_region_endpoint(monkeypatch, email_env):
    monkeypatch.setenv("MAILGUN_EU", "true")
    sender = MailgunSender.from_config(AppConfig())
    assert sender.messages_url == "https://api.eu.mailgun.net/v3/mg.example.test/messages"


def test_sender_requires_credentials():
    with pytest.raises(EmailDeliveryError):
        MailgunSender(api_key="", domain="mg.example.test")
