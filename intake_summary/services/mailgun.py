"""Mailgun transport for intake narratives.

Posts to the Mailgun messages API with httpx. Network failures, 429 and 5xx
responses are retried with tenacity; any other rejection fails immediately.
"""

from __future__ import annotations

import logging

import httpx
from tenacity import (
    AsyncRetrying,
    RetryError,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)

from intake_summary.config import AppConfig
from intake_summary.errors import EmailDeliveryError
from intake_summary.models.messages import DeliveryReceipt, NarrativeEmail
from intake_summary.utils.logging_utils import structured_log
from intake_summary.utils.redact import truncate_redacted

LOG = logging.getLogger(__name__)

PROVIDER = "mailgun"
_RETRYABLE_STATUS = {429, 500, 502, 503, 504}


class _TransientDeliveryError(Exception):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class MailgunSender:
    """NarrativeSender backed by the Mailgun HTTP API."""

    def __init__(
        self,
        *,
        api_key: str,
        domain: str,
        base_url: str = "https://api.mailgun.net",
        timeout: float = 10.0,
        max_attempts: int = 3,
        max_wait: float = 8.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        if not api_key or not domain:
            raise EmailDeliveryError("Mailgun api_key and domain are required")
        self.api_key = api_key
        self.domain = domain
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_attempts = max(1, max_attempts)
        self.max_wait = max_wait
        self._client = client

    @classmethod
    def from_config(cls, cfg: AppConfig, client: httpx.AsyncClient | None = None) -> "MailgunSender":
        return cls(
            api_key=cfg.mailgun_api_key or "",
            domain=cfg.mailgun_domain or "",
            base_url=cfg.mailgun_base_url,
            timeout=cfg.mailgun_timeout_seconds,
            max_attempts=cfg.mailgun_max_attempts,
            client=client,
        )

    @property
    def messages_url(self) -> str:
        return f"{self.base_url}/v3/{self.domain}/messages"

    async def send_narrative(self, email: NarrativeEmail) -> DeliveryReceipt:
        if self._client is not None:
            return await self._send_with_retry(self._client, email)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await self._send_with_retry(client, email)

    async def _send_with_retry(
        self, client: httpx.AsyncClient, email: NarrativeEmail
    ) -> DeliveryReceipt:
        attempts = 0
        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self.max_attempts),
                wait=wait_random_exponential(multiplier=0.5, max=self.max_wait),
                retry=retry_if_exception_type(_TransientDeliveryError),
            ):
                with attempt:
                    attempts = attempt.retry_state.attempt_number
                    message_id = await self._post(client, email, attempts)
                    return DeliveryReceipt(message_id=message_id, provider=PROVIDER, attempts=attempts)
        except RetryError as exc:
            last = exc.last_attempt.exception()
            raise EmailDeliveryError(
                f"Mailgun delivery failed after {attempts} attempt(s): {last}"
            ) from last
        raise EmailDeliveryError("Mailgun delivery exhausted retries")

    async def _post(self, client: httpx.AsyncClient, email: NarrativeEmail, attempt: int) -> str | None:
        try:
            response = await client.post(
                self.messages_url,
                auth=("api", self.api_key),
                data=email.to_form(),
                timeout=self.timeout,
            )
        except httpx.HTTPError as exc:
            structured_log(
                LOG,
                logging.WARNING,
                "mailgun_transport_error",
                provider=PROVIDER,
                attempt=attempt,
                error_type=exc.__class__.__name__,
            )
            raise _TransientDeliveryError(f"{exc.__class__.__name__}: {exc}") from exc
        except httpx.InvalidURL as exc:
            # httpx.InvalidURL is not an httpx.HTTPError; fail without retry.
            structured_log(
                LOG,
                logging.ERROR,
                "mailgun_invalid_url",
                provider=PROVIDER,
                attempt=attempt,
                error_type=exc.__class__.__name__,
            )
            raise EmailDeliveryError(f"Mailgun endpoint is not a valid URL: {exc}") from exc

        if response.status_code in _RETRYABLE_STATUS:
            structured_log(
                LOG,
                logging.WARNING,
                "mailgun_retryable_status",
                provider=PROVIDER,
                attempt=attempt,
                status_code=response.status_code,
            )
            raise _TransientDeliveryError(
                f"Mailgun responded {response.status_code}", response.status_code
            )
        if response.status_code >= 400:
            detail = truncate_redacted(response.text)
            structured_log(
                LOG,
                logging.ERROR,
                "mailgun_rejected",
                provider=PROVIDER,
                attempt=attempt,
                status_code=response.status_code,
                error=detail,
            )
            raise EmailDeliveryError(f"Mailgun rejected message ({response.status_code}): {detail}")

        try:
            payload = response.json()
        except ValueError:
            payload = {}
        message_id = payload.get("id") if isinstance(payload, dict) else None
        structured_log(
            LOG,
            logging.INFO,
            "mailgun_accepted",
            provider=PROVIDER,
            attempt=attempt,
            status_code=response.status_code,
            message_id=message_id,
        )
        return message_id


__all__ = ["MailgunSender", "PROVIDER"]
