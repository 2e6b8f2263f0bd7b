"""Configuration for the intake summary service.

Only exposes the environment variables needed to deliver intake narratives
to the office mailbox.

Variables (env names in parentheses):
 - MAILGUN_API_KEY
 - MAILGUN_DOMAIN
 - MAILGUN_EU (send through the EU region endpoint)
 - OFFICE_EMAIL (recipient)
 - FROM_EMAIL / FROM_NAME (sender)
 - ALLOWED_ORIGINS (comma separated CORS origins, ``*`` by default)
"""
from __future__ import annotations

from functools import lru_cache
from typing import List

from pydantic import Field, AliasChoices
from pydantic_settings import BaseSettings, SettingsConfigDict

from intake_summary.errors import ConfigurationError

MAILGUN_US_URL = "https://api.mailgun.net"
MAILGUN_EU_URL = "https://api.eu.mailgun.net"


def parse_bool(value: str | None) -> bool:
    if value is None:
        return False
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


class AppConfig(BaseSettings):
    mailgun_api_key: str | None = Field(None, validation_alias='MAILGUN_API_KEY')
    mailgun_domain: str | None = Field(None, validation_alias='MAILGUN_DOMAIN')
    # Raw env capture; any non-empty value other than a false-ish literal selects the EU region.
    mailgun_eu_raw: str | bool | None = Field(False, validation_alias='MAILGUN_EU')
    office_email: str | None = Field(None, validation_alias=AliasChoices('OFFICE_EMAIL', 'OFFICE_RECIPIENT'))
    from_email: str | None = Field(None, validation_alias='FROM_EMAIL')
    from_name: str = Field('Office Form', validation_alias='FROM_NAME')
    allowed_origins_raw: str = Field('*', validation_alias='ALLOWED_ORIGINS')
    mailgun_timeout_seconds: float = Field(10.0, validation_alias='MAILGUN_TIMEOUT_SECONDS')
    mailgun_max_attempts: int = Field(3, validation_alias='MAILGUN_MAX_ATTEMPTS')

    model_config = SettingsConfigDict(env_file='.env', extra='ignore', case_sensitive=False)

    @property
    def mailgun_eu(self) -> bool:
        raw = self.mailgun_eu_raw
        if isinstance(raw, bool):
            return raw
        if raw is None:
            return False
        text = str(raw).strip().lower()
        if text in {"", "0", "false", "no", "off"}:
            return False
        return True

    @property
    def mailgun_base_url(self) -> str:
        return MAILGUN_EU_URL if self.mailgun_eu else MAILGUN_US_URL

    @property
    def cors_origins(self) -> List[str]:
        origins = [item.strip() for item in self.allowed_origins_raw.split(",")]
        return [origin for origin in origins if origin] or ["*"]

    @property
    def sender_address(self) -> str:
        return f"{self.from_name} <{self.from_email}>"

    def missing_email_settings(self) -> List[str]:
        required_pairs = [
            (self.mailgun_api_key, "MAILGUN_API_KEY"),
            (self.mailgun_domain, "MAILGUN_DOMAIN"),
            (self.office_email, "OFFICE_EMAIL"),
            (self.from_email, "FROM_EMAIL"),
        ]
        return [env_name for value, env_name in required_pairs if not (value or "").strip()]

    @property
    def email_configured(self) -> bool:
        return not self.missing_email_settings()

    def validate_required(self) -> None:
        missing = self.missing_email_settings()
        if missing:
            raise ConfigurationError("Missing environment variables: " + ", ".join(missing))
        if self.mailgun_max_attempts < 1:
            raise ConfigurationError("MAILGUN_MAX_ATTEMPTS must be at least 1")


@lru_cache
def get_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = ["AppConfig", "get_config", "parse_bool"]
