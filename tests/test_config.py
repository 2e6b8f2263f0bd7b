import pytest

from intake_summary.config import MAILGUN_EU_URL, MAILGUN_US_URL, AppConfig, parse_bool
from intake_summary.errors import ConfigurationError


def test_config_missing_required():
    cfg = AppConfig()
    assert not cfg.email_configured
    assert cfg.missing_email_settings() == ["MAILGUN_API_KEY", "MAILGUN_DOMAIN", "OFFICE_EMAIL", "FROM_EMAIL"]
    with pytest.raises(ConfigurationError) as exc:
        cfg.validate_required()
    assert "MAILGUN_DOMAIN" in str(exc.value)


def test_config_success(email_env):
    cfg = AppConfig()
    cfg.validate_required()  # no exception
    assert cfg.email_configured
    assert cfg.sender_address == "Office Form <forms@example.test>"
    assert cfg.mailgun_base_url == MAILGUN_US_URL


def test_config_rejects_blank_values(monkeypatch, email_env):
    monkeypatch.setenv("OFFICE_EMAIL", "   ")
    cfg = AppConfig()
    assert cfg.missing_email_settings() == ["OFFICE_EMAIL"]


@pytest.mark.parametrize("raw,expected", [("1", True), ("eu", True), ("false", False), ("0", False), ("", False)])
def test_mailgun_eu_region(monkeypatch, raw, expected):
    monkeypatch.setenv("MAILGUN_EU", raw)
    cfg = AppConfig()
    assert cfg.mailgun_eu is expected
    assert cfg.mailgun_base_url == (MAILGUN_EU_URL if expected else MAILGUN_US_URL)


def test_cors_origins_parsing(monkeypatch):
    assert AppConfig().cors_origins == ["*"]
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.com, https://b.com,")
    assert AppConfig().cors_origins == ["https://a.com", "https://b.com"]


def test_parse_bool():
    assert parse_bool("YES")
    assert parse_bool(" on ")
    assert not parse_bool(None)
    assert not parse_bool("nope")
