import pytest
from pydantic import ValidationError

from core.config import Settings
from tests.fakes import make_settings

REQUIRED = ["DATABASE_URL", "MAIL_USERNAME", "MAIL_PASSWORD", "MAIL_FROM", "MAIL_SERVER", "OWNER_EMAIL"]


def test_defaults():
    settings = make_settings()
    assert settings.MAIL_PORT == 587
    assert settings.NOTIFICATION_REQUIRED is False
    assert settings.MAIL_STARTTLS is True


@pytest.mark.parametrize("name", REQUIRED)
def test_missing_required_value_fails_fast(monkeypatch, name):
    for key in REQUIRED:
        monkeypatch.setenv(key, "owner@example.com" if key in ("MAIL_FROM", "OWNER_EMAIL") else "value")
    monkeypatch.delenv(name)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_notification_policy_from_environment(monkeypatch):
    monkeypatch.setenv("NOTIFICATION_REQUIRED", "true")
    settings = make_settings()
    assert settings.NOTIFICATION_REQUIRED is True
