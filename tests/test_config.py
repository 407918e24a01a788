"""Tests for settings construction."""

import pytest
from pydantic import ValidationError

from carddesk.core.config import SecuritySettings, Settings


def test_missing_secret_key_refuses_to_build(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SECURITY__SECRET_KEY", raising=False)
    with pytest.raises(ValidationError):
        Settings()


def test_secret_key_read_from_nested_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SECURITY__SECRET_KEY", "an-environment-provided-secret")
    monkeypatch.setenv("WITHDRAWALS__MAX_BALANCE_RETRIES", "3")
    settings = Settings()
    assert settings.security.secret_key == "an-environment-provided-secret"
    assert settings.withdrawals.max_balance_retries == 3
    assert settings.security.access_token_expire_minutes == 60
    assert not hasattr(settings, "secret_key")
    assert settings.security.bcrypt_rounds == 10


@pytest.mark.parametrize("secret", ["short", "change-me-in-production", "Your-Secret-Key-Here"])
def test_weak_secret_keys_rejected(secret):
    with pytest.raises(ValidationError):
        SecuritySettings(secret_key=secret)


def test_settings_are_immutable(settings):
    with pytest.raises(ValidationError):
        settings.debug = True
