"""Unit tests for settings and env file loading"""

import pytest

from src.infrastructure.config.settings import (
    GoogleSettings,
    RazorpaySettings,
    Settings,
    ServerSettings,
    WhatsAppSettings,
    load_environment,
)

ENV_KEYS = ["RAZORPAY_WEBHOOK_SECRET", "META_API_TOKEN", "PORT", "WHATSAPP_PHONE_NUMBER_ID"]


@pytest.fixture
def clean_env(monkeypatch):
    """Unset the keys under test; anything loaded later is undone too"""
    for key in ENV_KEYS:
        monkeypatch.setenv(key, "placeholder")
        monkeypatch.delenv(key)
    return monkeypatch


def test_local_file_overrides_base_file(tmp_path, clean_env):
    (tmp_path / ".env.local").write_text("RAZORPAY_WEBHOOK_SECRET=local_secret\n")
    (tmp_path / ".env").write_text(
        "RAZORPAY_WEBHOOK_SECRET=base_secret\nMETA_API_TOKEN=base_token\n"
    )

    load_environment(tmp_path)

    assert RazorpaySettings().webhook_secret == "local_secret"
    assert WhatsAppSettings().api_token == "base_token"


def test_process_environment_wins(tmp_path, clean_env):
    clean_env.setenv("PORT", "8080")
    (tmp_path / ".env.local").write_text("PORT=9000\n")

    load_environment(tmp_path)

    assert ServerSettings().port == 8080


def test_missing_files_are_fine(tmp_path, clean_env):
    load_environment(tmp_path)

    assert ServerSettings().port == 3000
    assert RazorpaySettings().webhook_secret == ""


def test_defaults(clean_env):
    settings = Settings()

    assert settings.whatsapp.api_url == "https://graph.facebook.com/v17.0"
    assert settings.whatsapp.max_upload_bytes == 10 * 1024 * 1024
    assert settings.templates.review_request == "review_request"
    assert settings.templates.upload_request == "upload_request"
    assert settings.templates.feedback_request == "feedback_request"
    assert settings.review.positive_threshold == 4


def test_validate_reports_missing_secrets(clean_env):
    settings = Settings(
        razorpay=RazorpaySettings(webhook_secret=""),
        whatsapp=WhatsAppSettings(phone_number_id="", api_token=""),
        google=GoogleSettings(client_id="", client_secret="", refresh_token=""),
    )

    issues = settings.validate()

    assert len(issues) == 3
    assert any("RAZORPAY_WEBHOOK_SECRET" in issue for issue in issues)


def test_validate_clean_settings():
    settings = Settings(
        razorpay=RazorpaySettings(webhook_secret="s"),
        whatsapp=WhatsAppSettings(phone_number_id="1", api_token="t"),
        google=GoogleSettings(client_id="c", client_secret="s", refresh_token="r"),
    )

    assert settings.validate() == []
