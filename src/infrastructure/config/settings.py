"""
Settings Module - Centralized Configuration Management
=======================================================

ARCHITECTURAL DECISION:
- All configuration is loaded from environment variables (no hardcoded secrets)
- Settings are immutable dataclass for safety and clarity
- One Settings object is built at startup and handed to every component,
  so tests can pass their own instead of touching the process environment

ENV FILES:
- .env.local is loaded first, then .env
- Neither overrides a variable that is already set, so the precedence is
  process environment > .env.local > .env
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from functools import lru_cache
from typing import Union

from dotenv import load_dotenv

LOCAL_ENV_FILE = ".env.local"
BASE_ENV_FILE = ".env"


def load_environment(base_dir: Union[str, Path] = ".") -> None:
    """Load .env.local then .env from base_dir into os.environ."""
    base_dir = Path(base_dir)
    load_dotenv(base_dir / LOCAL_ENV_FILE, override=False)
    load_dotenv(base_dir / BASE_ENV_FILE, override=False)


def _env(name: str, default: str = "") -> str:
    return os.getenv(name, default)


@dataclass(frozen=True)
class RazorpaySettings:
    """Payment webhook settings."""

    webhook_secret: str = field(default_factory=lambda: _env("RAZORPAY_WEBHOOK_SECRET"))
    signature_header: str = "X-Razorpay-Signature"
    captured_event: str = "payment.captured"


@dataclass(frozen=True)
class WhatsAppSettings:
    """WhatsApp Cloud API settings."""

    phone_number_id: str = field(default_factory=lambda: _env("WHATSAPP_PHONE_NUMBER_ID"))
    api_token: str = field(default_factory=lambda: _env("META_API_TOKEN"))
    api_url: str = field(
        default_factory=lambda: _env("WHATSAPP_API_URL", "https://graph.facebook.com/v17.0")
    )

    # Pre-shared token for the subscription handshake (GET /webhooks/whatsapp)
    verify_token: str = field(
        default_factory=lambda: _env("WHATSAPP_VERIFY_TOKEN", "whatsapp_verify_token_2025")
    )

    timeout_seconds: int = 15

    # Inbound video attachments (multipart "video" field)
    max_upload_bytes: int = 10 * 1024 * 1024


@dataclass(frozen=True)
class TemplateSettings:
    """Pre-approved template names and languages."""

    review_request: str = "review_request"
    upload_request: str = "upload_request"
    feedback_request: str = "feedback_request"

    default_language: str = "en"
    local_language: str = "hi"


@dataclass(frozen=True)
class ReviewSettings:
    """Review routing settings."""

    # Ratings at or above this go toward the public review flow
    positive_threshold: int = 4
    default_reviewer_name: str = "Customer"
    video_placeholder: str = "[Video Review]"


@dataclass(frozen=True)
class GoogleSettings:
    """Google Business Profile OAuth settings."""

    client_id: str = field(default_factory=lambda: _env("GOOGLE_CLIENT_ID"))
    client_secret: str = field(default_factory=lambda: _env("GOOGLE_CLIENT_SECRET"))
    refresh_token: str = field(default_factory=lambda: _env("GOOGLE_REFRESH_TOKEN"))
    account_id: str = field(default_factory=lambda: _env("GOOGLE_ACCOUNT_ID"))
    location_id: str = field(default_factory=lambda: _env("GOOGLE_LOCATION_ID"))

    @property
    def has_credentials(self) -> bool:
        return bool(self.client_id and self.client_secret and self.refresh_token)

    @property
    def location_path(self) -> str:
        return f"accounts/{self.account_id}/locations/{self.location_id}"


@dataclass(frozen=True)
class ServerSettings:
    """HTTP listener settings."""

    host: str = field(default_factory=lambda: _env("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(_env("PORT", "3000")))


@dataclass(frozen=True)
class Settings:
    """
    Root settings container - Single source of truth for all configuration.

    Usage:
        from src.infrastructure.config import get_settings
        settings = get_settings()
        print(settings.whatsapp.phone_number_id)
    """

    razorpay: RazorpaySettings = field(default_factory=RazorpaySettings)
    whatsapp: WhatsAppSettings = field(default_factory=WhatsAppSettings)
    templates: TemplateSettings = field(default_factory=TemplateSettings)
    review: ReviewSettings = field(default_factory=ReviewSettings)
    google: GoogleSettings = field(default_factory=GoogleSettings)
    server: ServerSettings = field(default_factory=ServerSettings)

    def validate(self) -> list[str]:
        """
        Validate settings and return list of warnings/errors.
        Returns empty list if all settings are valid.
        """
        issues = []

        if not self.razorpay.webhook_secret:
            issues.append(
                "WARNING: RAZORPAY_WEBHOOK_SECRET not set. "
                "Every payment webhook will be rejected."
            )

        if not self.whatsapp.phone_number_id or not self.whatsapp.api_token:
            issues.append(
                "WARNING: WHATSAPP_PHONE_NUMBER_ID or META_API_TOKEN not set. "
                "Template messages will not be sent."
            )

        if not self.google.has_credentials:
            issues.append(
                "WARNING: Google OAuth credentials not set. "
                "Review intents will only be logged."
            )

        return issues


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get singleton Settings instance.
    Cached to ensure consistent settings throughout application lifecycle.
    """
    load_environment()
    return Settings()
