"""Pytest fixtures for testing"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from src.infrastructure.config.settings import (
    RazorpaySettings,
    Settings,
    WhatsAppSettings,
)
from src.infrastructure.reviews import OwnerNotifier, ReviewPublisher
from src.infrastructure.whatsapp import MessagingProvider
from src.web.app import create_app

from tests.helpers import VERIFY_TOKEN, WEBHOOK_SECRET


@pytest.fixture
def settings() -> Settings:
    """Settings built explicitly, independent of the process environment"""
    return Settings(
        razorpay=RazorpaySettings(webhook_secret=WEBHOOK_SECRET),
        whatsapp=WhatsAppSettings(
            phone_number_id="1234567890",
            api_token="test_token",
            api_url="https://graph.example.test/v17.0",
            verify_token=VERIFY_TOKEN,
        ),
    )


@pytest.fixture
def notifier() -> MagicMock:
    mock = MagicMock(spec=MessagingProvider)
    mock.send_template.return_value = True
    return mock


@pytest.fixture
def publisher() -> MagicMock:
    return MagicMock(spec=ReviewPublisher)


@pytest.fixture
def owner_notifier() -> MagicMock:
    return MagicMock(spec=OwnerNotifier)


@pytest.fixture
def client(settings, notifier, publisher, owner_notifier) -> TestClient:
    """FastAPI test client with fake outbound collaborators"""
    app = create_app(
        settings=settings,
        notifier=notifier,
        publisher=publisher,
        owner_notifier=owner_notifier,
    )
    return TestClient(app)
