"""
Messaging Provider - Abstraction Layer for WhatsApp Messaging
==============================================================

Sends pre-approved template messages (business-initiated contact requires
templates). The Cloud API provider is the production backend; tests swap in
their own MessagingProvider.

USAGE:
    provider = CloudAPIProvider(settings.whatsapp)
    provider.send_template("919999999999", "review_request", "en", ["Asha"])

CONTRACT:
- One POST per message, no retries
- Any transport or provider error is logged and reported as False
- Never raises to the caller
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional, Sequence

import requests

from src.domain.models import NotificationRequest
from ..config.settings import WhatsAppSettings

logger = logging.getLogger(__name__)


class MessagingProvider(ABC):
    """
    Abstract base class for WhatsApp messaging providers.
    Implement this interface to add new messaging backends.
    """

    @abstractmethod
    def send(self, request: NotificationRequest) -> bool:
        """Send a template message. Returns True if the provider accepted it."""
        ...

    def send_template(
        self,
        recipient: str,
        template_name: str,
        language_code: str,
        parameters: Optional[Sequence[str]] = None,
    ) -> bool:
        """Build a NotificationRequest and send it."""
        request = NotificationRequest(
            recipient=recipient,
            template_name=template_name,
            language_code=language_code,
            body_parameters=list(parameters or []),
        )
        return self.send(request)


class CloudAPIProvider(MessagingProvider):
    """
    Meta WhatsApp Cloud API provider.

    POST {api_url}/{phone_number_id}/messages
    Headers: Authorization: Bearer {api_token}
    """

    def __init__(self, settings: WhatsAppSettings, session: Optional[requests.Session] = None):
        self._phone_number_id = settings.phone_number_id
        self._api_token = settings.api_token
        self._api_url = settings.api_url.rstrip("/")
        self._timeout = settings.timeout_seconds
        self._session = session or requests.Session()

    @property
    def messages_url(self) -> str:
        return f"{self._api_url}/{self._phone_number_id}/messages"

    def is_configured(self) -> bool:
        return bool(self._phone_number_id and self._api_token)

    def send(self, request: NotificationRequest) -> bool:
        if not self.is_configured():
            logger.error(
                f"Cannot send '{request.template_name}' to {request.recipient}: "
                "WhatsApp phone number id or API token missing"
            )
            return False

        headers = {
            "Authorization": f"Bearer {self._api_token}",
            "Content-Type": "application/json",
        }

        try:
            response = self._session.post(
                self.messages_url,
                headers=headers,
                json=request.to_payload(),
                timeout=self._timeout,
            )
            response.raise_for_status()

        except requests.HTTPError as e:
            logger.error(
                f"Error sending WhatsApp message to {request.recipient}: "
                f"{self._error_detail(e.response)}"
            )
            return False

        except requests.RequestException as e:
            logger.error(f"Error sending WhatsApp message to {request.recipient}: {e}")
            return False

        except Exception as e:
            logger.exception(f"Unexpected error sending WhatsApp message: {e}")
            return False

        logger.info(f"Message sent to {request.recipient} ({request.template_name}/{request.language_code})")
        return True

    @staticmethod
    def _error_detail(response: Optional[requests.Response]) -> str:
        """Provider error body if it is JSON, otherwise status and text."""
        if response is None:
            return "no response"
        try:
            return str(response.json())
        except ValueError:
            return f"HTTP {response.status_code}: {response.text[:200]}"
