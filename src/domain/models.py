"""
Domain Models - Request-Scoped Values
=====================================

Everything here lives for one webhook invocation. Nothing is stored and a
rating reply is never linked back to the payment that triggered the prompt.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Optional

STAR_BUTTON_PATTERN = re.compile(r"star_(\d+)")
MIN_RATING = 1
MAX_RATING = 5


class InvalidPayloadError(ValueError):
    """Raised when a webhook body does not have the expected shape."""
    pass


@dataclass
class PaymentEvent:
    """A captured payment, as delivered by the Razorpay webhook."""
    event_type: str
    contact_phone: str
    amount_minor_units: int
    email: Optional[str] = None
    customer_name: Optional[str] = None

    @property
    def amount(self) -> float:
        """Amount in major units (rupees)."""
        return self.amount_minor_units / 100

    @property
    def display_name(self) -> str:
        """Best available text to guess the customer's language from."""
        return self.customer_name or self.email or ""

    @classmethod
    def from_payload(cls, body: dict[str, Any]) -> "PaymentEvent":
        """Build from a Razorpay body: payload.payment.entity."""
        try:
            entity = body["payload"]["payment"]["entity"]
            contact = entity["contact"]
            amount = int(entity["amount"])
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidPayloadError(f"Malformed payment entity: {e!r}") from e

        if not contact:
            raise InvalidPayloadError("Payment entity has no contact phone")

        notes = entity.get("notes") or {}
        name = notes.get("name") if isinstance(notes, dict) else None

        return cls(
            event_type=body.get("event", ""),
            contact_phone=str(contact),
            amount_minor_units=amount,
            email=_optional_text(entity.get("email")),
            customer_name=_optional_text(name),
        )


def _optional_text(value: Any) -> Optional[str]:
    """Keep non-empty strings; merchants sometimes put numbers in notes."""
    if isinstance(value, str) and value:
        return value
    return None


@dataclass
class RatingReply:
    """A star rating or review content sent back by a customer."""
    from_phone: str
    rating: int
    content: Optional[str] = None


@dataclass
class MediaAttachment:
    """Video sent along with a review."""
    filename: str = ""
    content_type: str = ""
    size_bytes: int = 0
    media_id: str = ""

    def describe(self) -> str:
        if self.media_id:
            return f"whatsapp media {self.media_id}"
        return f"{self.filename or 'upload'} ({self.content_type or 'unknown'}, {self.size_bytes} bytes)"


@dataclass
class NotificationRequest:
    """A template message to send through the messaging provider."""
    recipient: str
    template_name: str
    language_code: str
    body_parameters: list[str] = field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        """Render the WhatsApp Cloud API message envelope."""
        components = []
        if self.body_parameters:
            components.append({
                "type": "body",
                "parameters": [{"type": "text", "text": p} for p in self.body_parameters],
            })

        return {
            "messaging_product": "whatsapp",
            "to": self.recipient,
            "type": "template",
            "template": {
                "name": self.template_name,
                "language": {"code": self.language_code},
                "components": components,
            },
        }


def parse_star_rating(button_id: str) -> Optional[int]:
    """
    Parse a quick-reply button id like "star_4".
    Returns None for ids that are not a 1-5 star rating.
    """
    match = STAR_BUTTON_PATTERN.fullmatch(button_id or "")
    if not match:
        return None
    rating = int(match.group(1))
    if rating < MIN_RATING or rating > MAX_RATING:
        return None
    return rating
