"""Request builders shared by the webhook tests"""

import json

from src.infrastructure.security import compute_signature

WEBHOOK_SECRET = "test_webhook_secret"
VERIFY_TOKEN = "test_verify_token"


def sign(raw_body: bytes, secret: str = WEBHOOK_SECRET) -> dict[str, str]:
    """Headers for a correctly signed Razorpay request"""
    return {
        "X-Razorpay-Signature": compute_signature(raw_body, secret),
        "Content-Type": "application/json",
    }


def payment_body(
    event: str = "payment.captured",
    contact: str = "+919999999999",
    amount: int = 50000,
    email: str = "customer@example.com",
    notes=None,
) -> bytes:
    entity = {
        "id": "pay_29QQoUBi66xm2f",
        "amount": amount,
        "currency": "INR",
        "contact": contact,
        "email": email,
        "notes": notes or [],
    }
    return json.dumps({
        "entity": "event",
        "event": event,
        "payload": {"payment": {"entity": entity}},
    }).encode()


def whatsapp_body(message: dict = None, profile_name: str = "Asha") -> dict:
    value = {
        "messaging_product": "whatsapp",
        "metadata": {"phone_number_id": "1234567890"},
        "contacts": [{"profile": {"name": profile_name}, "wa_id": "919999999999"}],
    }
    if message is not None:
        value["messages"] = [message]
    return {
        "object": "whatsapp_business_account",
        "entry": [{"id": "WABA_ID", "changes": [{"field": "messages", "value": value}]}],
    }


def button_message(button_id: str, sender: str = "919999999999") -> dict:
    return {
        "from": sender,
        "id": "wamid.button",
        "type": "interactive",
        "interactive": {
            "type": "button_reply",
            "button_reply": {"id": button_id, "title": button_id},
        },
    }


def text_message(text: str, sender: str = "919999999999") -> dict:
    return {"from": sender, "id": "wamid.text", "type": "text", "text": {"body": text}}
