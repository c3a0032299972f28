"""
FastAPI Web Application - Review Relay Webhooks
===============================================

Stateless webhook endpoints:
- POST /webhooks/razorpay   payment.captured -> review_request template
- GET  /webhooks/whatsapp   subscription verification handshake
- POST /webhooks/whatsapp   star rating replies and review content
- GET  /privacy, /terms     compliance pages

Outbound calls are fire-and-forget: a failed send is logged and the webhook is
still acknowledged, so the provider does not redeliver and prompt twice.
"""

import json
import logging
from typing import Any, Optional
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from pydantic import BaseModel

from src.domain import (
    InvalidPayloadError,
    MediaAttachment,
    PaymentEvent,
    RatingReply,
    detect_language,
    parse_star_rating,
)
from src.infrastructure.config import Settings, get_settings
from src.infrastructure.reviews import OwnerNotifier, ReviewPublisher
from src.infrastructure.security import verify_signature
from src.infrastructure.whatsapp import CloudAPIProvider, MessagingProvider

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# There is no session linking content to an earlier star rating, so any
# text or video reply is treated as a top rating.
ASSUMED_CONTENT_RATING = 5

# ── Static Pages ───────────────────────────────────────────────────
STATUS_TEXT = "WhatsApp Review Automation Server is Running"
PRIVACY_HTML = (
    "<h1>Privacy Policy</h1><p>We collect phone numbers solely for the purpose of "
    "sending review requests. Data is not shared with third parties.</p>"
)
TERMS_HTML = (
    "<h1>Terms of Service</h1><p>By using this service, you agree to receive "
    "WhatsApp messages for feedback purposes.</p>"
)


class WebhookAck(BaseModel):
    """Body returned to providers once a webhook is processed."""
    status: str = "ok"


class PayloadTooLargeError(Exception):
    """Raised when an uploaded video exceeds the configured cap."""
    pass


# ══════════════════════════════════════════════════════════════════
#  HANDLERS
# ══════════════════════════════════════════════════════════════════

async def handle_payment_captured(
    event: PaymentEvent,
    settings: Settings,
    notifier: MessagingProvider,
) -> None:
    """Ask the paying customer for a rating."""
    templates = settings.templates
    language = detect_language(
        event.display_name, templates.default_language, templates.local_language
    )
    name = event.customer_name or settings.review.default_reviewer_name

    logger.info(f"Payment captured: {event.amount:.2f} from {event.contact_phone}, language={language}")

    await run_in_threadpool(
        notifier.send_template,
        event.contact_phone,
        templates.review_request,
        language,
        [name],
    )


async def handle_star_rating(
    reply: RatingReply,
    profile_name: str,
    settings: Settings,
    notifier: MessagingProvider,
    owner_notifier: OwnerNotifier,
) -> None:
    """High ratings are asked to elaborate, low ratings for private feedback."""
    templates = settings.templates
    language = detect_language(
        profile_name, templates.default_language, templates.local_language
    )

    if reply.rating >= settings.review.positive_threshold:
        template = templates.upload_request
    else:
        template = templates.feedback_request
        owner_notifier.notify(reply.from_phone, reply.rating)

    logger.info(f"Rating {reply.rating} from {reply.from_phone}, sending {template}")
    await run_in_threadpool(notifier.send_template, reply.from_phone, template, language)


async def handle_whatsapp_message(
    body: dict[str, Any],
    media: Optional[MediaAttachment],
    settings: Settings,
    notifier: MessagingProvider,
    publisher: ReviewPublisher,
    owner_notifier: OwnerNotifier,
) -> None:
    """Dispatch the first inbound message on its shape."""
    value = _first_change_value(body)
    messages = value.get("messages") or []
    if not messages:
        return

    message = messages[0]
    sender = message.get("from", "")
    profile_name = _profile_name(value)
    message_type = message.get("type")

    # Button reply (star rating)
    interactive = message.get("interactive") or {}
    if message_type == "interactive" and interactive.get("type") == "button_reply":
        button_id = (interactive.get("button_reply") or {}).get("id", "")
        rating = parse_star_rating(button_id)
        if rating is None:
            logger.info(f"Ignoring button '{button_id}' from {sender}")
            return

        reply = RatingReply(from_phone=sender, rating=rating)
        await handle_star_rating(reply, profile_name, settings, notifier, owner_notifier)

    # Text/video reply (the review content)
    elif message_type in ("text", "video"):
        content = (message.get("text") or {}).get("body") or settings.review.video_placeholder

        if message_type == "video" and media is None:
            video = message.get("video") or {}
            if video.get("id"):
                media = MediaAttachment(media_id=video["id"], content_type=video.get("mime_type", ""))

        reply = RatingReply(from_phone=sender, rating=ASSUMED_CONTENT_RATING, content=content)
        logger.info(f"Received review content from {sender}: {content}")

        await run_in_threadpool(
            publisher.publish,
            profile_name or settings.review.default_reviewer_name,
            reply.rating,
            reply.content,
            media,
        )

    else:
        logger.debug(f"Ignoring '{message_type}' message from {sender}")


def _first_change_value(body: dict[str, Any]) -> dict[str, Any]:
    """entry[0].changes[0].value, or {} when absent."""
    try:
        value = body["entry"][0]["changes"][0]["value"]
    except (KeyError, IndexError, TypeError):
        return {}
    return value if isinstance(value, dict) else {}


def _profile_name(value: dict[str, Any]) -> str:
    contacts = value.get("contacts") or []
    if not contacts:
        return ""
    name = ((contacts[0] or {}).get("profile") or {}).get("name", "")
    return name if isinstance(name, str) else ""


async def _read_json(request: Request) -> dict[str, Any]:
    raw_body = await request.body()
    if not raw_body:
        return {}
    body = json.loads(raw_body)
    if not isinstance(body, dict):
        raise InvalidPayloadError("Webhook body must be a JSON object")
    return body


async def _read_whatsapp_body(
    request: Request, max_upload_bytes: int
) -> tuple[dict[str, Any], Optional[MediaAttachment]]:
    """
    JSON body, or multipart form with a JSON "payload" field and an
    optional "video" file.
    """
    content_type = request.headers.get("content-type", "")
    if not content_type.startswith("multipart/form-data"):
        return await _read_json(request), None

    # The route also takes a plain JSON body, so the form is read by hand
    # instead of declaring UploadFile = File(...) parameters.
    form = await request.form()
    raw_payload = form.get("payload") or "{}"
    if not isinstance(raw_payload, str):
        raise InvalidPayloadError("'payload' form field must be text")
    body = json.loads(raw_payload)
    if not isinstance(body, dict):
        raise InvalidPayloadError("'payload' must be a JSON object")

    upload = form.get("video")
    if upload is None or isinstance(upload, str):
        return body, None

    data = await upload.read(max_upload_bytes + 1)
    if len(data) > max_upload_bytes:
        raise PayloadTooLargeError(
            f"Video upload exceeds {max_upload_bytes} bytes: {upload.filename}"
        )

    media = MediaAttachment(
        filename=upload.filename or "",
        content_type=upload.content_type or "",
        size_bytes=len(data),
    )
    return body, media


# ══════════════════════════════════════════════════════════════════
#  APP FACTORY
# ══════════════════════════════════════════════════════════════════

def create_app(
    settings: Optional[Settings] = None,
    notifier: Optional[MessagingProvider] = None,
    publisher: Optional[ReviewPublisher] = None,
    owner_notifier: Optional[OwnerNotifier] = None,
) -> FastAPI:
    """Build the app; collaborators default to the real ones built from settings."""
    settings = settings or get_settings()
    notifier = notifier or CloudAPIProvider(settings.whatsapp)
    publisher = publisher or ReviewPublisher(settings.google)
    owner_notifier = owner_notifier or OwnerNotifier()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        for issue in settings.validate():
            logger.warning(issue)
        logger.info("Review Relay ready")
        yield

    app = FastAPI(title="Review Relay", description="WhatsApp Review Webhook Relay", lifespan=lifespan)

    # ── Status / Compliance ────────────────────────────────────

    @app.get("/", response_class=PlainTextResponse)
    async def status():
        return STATUS_TEXT

    @app.get("/privacy", response_class=HTMLResponse)
    async def privacy():
        return PRIVACY_HTML

    @app.get("/terms", response_class=HTMLResponse)
    async def terms():
        return TERMS_HTML

    # ── Razorpay ───────────────────────────────────────────────

    @app.post("/webhooks/razorpay", response_model=WebhookAck)
    async def razorpay_webhook(request: Request):
        try:
            raw_body = await request.body()
            signature = request.headers.get(settings.razorpay.signature_header, "")

            if not verify_signature(raw_body, settings.razorpay.webhook_secret, signature):
                logger.warning("Rejected Razorpay webhook: invalid signature")
                return PlainTextResponse("Invalid Signature", status_code=400)

            body = await _read_json(request)
            if body.get("event") == settings.razorpay.captured_event:
                event = PaymentEvent.from_payload(body)
                await handle_payment_captured(event, settings, notifier)
            else:
                logger.info(f"Ignoring Razorpay event '{body.get('event')}'")

            return WebhookAck()

        except Exception as e:
            logger.exception(f"Razorpay Webhook Error: {e}")
            return PlainTextResponse("Internal Server Error", status_code=500)

    # ── WhatsApp ───────────────────────────────────────────────

    @app.get("/webhooks/whatsapp")
    async def whatsapp_verify(request: Request):
        params = request.query_params
        if (
            params.get("hub.mode") == "subscribe"
            and params.get("hub.verify_token") == settings.whatsapp.verify_token
        ):
            return PlainTextResponse(params.get("hub.challenge", ""))

        logger.warning("WhatsApp verification failed: wrong mode or token")
        return PlainTextResponse("Error, wrong validation token", status_code=400)

    @app.post("/webhooks/whatsapp", response_model=WebhookAck)
    async def whatsapp_webhook(request: Request):
        try:
            body, media = await _read_whatsapp_body(request, settings.whatsapp.max_upload_bytes)
            await handle_whatsapp_message(
                body, media, settings, notifier, publisher, owner_notifier
            )
            return WebhookAck()

        except PayloadTooLargeError as e:
            logger.warning(str(e))
            return PlainTextResponse("Payload Too Large", status_code=413)

        except StarletteHTTPException as e:
            # Starlette rejects oversized form fields with a 400
            logger.warning(f"Rejected WhatsApp webhook body: {e.detail}")
            return PlainTextResponse(str(e.detail), status_code=e.status_code)

        except Exception as e:
            logger.exception(f"WhatsApp Webhook Error: {e}")
            return PlainTextResponse("Internal Server Error", status_code=500)

    return app


app = create_app()
