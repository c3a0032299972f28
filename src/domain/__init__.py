# Domain Layer
# ============
# Request-scoped values and pure decisions (no I/O):
# - models.py: PaymentEvent, RatingReply, NotificationRequest, MediaAttachment
# - language.py: template language heuristic

from .models import (
    InvalidPayloadError,
    MediaAttachment,
    NotificationRequest,
    PaymentEvent,
    RatingReply,
    parse_star_rating,
)
from .language import detect_language

__all__ = [
    "InvalidPayloadError",
    "MediaAttachment",
    "NotificationRequest",
    "PaymentEvent",
    "RatingReply",
    "parse_star_rating",
    "detect_language",
]
