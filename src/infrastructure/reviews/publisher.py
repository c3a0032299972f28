"""
Review Publisher - Google Business Profile Stand-In
===================================================

POLICY BOUNDARY:
The Google Business Profile API is for managing a business (reading and
replying to reviews). Reviews must come from a Google user account, so there
is no official way to create one programmatically on a customer's behalf.

For ratings at or above the positive threshold the system would post the
review; instead ReviewPublisher records the intent in the server log.
Low ratings stay private: OwnerNotifier raises an alert for the owner.
"""

import logging
from typing import Optional

from src.domain.models import MediaAttachment
from ..config.settings import GoogleSettings

logger = logging.getLogger(__name__)


class ReviewPublisher:
    """Records the intent to publish a customer review."""

    def __init__(self, settings: GoogleSettings):
        self._settings = settings

        if not settings.has_credentials:
            logger.warning("Google OAuth credentials not set; review intents are logged only")

    def publish(
        self,
        reviewer_name: str,
        rating: int,
        comment: str,
        media: Optional[MediaAttachment] = None,
    ) -> None:
        logger.info(f'[MOCK] Posting review to Google: {rating} stars by {reviewer_name}, "{comment}"')

        if media is not None:
            target = self._settings.location_path if self._settings.has_credentials else "local log"
            logger.info(f"[MOCK] Attaching customer media to {target}: {media.describe()}")


class OwnerNotifier:
    """
    Private channel for negative feedback.

    Rating-only alert: it fires on the star button, before the customer has
    written anything, so there is no feedback text to include.
    """

    def notify(self, customer_phone: str, rating: int) -> None:
        logger.warning(f"[ALERT] Negative Review ({rating} stars) from {customer_phone}")
