"""
Webhook Signature Verification
==============================

Razorpay signs every webhook with HMAC-SHA256 over the raw request body.
The digest must be computed over the exact bytes received: parsing the JSON
and serializing it again changes whitespace and key order, and the digest
will no longer match.
"""

import hmac
import hashlib
import logging

logger = logging.getLogger(__name__)


def compute_signature(raw_body: bytes, secret: str) -> str:
    """Hex HMAC-SHA256 of raw_body keyed with secret."""
    return hmac.new(secret.encode(), raw_body, hashlib.sha256).hexdigest()


def verify_signature(raw_body: bytes, secret: str, signature: str) -> bool:
    """Return True if signature matches the HMAC of raw_body under secret."""
    if not secret:
        logger.error("Webhook secret is not configured, rejecting request")
        return False
    if not signature:
        return False

    expected = compute_signature(raw_body, secret)
    return hmac.compare_digest(expected.encode(), signature.strip().encode())
