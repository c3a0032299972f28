"""
Review Relay - Web Server Entry Point
=====================================

Run this to start the webhook server:
    python main.py

Host and port come from HOST / PORT (.env.local, then .env).
Point Razorpay at /webhooks/razorpay and WhatsApp at /webhooks/whatsapp.
"""

import sys
from pathlib import Path

import uvicorn

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from src.infrastructure.config import get_settings


def main():
    """Start the web server."""
    settings = get_settings()

    print("\n" + "=" * 50)
    print("   Review Relay - Webhook Server")
    print("=" * 50)
    print(f"\n   Server running on port {settings.server.port}")
    print("   Press Ctrl+C to stop\n")

    uvicorn.run(
        "src.web.app:app",
        host=settings.server.host,
        port=settings.server.port,
        log_level="info"
    )


if __name__ == "__main__":
    main()
