from .messaging_provider import CloudAPIProvider, MessagingProvider

__all__ = ["CloudAPIProvider", "MessagingProvider"]
