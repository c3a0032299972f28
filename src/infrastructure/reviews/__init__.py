from .publisher import OwnerNotifier, ReviewPublisher

__all__ = ["OwnerNotifier", "ReviewPublisher"]
