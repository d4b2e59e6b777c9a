"""Repository layer for Firestore data access."""

from regdigest.repositories.base import BaseRepository
from regdigest.repositories.content_repo import ContentRepository
from regdigest.repositories.subscriber_repo import SubscriberRepository

__all__ = [
    "BaseRepository",
    "ContentRepository",
    "SubscriberRepository",
]
