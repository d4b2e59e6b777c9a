"""Domain models for regdigest.

This module exports all Pydantic models used across the application.
"""

from regdigest.models.content import ContentFilter, ContentItem
from regdigest.models.digest import Digest, RunSummary
from regdigest.models.subscriber import (
    NotifyPreference,
    Subscriber,
    normalize_keywords,
)

__all__ = [
    "ContentFilter",
    "ContentItem",
    "Digest",
    "NotifyPreference",
    "RunSummary",
    "Subscriber",
    "normalize_keywords",
]
