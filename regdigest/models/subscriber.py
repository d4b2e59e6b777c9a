"""Subscriber model.

A subscriber is identified by email and carries optional sector/keyword
preferences plus a notification preference.
"""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator


class NotifyPreference(str, Enum):
    """Digest notification preference."""

    UNSET = "unset"  # registered, onboarding not finished
    DAILY = "daily"
    NONE = "none"  # opted out of digests


def normalize_keywords(value: Any) -> list[str]:
    """Normalize raw keyword input into a flat list of trimmed strings.

    Accepts a comma-separated string or any iterable of strings. Blank
    entries and duplicates are dropped while first-seen order is kept.
    Anything else (None, numbers, mappings) normalizes to an empty list.
    """
    if isinstance(value, str):
        parts: list[Any] = value.split(",")
    elif isinstance(value, (list, tuple, set, frozenset)):
        parts = list(value)
    else:
        return []

    keywords: list[str] = []
    for part in parts:
        if not isinstance(part, str):
            continue
        keyword = part.strip()
        if keyword and keyword not in keywords:
            keywords.append(keyword)
    return keywords


class Subscriber(BaseModel):
    """Registered digest recipient.

    Firestore Collection: subscribers (document id = email)
    """

    email: str = Field(..., min_length=3, description="Unique, case-sensitive identity")
    sector: str | None = Field(None, description="Single sector of interest")
    keywords: list[str] = Field(
        default_factory=list, description="Free-text keywords (empty = none)"
    )
    notify_preference: NotifyPreference = Field(
        NotifyPreference.UNSET, description="Digest notification preference"
    )

    created_at: datetime | None = Field(None, description="Registration time")
    updated_at: datetime | None = Field(None, description="Last onboarding update")

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Require an address-shaped email; case is preserved."""
        v = v.strip()
        if "@" not in v:
            raise ValueError("email must contain '@'")
        return v

    @field_validator("sector", mode="before")
    @classmethod
    def blank_sector_to_none(cls, v: Any) -> Any:
        """Treat an empty sector as no sector."""
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @field_validator("keywords", mode="before")
    @classmethod
    def split_keywords(cls, v: Any) -> list[str]:
        """Keywords are stored either as a list or a comma-separated string."""
        return normalize_keywords(v)

    @field_validator("notify_preference", mode="before")
    @classmethod
    def default_notify_preference(cls, v: Any) -> Any:
        """Missing preference in older documents means unset."""
        return NotifyPreference.UNSET if v in (None, "") else v

    @property
    def has_preferences(self) -> bool:
        """True when a sector or at least one keyword is set."""
        return self.sector is not None or bool(self.keywords)

    model_config = {
        "json_schema_extra": {
            "example": {
                "email": "compliance@example.com",
                "sector": "Legal",
                "keywords": ["data protection", "customs"],
                "notify_preference": "daily",
            }
        }
    }
