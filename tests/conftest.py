"""Pytest configuration and shared fixtures."""

import os
from collections.abc import Callable
from typing import Any

import pytest

from regdigest.models.content import ContentItem
from regdigest.models.subscriber import NotifyPreference, Subscriber


@pytest.fixture(autouse=True)
def set_test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Set test environment variables."""
    os.environ.setdefault("GCP_PROJECT_ID", "test-project")
    os.environ.setdefault("FIRESTORE_EMULATOR_HOST", "localhost:8086")
    monkeypatch.delenv("RESEND_API_KEY", raising=False)


@pytest.fixture
def make_item() -> Callable[..., ContentItem]:
    """Factory for content items."""

    def _make(
        item_id: int,
        title: str = "Untitled",
        summary: str | None = None,
        source_reference: str | None = None,
        sectors: list[str] | None = None,
    ) -> ContentItem:
        return ContentItem(
            id=item_id,
            title=title,
            summary=summary,
            source_reference=source_reference,
            sectors=sectors or [],
        )

    return _make


@pytest.fixture
def make_subscriber() -> Callable[..., Subscriber]:
    """Factory for subscribers."""

    def _make(
        email: str = "user@example.com",
        sector: str | None = None,
        keywords: Any = None,
        notify_preference: NotifyPreference = NotifyPreference.DAILY,
    ) -> Subscriber:
        return Subscriber(
            email=email,
            sector=sector,
            keywords=keywords or [],
            notify_preference=notify_preference,
        )

    return _make
