"""Tests for ContentItem and ContentFilter models."""

import pytest
from pydantic import ValidationError

from regdigest.models.content import ContentFilter, ContentItem


class TestContentItem:
    """Tests for ContentItem model."""

    def test_minimal(self) -> None:
        item = ContentItem(id=1, title="Customs Rule")

        assert item.summary is None
        assert item.source_reference is None
        assert item.sectors == []

    def test_null_sectors(self) -> None:
        item = ContentItem(id=1, title="Customs Rule", sectors=None)

        assert item.sectors == []

    def test_negative_id_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ContentItem(id=-1, title="x")


class TestContentFilter:
    """Tests for ContentFilter model."""

    def test_from_query_empty(self) -> None:
        content_filter = ContentFilter.from_query(None, None)

        assert content_filter.is_empty

    def test_from_query_blank_text(self) -> None:
        content_filter = ContentFilter.from_query("   ", "")

        assert content_filter.is_empty

    def test_from_query_keeps_commas(self) -> None:
        """Free text is a single needle."""
        content_filter = ContentFilter.from_query(" tax, vat ", "Finance")

        assert content_filter.keywords == ["tax, vat"]
        assert content_filter.sector == "Finance"
        assert not content_filter.is_empty
