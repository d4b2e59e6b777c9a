"""Tests for FeedQuery."""

from collections.abc import Callable
from unittest.mock import MagicMock

import pytest

from regdigest.exceptions import NotFoundError, ValidationError
from regdigest.models.content import ContentFilter
from regdigest.models.subscriber import Subscriber
from regdigest.services.feed_query import FeedQuery


class TestFeedQuery:
    """Tests for FeedQuery."""

    @pytest.fixture
    def mock_content_repo(self) -> MagicMock:
        repo = MagicMock()
        repo.search.return_value = []
        repo.recent.return_value = []
        return repo

    @pytest.fixture
    def mock_subscriber_repo(self) -> MagicMock:
        return MagicMock()

    @pytest.fixture
    def feed_query(
        self, mock_content_repo: MagicMock, mock_subscriber_repo: MagicMock
    ) -> FeedQuery:
        return FeedQuery(mock_content_repo, mock_subscriber_repo)

    def test_search_without_filters(
        self, feed_query: FeedQuery, mock_content_repo: MagicMock
    ) -> None:
        feed_query.search()

        mock_content_repo.search.assert_called_once_with(ContentFilter(), 50)

    def test_search_with_text_and_sector(
        self, feed_query: FeedQuery, mock_content_repo: MagicMock
    ) -> None:
        feed_query.search(free_text=" tax ", sector="Finance")

        mock_content_repo.search.assert_called_once_with(
            ContentFilter(sector="Finance", keywords=["tax"]), 50
        )

    def test_personal_feed_requires_email(
        self, feed_query: FeedQuery, mock_subscriber_repo: MagicMock
    ) -> None:
        for email in (None, "", "   "):
            with pytest.raises(ValidationError):
                feed_query.personal_feed(email)

        mock_subscriber_repo.find_by_email.assert_not_called()

    def test_personal_feed_unknown_subscriber(
        self, feed_query: FeedQuery, mock_subscriber_repo: MagicMock
    ) -> None:
        mock_subscriber_repo.find_by_email.return_value = None

        with pytest.raises(NotFoundError):
            feed_query.personal_feed("ghost@example.com")

    def test_personal_feed_without_preferences_is_recent(
        self,
        feed_query: FeedQuery,
        mock_subscriber_repo: MagicMock,
        mock_content_repo: MagicMock,
        make_subscriber: Callable[..., Subscriber],
    ) -> None:
        mock_subscriber_repo.find_by_email.return_value = make_subscriber()

        feed_query.personal_feed("user@example.com")

        mock_content_repo.recent.assert_called_once_with(50)
        mock_content_repo.search.assert_not_called()

    def test_personal_feed_uses_preferences(
        self,
        feed_query: FeedQuery,
        mock_subscriber_repo: MagicMock,
        mock_content_repo: MagicMock,
        make_subscriber: Callable[..., Subscriber],
    ) -> None:
        mock_subscriber_repo.find_by_email.return_value = make_subscriber(
            sector="HR", keywords=["payroll", "leave"]
        )

        feed_query.personal_feed("user@example.com")

        mock_content_repo.search.assert_called_once_with(
            ContentFilter(sector="HR", keywords=["payroll", "leave"]), 50
        )

    def test_custom_limit(
        self, mock_content_repo: MagicMock, mock_subscriber_repo: MagicMock
    ) -> None:
        FeedQuery(mock_content_repo, mock_subscriber_repo, limit=5).search()

        mock_content_repo.search.assert_called_once_with(ContentFilter(), 5)
