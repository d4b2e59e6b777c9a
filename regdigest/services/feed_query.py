"""Interactive search and personalized feed reads."""

from regdigest.exceptions import NotFoundError, ValidationError
from regdigest.models.content import ContentFilter, ContentItem
from regdigest.repositories.content_repo import ContentRepository
from regdigest.repositories.subscriber_repo import SubscriberRepository

FEED_LIMIT = 50


class FeedQuery:
    """Applies the match predicate on demand against the content store."""

    def __init__(
        self,
        content_repo: ContentRepository,
        subscriber_repo: SubscriberRepository,
        limit: int = FEED_LIMIT,
    ) -> None:
        self.content_repo = content_repo
        self.subscriber_repo = subscriber_repo
        self.limit = limit

    def search(
        self, free_text: str | None = None, sector: str | None = None
    ) -> list[ContentItem]:
        """Search content by free text and/or sector.

        With neither filter this is the most recent ``limit`` items.

        Args:
            free_text: Case-insensitive needle for title/summary.
            sector: Exact sector tag.

        Returns:
            At most ``limit`` items ordered by id descending.
        """
        content_filter = ContentFilter.from_query(free_text, sector)
        return self.content_repo.search(content_filter, self.limit)

    def personal_feed(self, subscriber_email: str | None) -> list[ContentItem]:
        """Feed filtered by a subscriber's stored preferences.

        Args:
            subscriber_email: Subscriber email.

        Returns:
            At most ``limit`` items ordered by id descending; unfiltered
            when the subscriber has no preferences.

        Raises:
            ValidationError: If no email is given (before any store access).
            NotFoundError: If the subscriber does not exist.
        """
        if not subscriber_email or not subscriber_email.strip():
            raise ValidationError("email_required")

        subscriber = self.subscriber_repo.find_by_email(subscriber_email.strip())
        if subscriber is None:
            raise NotFoundError(f"subscriber not found: {subscriber_email}")

        if not subscriber.has_preferences:
            return self.content_repo.recent(self.limit)

        content_filter = ContentFilter(
            sector=subscriber.sector, keywords=subscriber.keywords
        )
        return self.content_repo.search(content_filter, self.limit)
