"""Recency window of content items for digest runs."""

from regdigest.exceptions import ValidationError
from regdigest.models.content import ContentItem
from regdigest.repositories.content_repo import ContentRepository

DIGEST_CANDIDATE_LIMIT = 100


class CandidateSource:
    """Supplies a bounded, newest-first snapshot of content items.

    Items older than the window are never matched; this is a recency
    window, not a corpus scan.
    """

    def __init__(self, content_repo: ContentRepository) -> None:
        """Initialize CandidateSource.

        Args:
            content_repo: Content repository to read from.
        """
        self.content_repo = content_repo

    def recent_items(self, limit: int = DIGEST_CANDIDATE_LIMIT) -> list[ContentItem]:
        """Fetch the most recent items.

        Args:
            limit: Window size.

        Returns:
            At most ``limit`` items ordered by id descending.

        Raises:
            ValidationError: If limit is not positive.
            StoreError: If the content store cannot be read.
        """
        if limit <= 0:
            raise ValidationError(f"limit must be positive, got {limit}")
        items = self.content_repo.recent(limit)
        return sorted(items, key=lambda item: item.id, reverse=True)[:limit]
