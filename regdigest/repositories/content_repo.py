"""Repository for ContentItem entities.

Read-only data access layer for the Firestore content_items collection.
Every read is ordered by numeric id, newest first.
"""

from regdigest.adapters.firestore_client import DESCENDING, FirestoreClient
from regdigest.matching import matches
from regdigest.models.content import ContentFilter, ContentItem
from regdigest.repositories.base import BaseRepository


class ContentRepository(BaseRepository[ContentItem]):
    """ContentItem entity Repository.

    Firestore Collection: content_items
    """

    collection_name = "content_items"
    model_class = ContentItem

    def __init__(self, firestore_client: FirestoreClient) -> None:
        """Initialize ContentRepository.

        Args:
            firestore_client: Firestore client instance.
        """
        super().__init__(firestore_client)

    def recent(self, limit: int) -> list[ContentItem]:
        """Most recently created items.

        Args:
            limit: Maximum number of items.

        Returns:
            Items ordered by id descending.
        """
        return self.find_by([], order_by="id", descending=True, limit=limit)

    def search(self, content_filter: ContentFilter, limit: int) -> list[ContentItem]:
        """Items matching a filter, newest first.

        An empty filter returns the most recent items. A sector-only filter
        is answered by the store; anything involving keywords is streamed
        newest first and evaluated with the match predicate until ``limit``
        items are collected.

        Args:
            content_filter: Sector and/or keywords.
            limit: Maximum number of items.

        Returns:
            Matching items ordered by id descending.
        """
        if content_filter.is_empty:
            return self.recent(limit)

        if not content_filter.keywords:
            return self.find_by(
                [("sectors", "array_contains", content_filter.sector)],
                order_by="id",
                descending=True,
                limit=limit,
            )

        results: list[ContentItem] = []
        stream = self._db.stream(
            self.collection_name, order_by="id", direction=DESCENDING
        )
        for item in self._valid_models(stream):
            if matches(content_filter, item):
                results.append(item)
                if len(results) >= limit:
                    break
        return results
