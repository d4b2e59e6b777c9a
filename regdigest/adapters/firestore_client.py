"""Firestore database client."""

from collections.abc import Iterator
from typing import Any

from google.api_core.exceptions import GoogleAPIError
from google.cloud import firestore  # type: ignore[attr-defined]
from google.cloud.firestore_v1.base_query import FieldFilter

from regdigest.exceptions import StoreError

DESCENDING = firestore.Query.DESCENDING
ASCENDING = firestore.Query.ASCENDING


class FirestoreClient:
    """Client for Firestore reads and upserts.

    Automatically connects to emulator when FIRESTORE_EMULATOR_HOST is set.
    Every call translates Google API failures into StoreError.
    """

    def __init__(self, project_id: str) -> None:
        """Initialize Firestore client.

        Args:
            project_id: GCP project ID.
        """
        self._db = firestore.Client(project=project_id)

    def get(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        """Get a document by ID.

        Args:
            collection: Collection name.
            doc_id: Document ID.

        Returns:
            Document data or None if not found.

        Raises:
            StoreError: If the read fails.
        """
        try:
            doc = self._db.collection(collection).document(doc_id).get()
        except GoogleAPIError as e:
            raise StoreError(f"get {collection}/{doc_id} failed: {e}") from e
        if doc.exists:
            return doc.to_dict()
        return None

    def upsert(self, collection: str, doc_id: str, data: dict[str, Any]) -> None:
        """Create a document or merge fields into an existing one.

        Args:
            collection: Collection name.
            doc_id: Document ID.
            data: Fields to write.

        Raises:
            StoreError: If the write fails.
        """
        try:
            self._db.collection(collection).document(doc_id).set(data, merge=True)
        except GoogleAPIError as e:
            raise StoreError(f"upsert {collection}/{doc_id} failed: {e}") from e

    def stream(
        self,
        collection: str,
        filters: list[tuple[str, str, Any]] | None = None,
        order_by: str | None = None,
        direction: str = ASCENDING,
        limit: int | None = None,
    ) -> Iterator[dict[str, Any]]:
        """Lazily iterate documents matching filters.

        Args:
            collection: Collection name.
            filters: List of (field, operator, value) tuples.
            order_by: Optional field to order by.
            direction: ASCENDING or DESCENDING.
            limit: Optional maximum number of documents.

        Yields:
            Document data in query order.

        Raises:
            StoreError: If the query fails.
        """
        query: Any = self._db.collection(collection)
        for field, op, value in filters or []:
            query = query.where(filter=FieldFilter(field, op, value))
        if order_by is not None:
            query = query.order_by(order_by, direction=direction)
        if limit is not None:
            query = query.limit(limit)

        try:
            for doc in query.stream():
                yield doc.to_dict()
        except GoogleAPIError as e:
            raise StoreError(f"query on {collection} failed: {e}") from e

    def query(
        self,
        collection: str,
        filters: list[tuple[str, str, Any]] | None = None,
        order_by: str | None = None,
        direction: str = ASCENDING,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        """Query documents with filters.

        Same arguments as ``stream``; materializes the result.

        Returns:
            List of matching documents.
        """
        return list(
            self.stream(
                collection,
                filters,
                order_by=order_by,
                direction=direction,
                limit=limit,
            )
        )
