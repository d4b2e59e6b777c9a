"""Base repository for Firestore data access.

Repositories are read-mostly: the only write this service performs is the
subscriber upsert behind registration/onboarding.
"""

from collections.abc import Iterable, Iterator
from typing import Any, ClassVar, Generic, TypeVar

import structlog
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from regdigest.adapters.firestore_client import (
    ASCENDING,
    DESCENDING,
    FirestoreClient,
)
from regdigest.exceptions import StoreError

logger = structlog.get_logger(__name__)

# Pydantic model type variable
T = TypeVar("T", bound=BaseModel)


class BaseRepository(Generic[T]):
    """Firestore Repository base class.

    Subclasses define collection_name, model_class and the document field
    that identifies a document in logs (key_field).

    Example:
        class SubscriberRepository(BaseRepository[Subscriber]):
            collection_name = "subscribers"
            model_class = Subscriber
            key_field = "email"
    """

    collection_name: ClassVar[str]
    model_class: ClassVar[type[BaseModel]]
    key_field: ClassVar[str] = "id"

    def __init__(self, firestore_client: FirestoreClient) -> None:
        """Initialize repository with Firestore client.

        Args:
            firestore_client: Firestore client instance.
        """
        self._db = firestore_client

    def get_by_id(self, doc_id: str) -> T | None:
        """Get a document by ID.

        Args:
            doc_id: Document ID.

        Returns:
            Model instance or None.

        Raises:
            StoreError: If the stored document does not validate.
        """
        data = self._db.get(self.collection_name, doc_id)
        if data is None:
            return None
        try:
            return self._to_model(data)
        except PydanticValidationError as e:
            logger.error(
                "malformed_document",
                collection=self.collection_name,
                doc_id=doc_id,
                error=str(e),
            )
            raise StoreError(
                f"malformed document {self.collection_name}/{doc_id}"
            ) from e

    def find_by(
        self,
        filters: list[tuple[str, str, Any]],
        order_by: str | None = None,
        descending: bool = False,
        limit: int | None = None,
    ) -> list[T]:
        """Query documents.

        Documents that do not validate are logged and skipped.

        Args:
            filters: (field, operator, value) tuples.
            order_by: Optional field to order by.
            descending: Order direction.
            limit: Optional maximum number of documents.

        Returns:
            Matching model instances in query order.
        """
        results = self._db.query(
            self.collection_name,
            filters,
            order_by=order_by,
            direction=DESCENDING if descending else ASCENDING,
            limit=limit,
        )
        return list(self._valid_models(results))

    def find_all(self) -> list[T]:
        """Get every document in the collection.

        Returns:
            All model instances.
        """
        return self.find_by([])

    def _valid_models(self, documents: Iterable[dict[str, Any]]) -> Iterator[T]:
        """Validate raw documents, skipping the ones that fail."""
        for data in documents:
            try:
                yield self._to_model(data)
            except PydanticValidationError as e:
                logger.warning(
                    "malformed_document",
                    collection=self.collection_name,
                    doc_id=data.get(self.key_field),
                    error=str(e),
                )

    def _to_model(self, data: dict[str, Any]) -> T:
        """Validate a raw document into the model class."""
        return self.model_class.model_validate(data)  # type: ignore[return-value]
