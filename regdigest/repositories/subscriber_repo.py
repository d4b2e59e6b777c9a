"""Repository for Subscriber entities.

Data access layer for the Firestore subscribers collection. Documents are
keyed by email; keywords are normalized on the way in and on the way out
so callers always see a list of trimmed strings.
"""

from datetime import UTC, datetime
from typing import Any

from regdigest.adapters.firestore_client import FirestoreClient
from regdigest.models.subscriber import (
    NotifyPreference,
    Subscriber,
    normalize_keywords,
)
from regdigest.repositories.base import BaseRepository


class SubscriberRepository(BaseRepository[Subscriber]):
    """Subscriber entity Repository.

    Firestore Collection: subscribers
    """

    collection_name = "subscribers"
    model_class = Subscriber
    key_field = "email"

    def __init__(self, firestore_client: FirestoreClient) -> None:
        """Initialize SubscriberRepository.

        Args:
            firestore_client: Firestore client instance.
        """
        super().__init__(firestore_client)

    def list_all(self) -> list[Subscriber]:
        """Load the full subscriber set in the store's natural order.

        Returns:
            All subscribers.
        """
        return self.find_all()

    def find_by_email(self, email: str) -> Subscriber | None:
        """Look up a subscriber by exact email.

        Args:
            email: Subscriber email (case-sensitive).

        Returns:
            Subscriber or None.
        """
        return self.get_by_id(email)

    def upsert_by_email(self, email: str, patch: dict[str, Any]) -> Subscriber:
        """Create the subscriber or merge a patch into the stored document.

        Args:
            email: Subscriber email (document id).
            patch: Fields to set; ``keywords`` may be a string or a list.

        Returns:
            The subscriber as stored after the write.
        """
        now = datetime.now(UTC)
        data = dict(patch)
        if "keywords" in data:
            data["keywords"] = normalize_keywords(data["keywords"])
        if isinstance(data.get("sector"), str):
            data["sector"] = data["sector"].strip() or None
        if isinstance(data.get("notify_preference"), NotifyPreference):
            data["notify_preference"] = data["notify_preference"].value
        data["email"] = email
        data["updated_at"] = now

        existing = self._db.get(self.collection_name, email)
        if existing is None:
            data.setdefault("created_at", now)
            data.setdefault("notify_preference", NotifyPreference.UNSET.value)
            merged = data
        else:
            merged = {**existing, **data}

        # Validate before writing so a bad patch never reaches the store.
        subscriber = self._to_model(merged)
        self._db.upsert(self.collection_name, email, data)
        return subscriber
