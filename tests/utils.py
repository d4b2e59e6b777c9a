"""Test utilities shared across test modules."""

from collections import defaultdict
from collections.abc import Iterator
from typing import Any


class InMemoryFirestore:
    """Dict-backed stand-in for FirestoreClient.

    Supports the subset of queries the repositories issue: ``==`` and
    ``array_contains`` filters, single-field ordering and limit.
    """

    def __init__(self) -> None:
        self.collections: dict[str, dict[str, dict[str, Any]]] = defaultdict(dict)

    def get(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        data = self.collections[collection].get(doc_id)
        return None if data is None else dict(data)

    def upsert(self, collection: str, doc_id: str, data: dict[str, Any]) -> None:
        self.collections[collection].setdefault(doc_id, {}).update(data)

    def stream(
        self,
        collection: str,
        filters: list[tuple[str, str, Any]] | None = None,
        order_by: str | None = None,
        direction: str = "ASCENDING",
        limit: int | None = None,
    ) -> Iterator[dict[str, Any]]:
        docs = [dict(d) for _, d in sorted(self.collections[collection].items())]
        for field, op, value in filters or []:
            if op == "==":
                docs = [d for d in docs if d.get(field) == value]
            elif op == "array_contains":
                docs = [d for d in docs if value in (d.get(field) or [])]
            else:
                raise NotImplementedError(op)
        if order_by is not None:
            docs.sort(key=lambda d: d[order_by], reverse=direction == "DESCENDING")
        if limit is not None:
            docs = docs[:limit]
        yield from docs

    def query(
        self,
        collection: str,
        filters: list[tuple[str, str, Any]] | None = None,
        order_by: str | None = None,
        direction: str = "ASCENDING",
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        return list(self.stream(collection, filters, order_by, direction, limit))

    def add_item(self, item_id: int, **fields: Any) -> None:
        """Insert a content item document."""
        self.collections["content_items"][str(item_id)] = {"id": item_id, **fields}

    def add_subscriber(self, email: str, **fields: Any) -> None:
        """Insert a raw subscriber document."""
        self.collections["subscribers"][email] = {"email": email, **fields}
