"""External service adapters."""

from regdigest.adapters.firestore_client import FirestoreClient
from regdigest.adapters.resend_client import ResendClient

__all__ = [
    "FirestoreClient",
    "ResendClient",
]
