"""Business logic services."""

from regdigest.services.candidate_source import CandidateSource
from regdigest.services.digest_builder import DigestBuilder
from regdigest.services.digest_runner import DigestRunController
from regdigest.services.dispatch import (
    DispatchClient,
    DispatchResult,
    DryRunBackend,
    ResendBackend,
)
from regdigest.services.feed_query import FeedQuery

__all__ = [
    "CandidateSource",
    "DigestBuilder",
    "DigestRunController",
    "DispatchClient",
    "DispatchResult",
    "DryRunBackend",
    "FeedQuery",
    "ResendBackend",
]
