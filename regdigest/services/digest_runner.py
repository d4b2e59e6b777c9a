"""End-to-end digest run.

One run loads a single snapshot of subscribers and of the candidate window,
then builds and dispatches per subscriber, sequentially. Dispatch failures
are aggregated into the summary; only a failed snapshot load fails the run.
"""

import structlog

from regdigest.models.digest import RunSummary
from regdigest.models.subscriber import NotifyPreference
from regdigest.repositories.subscriber_repo import SubscriberRepository
from regdigest.services.candidate_source import DIGEST_CANDIDATE_LIMIT, CandidateSource
from regdigest.services.digest_builder import DigestBuilder
from regdigest.services.dispatch import DispatchClient

logger = structlog.get_logger(__name__)


class DigestRunController:
    """Orchestrates one digest run."""

    def __init__(
        self,
        subscriber_repo: SubscriberRepository,
        candidate_source: CandidateSource,
        digest_builder: DigestBuilder,
        dispatch_client: DispatchClient,
        candidate_limit: int = DIGEST_CANDIDATE_LIMIT,
    ) -> None:
        """Initialize DigestRunController.

        Args:
            subscriber_repo: Subscriber repository
            candidate_source: Recency window provider
            digest_builder: Per-subscriber digest builder
            dispatch_client: Dispatch client (provider or dry-run)
            candidate_limit: Recency window size for the run
        """
        self.subscriber_repo = subscriber_repo
        self.candidate_source = candidate_source
        self.digest_builder = digest_builder
        self.dispatch_client = dispatch_client
        self.candidate_limit = candidate_limit

    def run_digest(self) -> RunSummary:
        """Run one digest pass over every subscriber.

        Returns:
            Run summary (considered, skipped, attempted, sent, failed, backend).

        Raises:
            StoreError: If the subscriber set or the candidate window
                cannot be loaded. Nothing has been dispatched in that case.
        """
        subscribers = self.subscriber_repo.list_all()
        candidates = self.candidate_source.recent_items(self.candidate_limit)

        summary = RunSummary(backend=self.dispatch_client.backend_name)
        log = logger.bind(backend=summary.backend, candidates=len(candidates))
        log.info("digest_run_started", subscribers=len(subscribers))

        for subscriber in subscribers:
            summary.subscribers_considered += 1

            if subscriber.notify_preference is NotifyPreference.NONE:
                summary.skipped += 1
                continue

            digest = self.digest_builder.build(subscriber, candidates)
            if digest is None:
                summary.skipped += 1
                continue

            summary.attempted += 1
            result = self.dispatch_client.send(
                digest.destination, digest.subject, digest.body
            )
            if result.ok:
                summary.sent += 1
                log.info(
                    "digest_dispatched",
                    destination=digest.destination,
                    matches=digest.match_count,
                    rendered=len(digest.items),
                    message_id=result.message_id,
                )
            else:
                summary.failed += 1
                summary.failures[digest.destination] = result.error or "unknown error"
                log.error(
                    "digest_dispatch_failed",
                    destination=digest.destination,
                    error=result.error,
                )

        log.info(
            "digest_run_completed",
            subscribers_considered=summary.subscribers_considered,
            skipped=summary.skipped,
            attempted=summary.attempted,
            sent=summary.sent,
            failed=summary.failed,
        )
        return summary
