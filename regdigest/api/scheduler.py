"""Digest trigger endpoint for Cloud Scheduler.

/internal/digest is called by the scheduler with a pre-shared token in the
X-Cron-Token header (or ``token`` query parameter). The token is checked
before any store access.
"""

import hmac
from typing import Any

import structlog
from fastapi import APIRouter, Header, HTTPException, Query, Request

from regdigest.adapters.firestore_client import FirestoreClient
from regdigest.config.settings import Settings, get_settings
from regdigest.exceptions import AuthorizationError, StoreError
from regdigest.repositories.content_repo import ContentRepository
from regdigest.repositories.subscriber_repo import SubscriberRepository
from regdigest.services.candidate_source import CandidateSource
from regdigest.services.digest_builder import DigestBuilder
from regdigest.services.digest_runner import DigestRunController
from regdigest.services.dispatch import DispatchClient

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/internal", tags=["scheduler"])


def _get_settings(request: Request | None) -> Settings:
    if request and hasattr(request.app.state, "settings"):
        return request.app.state.settings
    return get_settings()


def authorize_trigger(provided: str | None, expected: str | None) -> None:
    """Require an exact match against the configured trigger token.

    Args:
        provided: Token sent by the caller.
        expected: Configured DIGEST_TRIGGER_TOKEN.

    Raises:
        AuthorizationError: If either token is missing or they differ.
    """
    if not expected or not provided:
        raise AuthorizationError("trigger token missing")
    if not hmac.compare_digest(provided.encode(), expected.encode()):
        raise AuthorizationError("trigger token mismatch")


def get_digest_runner(request: Request | None = None) -> DigestRunController:
    """Create a DigestRunController.

    Args:
        request: FastAPI request (for app.state access)

    Returns:
        DigestRunController instance
    """
    settings = _get_settings(request)
    if request and hasattr(request.app.state, "firestore"):
        firestore = request.app.state.firestore
        dispatch_client = request.app.state.dispatch
    else:
        firestore = FirestoreClient(project_id=settings.GCP_PROJECT_ID)
        dispatch_client = DispatchClient.from_settings(settings)

    return DigestRunController(
        subscriber_repo=SubscriberRepository(firestore),
        candidate_source=CandidateSource(ContentRepository(firestore)),
        digest_builder=DigestBuilder(max_items=settings.DIGEST_MAX_ITEMS),
        dispatch_client=dispatch_client,
        candidate_limit=settings.DIGEST_CANDIDATE_LIMIT,
    )


@router.post("/digest")
async def run_digest(
    request: Request,
    x_cron_token: str | None = Header(None),
    token: str | None = Query(None),
) -> dict[str, Any]:
    """Trigger one digest run.

    Returns:
        ``{ok, subscribersConsidered, sent, backend}`` plus skipped,
        attempted and failed counts.
    """
    settings = _get_settings(request)
    try:
        authorize_trigger(x_cron_token or token, settings.DIGEST_TRIGGER_TOKEN)
    except AuthorizationError as e:
        logger.warning("digest_trigger_unauthorized", reason=str(e))
        raise HTTPException(status_code=401, detail={"error": "unauthorized"}) from e

    try:
        runner = get_digest_runner(request)
        summary = runner.run_digest()
    except StoreError as e:
        logger.error("digest_run_failed", error=str(e))
        raise HTTPException(
            status_code=500,
            detail={"ok": False, "error": "db_error"},
        ) from e

    return summary.to_response()
