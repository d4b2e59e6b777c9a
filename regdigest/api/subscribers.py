"""Subscriber registration and onboarding endpoints."""

from typing import Any

import structlog
from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel, Field

from regdigest.adapters.firestore_client import FirestoreClient
from regdigest.config.settings import get_settings
from regdigest.exceptions import StoreError
from regdigest.models.subscriber import NotifyPreference, Subscriber
from regdigest.repositories.subscriber_repo import SubscriberRepository

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/subscribers", tags=["subscribers"])


class RegisterRequest(BaseModel):
    """Registration request."""

    email: str = Field(..., min_length=3, description="Subscriber email")
    sector: str | None = Field(None, description="Sector of interest")
    keywords: list[str] | str | None = Field(
        None, description="List or comma-separated keywords"
    )


class OnboardingRequest(BaseModel):
    """Onboarding update (partial)."""

    sector: str | None = None
    keywords: list[str] | str | None = None
    notify_preference: NotifyPreference | None = None


def get_subscriber_repo(request: Request | None = None) -> SubscriberRepository:
    """Create a SubscriberRepository."""
    if request and hasattr(request.app.state, "firestore"):
        firestore = request.app.state.firestore
    else:
        settings = get_settings()
        firestore = FirestoreClient(project_id=settings.GCP_PROJECT_ID)

    return SubscriberRepository(firestore)


def _upsert(
    repo: SubscriberRepository, email: str, patch: dict[str, Any]
) -> Subscriber:
    try:
        return repo.upsert_by_email(email, patch)
    except ValueError as e:
        # pydantic.ValidationError subclasses ValueError
        raise HTTPException(status_code=400, detail={"error": str(e)}) from e
    except StoreError as e:
        logger.error("subscriber_upsert_failed", email=email, error=str(e))
        raise HTTPException(status_code=500, detail={"error": "db_error"}) from e


@router.post("", status_code=201)
async def register_subscriber(
    request: Request,
    body: RegisterRequest,
) -> dict[str, Any]:
    """Register a new subscriber.

    Returns:
        The stored subscriber
    """
    repo = get_subscriber_repo(request)
    email = body.email.strip()

    try:
        existing = repo.find_by_email(email)
    except StoreError as e:
        logger.error("subscriber_lookup_failed", email=email, error=str(e))
        raise HTTPException(status_code=500, detail={"error": "db_error"}) from e
    if existing:
        raise HTTPException(status_code=409, detail={"error": "already_registered"})

    subscriber = _upsert(
        repo, email, body.model_dump(exclude={"email"}, exclude_none=True)
    )
    logger.info("subscriber_registered", email=email)
    return subscriber.model_dump(mode="json")


@router.get("/{email}")
async def get_subscriber(request: Request, email: str) -> dict[str, Any]:
    """Fetch a subscriber.

    Returns:
        Subscriber preferences
    """
    repo = get_subscriber_repo(request)
    try:
        subscriber = repo.find_by_email(email)
    except StoreError as e:
        logger.error("subscriber_lookup_failed", email=email, error=str(e))
        raise HTTPException(status_code=500, detail={"error": "db_error"}) from e

    if not subscriber:
        raise HTTPException(status_code=404, detail={"error": "user_not_found"})
    return subscriber.model_dump(mode="json")


@router.patch("/{email}")
async def update_onboarding(
    request: Request,
    email: str,
    body: OnboardingRequest,
) -> dict[str, Any]:
    """Apply an onboarding update.

    Only fields present in the body are changed; an explicit null sector
    clears the sector.

    Returns:
        The updated subscriber
    """
    repo = get_subscriber_repo(request)
    try:
        existing = repo.find_by_email(email)
    except StoreError as e:
        logger.error("subscriber_lookup_failed", email=email, error=str(e))
        raise HTTPException(status_code=500, detail={"error": "db_error"}) from e
    if not existing:
        raise HTTPException(status_code=404, detail={"error": "user_not_found"})

    patch = body.model_dump(exclude_unset=True)
    if patch.get("keywords") is None and "keywords" in patch:
        patch["keywords"] = []
    if "notify_preference" in patch and patch["notify_preference"] is None:
        del patch["notify_preference"]

    subscriber = _upsert(repo, email, patch)
    logger.info("subscriber_onboarded", email=email, fields=sorted(patch))
    return subscriber.model_dump(mode="json")
