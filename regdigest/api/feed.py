"""Search and personalized feed endpoints."""

from typing import Any

import structlog
from fastapi import APIRouter, HTTPException, Request

from regdigest.adapters.firestore_client import FirestoreClient
from regdigest.config.settings import get_settings
from regdigest.exceptions import NotFoundError, StoreError, ValidationError
from regdigest.repositories.content_repo import ContentRepository
from regdigest.repositories.subscriber_repo import SubscriberRepository
from regdigest.services.feed_query import FeedQuery

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/feed", tags=["feed"])


def get_feed_query(request: Request | None = None) -> FeedQuery:
    """Create a FeedQuery."""
    if request and hasattr(request.app.state, "firestore"):
        firestore = request.app.state.firestore
        settings = request.app.state.settings
    else:
        settings = get_settings()
        firestore = FirestoreClient(project_id=settings.GCP_PROJECT_ID)

    return FeedQuery(
        content_repo=ContentRepository(firestore),
        subscriber_repo=SubscriberRepository(firestore),
        limit=settings.FEED_LIMIT,
    )


@router.get("")
async def search_feed(
    request: Request,
    q: str | None = None,
    sector: str | None = None,
) -> list[dict[str, Any]]:
    """Search content by free text and/or sector.

    Args:
        request: FastAPI request
        q: Free text matched against title and summary
        sector: Sector tag

    Returns:
        Newest-first content items
    """
    try:
        items = get_feed_query(request).search(free_text=q, sector=sector)
    except StoreError as e:
        logger.error("feed_search_failed", error=str(e))
        raise HTTPException(status_code=500, detail={"error": "db_error"}) from e

    return [item.model_dump(mode="json") for item in items]


@router.get("/personal")
async def personal_feed(
    request: Request,
    email: str | None = None,
) -> list[dict[str, Any]]:
    """Content filtered by a subscriber's stored preferences.

    Args:
        request: FastAPI request
        email: Subscriber email

    Returns:
        Newest-first content items
    """
    if not email:
        raise HTTPException(status_code=400, detail={"error": "email_required"})

    try:
        items = get_feed_query(request).personal_feed(email)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail={"error": "email_required"}) from e
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail={"error": "user_not_found"}) from e
    except StoreError as e:
        logger.error("personal_feed_failed", email=email, error=str(e))
        raise HTTPException(status_code=500, detail={"error": "db_error"}) from e

    return [item.model_dump(mode="json") for item in items]
