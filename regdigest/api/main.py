"""FastAPI application with lifespan management."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from regdigest import __version__
from regdigest.adapters.firestore_client import FirestoreClient
from regdigest.api.feed import router as feed_router
from regdigest.api.scheduler import router as scheduler_router
from regdigest.api.subscribers import router as subscribers_router
from regdigest.config.logging import configure_logging, get_logger
from regdigest.config.settings import Settings
from regdigest.services.dispatch import DispatchClient


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Captures configuration once and builds the shared clients.
    """
    settings = Settings()  # type: ignore[call-arg]
    configure_logging(json_logs=settings.LOG_JSON)
    logger = get_logger()

    logger.info(
        "Starting application",
        project_id=settings.GCP_PROJECT_ID,
        is_local=settings.is_local,
        dispatch_backend=settings.dispatch_backend,
    )
    if not settings.DIGEST_TRIGGER_TOKEN:
        logger.warning("DIGEST_TRIGGER_TOKEN unset; digest trigger is disabled")

    app.state.settings = settings
    app.state.firestore = FirestoreClient(project_id=settings.GCP_PROJECT_ID)
    app.state.dispatch = DispatchClient.from_settings(settings)

    logger.info("Application started successfully")

    yield

    logger.info("Application shutting down")


app = FastAPI(
    title="regdigest",
    description="Regulatory update feed and sector/keyword digest mailer",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(scheduler_router)
app.include_router(feed_router)
app.include_router(subscribers_router)


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint.

    Returns:
        Health status.
    """
    return {"status": "healthy"}
