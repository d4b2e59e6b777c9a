"""Application settings using Pydantic Settings."""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

DispatchBackendName = Literal["provider", "dry-run"]


class Settings(BaseSettings):
    """Application configuration from environment variables.

    Only GCP_PROJECT_ID is required. Leaving RESEND_API_KEY unset switches
    digest dispatch to the dry-run backend; leaving DIGEST_TRIGGER_TOKEN
    unset rejects every trigger call.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Google Cloud Platform
    # -------------------------------------------------------------------------
    GCP_PROJECT_ID: str

    # Firestore Emulator (local development)
    FIRESTORE_EMULATOR_HOST: str | None = None

    # -------------------------------------------------------------------------
    # Email (Resend)
    # -------------------------------------------------------------------------
    RESEND_API_KEY: str | None = None
    MAIL_FROM: str = "digest@regdigest.local"
    MAIL_FROM_NAME: str = "Regulatory Digest"

    # -------------------------------------------------------------------------
    # Digest trigger
    # -------------------------------------------------------------------------
    DIGEST_TRIGGER_TOKEN: str | None = None

    # -------------------------------------------------------------------------
    # Matching windows
    # -------------------------------------------------------------------------
    DIGEST_CANDIDATE_LIMIT: int = 100
    """Recency window scanned by a digest run"""

    DIGEST_MAX_ITEMS: int = 20
    """Items rendered per digest (match counts stay uncapped)"""

    FEED_LIMIT: int = 50
    """Items returned by interactive feed reads"""

    # -------------------------------------------------------------------------
    # Application
    # -------------------------------------------------------------------------
    LOG_JSON: bool = True

    @property
    def is_local(self) -> bool:
        """Check if running in local development mode."""
        return self.FIRESTORE_EMULATOR_HOST is not None

    @property
    def dispatch_backend(self) -> DispatchBackendName:
        """Dispatch backend implied by the presence of provider credentials."""
        return "provider" if self.RESEND_API_KEY else "dry-run"


# Singleton instance (lazy initialization)
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the application settings (singleton)."""
    global _settings
    if _settings is None:
        _settings = Settings()  # type: ignore[call-arg]
    return _settings
