"""Digest dispatch with a real email backend and a dry-run backend.

``DispatchClient.send`` never raises: every outcome is a DispatchResult so
the run loop can aggregate failures instead of catching them.
"""

from dataclasses import dataclass
from typing import Protocol

import structlog

from regdigest.adapters.resend_client import ResendClient
from regdigest.config.settings import DispatchBackendName, Settings
from regdigest.exceptions import DispatchError

logger = structlog.get_logger(__name__)


@dataclass
class DispatchResult:
    """Outcome of one send."""

    ok: bool
    message_id: str | None = None
    error: str | None = None

    @classmethod
    def sent(cls, message_id: str | None = None) -> "DispatchResult":
        return cls(ok=True, message_id=message_id)

    @classmethod
    def failed(cls, reason: str) -> "DispatchResult":
        return cls(ok=False, error=reason)


class DispatchBackend(Protocol):
    """Delivers one message or raises."""

    name: DispatchBackendName

    def deliver(self, destination: str, subject: str, body: str) -> str | None:
        """Deliver a message and return the provider message id, if any."""
        ...


class ResendBackend:
    """Sends through the Resend email API."""

    name: DispatchBackendName = "provider"

    def __init__(self, client: ResendClient) -> None:
        self._client = client

    def deliver(self, destination: str, subject: str, body: str) -> str | None:
        response = self._client.send_email(to=destination, subject=subject, text=body)
        message_id = response.get("id")
        if not message_id:
            raise DispatchError(destination, "provider response has no message id")
        return str(message_id)


class DryRunBackend:
    """Logs the would-be message instead of sending it."""

    name: DispatchBackendName = "dry-run"

    def deliver(self, destination: str, subject: str, body: str) -> str | None:
        logger.info(
            "digest_dry_run",
            destination=destination,
            subject=subject,
            body_lines=body.count("\n") + 1,
        )
        return None


class DispatchClient:
    """Sends rendered digests through the configured backend."""

    def __init__(self, backend: DispatchBackend) -> None:
        """Initialize DispatchClient.

        Args:
            backend: ResendBackend or DryRunBackend.
        """
        self.backend = backend

    @classmethod
    def from_settings(cls, settings: Settings) -> "DispatchClient":
        """Pick the backend from configuration presence.

        Args:
            settings: Application settings.

        Returns:
            Client using Resend when RESEND_API_KEY is set, dry-run otherwise.
        """
        if settings.dispatch_backend == "provider":
            client = ResendClient(
                api_key=settings.RESEND_API_KEY or "",
                from_email=settings.MAIL_FROM,
                from_name=settings.MAIL_FROM_NAME,
            )
            return cls(ResendBackend(client))
        return cls(DryRunBackend())

    @property
    def backend_name(self) -> DispatchBackendName:
        """``provider`` or ``dry-run``."""
        return self.backend.name

    def send(self, destination: str, subject: str, body: str) -> DispatchResult:
        """Send one message.

        Args:
            destination: Recipient email.
            subject: Subject line.
            body: Plain text body.

        Returns:
            ``ok`` result, or ``failed`` with the reason. Never raises.
        """
        try:
            message_id = self.backend.deliver(destination, subject, body)
        except DispatchError as e:
            return DispatchResult.failed(e.reason)
        except Exception as e:
            # Provider SDK/network errors are per-destination failures too.
            return DispatchResult.failed(f"{type(e).__name__}: {e}")
        return DispatchResult.sent(message_id)
