"""Resend email API client."""

from typing import Any

import resend
from resend.exceptions import ResendError

from regdigest.exceptions import DispatchError


class ResendClient:
    """Client for sending plain-text email through Resend."""

    def __init__(
        self, api_key: str, from_email: str, from_name: str | None = None
    ) -> None:
        """Initialize Resend client.

        Args:
            api_key: Resend API key (re_...).
            from_email: Sender address.
            from_name: Optional sender display name.
        """
        # The Resend SDK reads its key from module state.
        resend.api_key = api_key
        self._sender = f"{from_name} <{from_email}>" if from_name else from_email

    @property
    def sender(self) -> str:
        """Formatted From header."""
        return self._sender

    def send_email(self, to: str, subject: str, text: str) -> dict[str, Any]:
        """Send one email.

        Args:
            to: Recipient address.
            subject: Subject line.
            text: Plain text body.

        Returns:
            Resend API response (contains the message ``id``).

        Raises:
            DispatchError: If the API call fails.
        """
        params: dict[str, Any] = {
            "from": self._sender,
            "to": [to],
            "subject": subject,
            "text": text,
        }
        try:
            response = resend.Emails.send(params)  # type: ignore[arg-type]
        except ResendError as e:
            raise DispatchError(to, str(e)) from e
        return dict(response)
