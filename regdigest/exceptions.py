"""Error taxonomy shared by the services and the API layer."""


class RegDigestError(Exception):
    """Base class for all regdigest errors."""


class ValidationError(RegDigestError):
    """Missing or malformed required input. The operation is not attempted."""


class NotFoundError(RegDigestError):
    """A referenced subscriber does not exist."""


class StoreError(RegDigestError):
    """The document store is unreachable or a query failed."""


class DispatchError(RegDigestError):
    """A single destination's send failed."""

    def __init__(self, destination: str, reason: str) -> None:
        super().__init__(f"dispatch to {destination} failed: {reason}")
        self.destination = destination
        self.reason = reason


class AuthorizationError(RegDigestError):
    """The trigger token is missing or does not match."""
