"""Digest and run summary models.

Neither is persisted: a digest is rendered per subscriber per run and a run
summary is returned to the trigger caller.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from regdigest.config.settings import DispatchBackendName
from regdigest.models.content import ContentItem


class Digest(BaseModel):
    """Rendered digest for one subscriber."""

    destination: str = Field(..., description="Subscriber email")
    subject: str = Field(..., description="Subject line (uncapped match count)")
    body: str = Field(..., description="Plain text body")
    items: list[ContentItem] = Field(..., description="Rendered items (capped)")
    match_count: int = Field(..., ge=1, description="True number of matches")

    @model_validator(mode="after")
    def validate_counts(self) -> "Digest":
        """Rendered items can never outnumber the matches."""
        if not self.items:
            raise ValueError("digest must render at least one item")
        if len(self.items) > self.match_count:
            raise ValueError(
                f"rendered items ({len(self.items)}) exceed "
                f"match_count ({self.match_count})"
            )
        return self


class RunSummary(BaseModel):
    """Outcome of one digest run.

    Serialized for the trigger response with camelCase aliases.
    """

    model_config = ConfigDict(populate_by_name=True)

    ok: bool = True
    subscribers_considered: int = Field(
        0, ge=0, serialization_alias="subscribersConsidered"
    )
    skipped: int = Field(0, ge=0, description="Opted out or nothing matched")
    attempted: int = Field(0, ge=0, description="Digests handed to dispatch")
    sent: int = Field(0, ge=0)
    failed: int = Field(0, ge=0)
    backend: DispatchBackendName = "dry-run"
    failures: dict[str, str] = Field(
        default_factory=dict,
        exclude=True,
        description="destination -> reason, logged but not returned",
    )

    def to_response(self) -> dict[str, object]:
        """JSON body returned by the trigger endpoint."""
        return self.model_dump(mode="json", by_alias=True)
