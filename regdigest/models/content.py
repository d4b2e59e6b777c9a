"""Content item and content filter models.

Content items are regulatory updates written by the ingestion side; this
service only reads them.
"""

from pydantic import BaseModel, Field, field_validator

from regdigest.models.subscriber import normalize_keywords


class ContentItem(BaseModel):
    """Regulatory update record.

    Firestore Collection: content_items
    """

    id: int = Field(..., ge=0, description="Store-assigned, monotonically increasing")
    title: str = Field(..., description="Headline")
    summary: str | None = Field(None, description="Short summary")
    source_reference: str | None = Field(None, description="Official source / link")
    sectors: list[str] = Field(default_factory=list, description="Sector tags")

    @field_validator("sectors", mode="before")
    @classmethod
    def sectors_none_to_empty(cls, v: list[str] | None) -> list[str]:
        """Untagged items may store sectors as null."""
        return [] if v is None else v

    model_config = {
        "json_schema_extra": {
            "example": {
                "id": 1042,
                "title": "Data Protection Update",
                "summary": "Amended retention periods for personal data.",
                "source_reference": "Official Gazette No. 32812",
                "sectors": ["Legal"],
            }
        }
    }


class ContentFilter(BaseModel):
    """Typed filter for content queries.

    Has the same ``sector``/``keywords`` shape as a subscriber so it can be
    evaluated with the same match predicate.
    """

    sector: str | None = None
    keywords: list[str] = Field(default_factory=list)

    @field_validator("keywords", mode="before")
    @classmethod
    def split_keywords(cls, v: object) -> list[str]:
        """Normalize keywords like subscriber input."""
        return normalize_keywords(v)

    @field_validator("sector", mode="before")
    @classmethod
    def blank_sector_to_none(cls, v: object) -> object:
        """Treat an empty sector as no sector."""
        if isinstance(v, str):
            return v.strip() or None
        return v

    @classmethod
    def from_query(
        cls, free_text: str | None = None, sector: str | None = None
    ) -> "ContentFilter":
        """Build a filter from interactive search input.

        The free text is one needle, not a comma-separated list.
        """
        text = (free_text or "").strip()
        return cls(sector=sector, keywords=[text] if text else [])

    @property
    def is_empty(self) -> bool:
        """True when neither sector nor keywords narrow the result."""
        return self.sector is None and not self.keywords
