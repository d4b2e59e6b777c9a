"""Boolean relevance gate between subscriber preferences and content items."""

from typing import Protocol

from regdigest.models.content import ContentItem


class MatchCriteria(Protocol):
    """Anything carrying normalized sector/keyword preferences.

    Satisfied by Subscriber and ContentFilter.
    """

    @property
    def sector(self) -> str | None: ...

    @property
    def keywords(self) -> list[str]: ...


def keyword_match(keywords: list[str], item: ContentItem) -> bool:
    """Any keyword occurs, case-insensitively, in the title or the summary.

    Each field is searched on its own, so a keyword never spans the two.
    """
    if not keywords:
        return False
    fields = [item.title.casefold(), (item.summary or "").casefold()]
    return any(
        keyword.casefold() in field for keyword in keywords for field in fields
    )


def sector_match(sector: str | None, item: ContentItem) -> bool:
    """The sector is an exact, case-sensitive member of the item's sectors."""
    if sector is None:
        return False
    return sector in item.sectors


def matches(criteria: MatchCriteria, item: ContentItem) -> bool:
    """Decide whether an item is relevant to a set of preferences.

    No sector and no keywords matches everything. Otherwise the keyword and
    sector signals are OR-ed, so either one is enough.

    Args:
        criteria: Subscriber or ContentFilter.
        item: Candidate content item.

    Returns:
        True if the item should be delivered / listed.
    """
    if criteria.sector is None and not criteria.keywords:
        return True
    return keyword_match(criteria.keywords, item) or sector_match(
        criteria.sector, item
    )
