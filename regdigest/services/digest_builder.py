"""Per-subscriber digest filtering and rendering."""

from collections.abc import Sequence

from regdigest.matching import matches
from regdigest.models.content import ContentItem
from regdigest.models.digest import Digest
from regdigest.models.subscriber import Subscriber

DIGEST_MAX_ITEMS = 20
SUMMARY_PLACEHOLDER = "(no summary)"
SOURCE_PLACEHOLDER = "(no source)"


def _updates(count: int) -> str:
    return "update" if count == 1 else "updates"


class DigestBuilder:
    """Builds the digest for one subscriber from a candidate window."""

    def __init__(self, max_items: int = DIGEST_MAX_ITEMS) -> None:
        """Initialize DigestBuilder.

        Args:
            max_items: Maximum number of items rendered into one digest.
        """
        if max_items <= 0:
            raise ValueError("max_items must be positive")
        self.max_items = max_items

    def build(
        self, subscriber: Subscriber, candidates: Sequence[ContentItem]
    ) -> Digest | None:
        """Filter candidates for a subscriber and render a digest.

        Candidate order (newest first) is preserved. Rendering is capped at
        ``max_items`` but the subject reports the full match count.

        Args:
            subscriber: Digest recipient.
            candidates: Recency window, newest first.

        Returns:
            The digest, or None when nothing matched.
        """
        matched = [item for item in candidates if matches(subscriber, item)]
        if not matched:
            return None

        rendered = matched[: self.max_items]
        return Digest(
            destination=subscriber.email,
            subject=self.render_subject(len(matched)),
            body=self.render_body(rendered, len(matched)),
            items=rendered,
            match_count=len(matched),
        )

    @staticmethod
    def render_subject(match_count: int) -> str:
        """Subject line with the uncapped match count."""
        return f"Regulatory digest: {match_count} new matching {_updates(match_count)}"

    @staticmethod
    def render_line(item: ContentItem) -> str:
        """One body line per item."""
        summary = item.summary or SUMMARY_PLACEHOLDER
        source = item.source_reference or SOURCE_PLACEHOLDER
        return f"- {item.title} | {summary} | {source}"

    def render_body(self, items: Sequence[ContentItem], match_count: int) -> str:
        """Plain text body.

        Args:
            items: Rendered (capped) items.
            match_count: True number of matches.

        Returns:
            Deterministic message body.
        """
        lines = [
            "Hello,",
            "",
            f"{match_count} regulatory {_updates(match_count)} "
            f"{'matches' if match_count == 1 else 'match'} your preferences:",
            "",
        ]
        lines.extend(self.render_line(item) for item in items)
        remaining = match_count - len(items)
        if remaining > 0:
            lines.append(f"...and {remaining} more.")
        return "\n".join(lines)
