"""Tests for Subscriber model."""

import pytest
from pydantic import ValidationError

from regdigest.models.subscriber import (
    NotifyPreference,
    Subscriber,
    normalize_keywords,
)


class TestNormalizeKeywords:
    """Tests for keyword normalization."""

    def test_comma_separated_string(self) -> None:
        assert normalize_keywords(" tax, customs ,, vat ") == ["tax", "customs", "vat"]

    def test_list_is_trimmed_and_deduplicated(self) -> None:
        assert normalize_keywords(["tax", " tax ", "", "  ", "vat"]) == ["tax", "vat"]

    @pytest.mark.parametrize("raw", [None, 42, {"tax": 1}, 3.5])
    def test_malformed_input_is_empty(self, raw: object) -> None:
        assert normalize_keywords(raw) == []

    def test_non_string_entries_dropped(self) -> None:
        assert normalize_keywords(["tax", 7, None]) == ["tax"]


class TestSubscriber:
    """Tests for Subscriber model."""

    def test_defaults(self) -> None:
        subscriber = Subscriber(email="a@example.com")

        assert subscriber.sector is None
        assert subscriber.keywords == []
        assert subscriber.notify_preference == NotifyPreference.UNSET
        assert subscriber.has_preferences is False

    def test_keywords_string_is_split(self) -> None:
        subscriber = Subscriber(email="a@example.com", keywords="tax, customs")

        assert subscriber.keywords == ["tax", "customs"]
        assert subscriber.has_preferences is True

    def test_blank_sector_is_none(self) -> None:
        subscriber = Subscriber(email="a@example.com", sector="  ")

        assert subscriber.sector is None

    def test_email_case_is_preserved(self) -> None:
        subscriber = Subscriber(email="  Mixed.Case@Example.com ")

        assert subscriber.email == "Mixed.Case@Example.com"

    def test_invalid_email(self) -> None:
        with pytest.raises(ValidationError):
            Subscriber(email="not-an-email")

    def test_null_notify_preference_is_unset(self) -> None:
        subscriber = Subscriber(email="a@example.com", notify_preference=None)

        assert subscriber.notify_preference == NotifyPreference.UNSET

    def test_unknown_notify_preference(self) -> None:
        with pytest.raises(ValidationError):
            Subscriber(email="a@example.com", notify_preference="weekly")

    def test_sector_only_has_preferences(self) -> None:
        assert Subscriber(email="a@example.com", sector="Legal").has_preferences
