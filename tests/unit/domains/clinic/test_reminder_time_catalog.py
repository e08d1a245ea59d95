# ============================================================================
# Tests for the reminder time catalog
# ============================================================================
"""Unit tests for ReminderTimeCatalog and ReminderOffset."""

from datetime import timedelta

import pytest

from mediflow.domains.clinic.domain.value_objects import ReminderOffset, ReminderTimeCatalog


class TestReminderTimeCatalog:
    """Tests for the fixed offset catalog."""

    def test_codes_in_catalog_order(self) -> None:
        """Should list offsets longest lead time first."""
        assert ReminderTimeCatalog.codes() == ["24h", "12h", "6h", "2h", "1h", "30m"]

    def test_lookup_known_code(self) -> None:
        """Should resolve a code to its offset."""
        offset = ReminderTimeCatalog.lookup("2h")
        assert offset is not None
        assert offset.label == "2 hours before"
        assert offset.hours_before == 2

    def test_thirty_minutes_is_half_hour(self) -> None:
        """Should express 30m as half an hour."""
        offset = ReminderTimeCatalog.lookup("30m")
        assert offset.hours_before == 0.5
        assert offset.delta == timedelta(minutes=30)

    def test_lookup_unknown_code_returns_none(self) -> None:
        """Should return None for codes outside the catalog."""
        assert ReminderTimeCatalog.lookup("3d") is None
        assert ReminderTimeCatalog.lookup("") is None

    def test_codes_are_unique(self) -> None:
        codes = ReminderTimeCatalog.codes()
        assert len(codes) == len(set(codes))

    def test_options_returns_fresh_list(self) -> None:
        """Mutating the returned list must not affect the catalog."""
        options = ReminderTimeCatalog.options()
        options.clear()
        assert len(ReminderTimeCatalog.options()) == 6


class TestReminderOffset:
    """Tests for the ReminderOffset value object."""

    def test_is_immutable(self) -> None:
        offset = ReminderTimeCatalog.lookup("1h")
        with pytest.raises(AttributeError):
            offset.hours_before = 3  # type: ignore[misc]

    @pytest.mark.parametrize("hours", [0, -1])
    def test_rejects_non_positive_hours(self, hours: float) -> None:
        """Should refuse offsets that do not precede the appointment."""
        with pytest.raises(ValueError):
            ReminderOffset("bad", "bad", hours)

    def test_to_dict(self) -> None:
        assert ReminderTimeCatalog.lookup("24h").to_dict() == {
            "code": "24h",
            "label": "24 hours before",
            "hours_before": 24,
        }
