"""Unit tests for reminder template rendering."""

from mediflow.domains.clinic.application.services.template_renderer import render


class TestRender:
    """Tests for {placeholder} substitution."""

    def test_substitutes_known_and_keeps_unknown(self) -> None:
        """Should replace known keys and leave unknown placeholders verbatim."""
        assert render("Hi {name}, {x}", {"name": "Ann"}) == "Hi Ann, {x}"

    def test_replaces_every_occurrence(self) -> None:
        assert render("{a} and {a}", {"a": "b"}) == "b and b"

    def test_values_are_not_expanded_again(self) -> None:
        """Should substitute in a single pass."""
        result = render("{first} {second}", {"first": "{second}", "second": "two"})
        assert result == "{second} two"

    def test_non_string_values_are_stringified(self) -> None:
        assert render("Room {n}", {"n": 12}) == "Room 12"

    def test_regex_metacharacters_in_keys(self) -> None:
        assert render("{a.b} {a+b}", {"a.b": "dot", "a+b": "plus"}) == "dot plus"

    def test_empty_template_or_variables(self) -> None:
        assert render("", {"a": "b"}) == ""
        assert render("Hi {name}", {}) == "Hi {name}"

    def test_malformed_placeholders_left_alone(self) -> None:
        assert render("Hi {name", {"name": "Ann"}) == "Hi {name"
