# tests/services/test_sections.py
"""Tests for cultural_planner/services/parser/sections.py module."""

from cultural_planner.schemas import PracticalInfo
from cultural_planner.services.parser.sections import (
    CULTURAL_CONTEXT,
    DESCRIPTION,
    PRACTICAL_INFO,
    TIPS,
    WEATHER_ALTERNATIVE,
    ActivityDetails,
    extract_bullet,
    extract_section,
    parse_practical_info,
    parse_sections,
)

DETAIL = """Description: Watch the morning prayers from the steps.
Cultural Context: A ritual performed here for centuries.
Practical Info:
- Duration: 1 hour
- Cost: Free
- Booking: Not required
- Dress Code: Modest clothing
- Photography: Allowed without flash
- Transport: Walk from the old city
Tips: Arrive 15 minutes early.
Weather Alternative: Visit the Kashi Vishwanath corridor."""


class TestExtractSection:
    """Tests for extract_section function."""

    def test_description_stops_at_next_label(self) -> None:
        """Test that a span ends at the first following marker."""
        assert extract_section(DETAIL, DESCRIPTION) == (
            "Watch the morning prayers from the steps."
        )

    def test_description_skips_missing_labels(self) -> None:
        """Test fallback to a later boundary when the nearest is absent."""
        text = "Description: Quiet lanes.\nTips: Wear sandals."
        assert extract_section(text, DESCRIPTION) == "Quiet lanes."

    def test_weather_alternative_runs_to_end(self) -> None:
        """Test that the last section takes the rest of the text."""
        text = "Weather Alternative: Museum visit.\nBring an umbrella."
        assert extract_section(text, WEATHER_ALTERNATIVE) == (
            "Museum visit.\nBring an umbrella."
        )

    def test_missing_label_gives_empty_string(self) -> None:
        """Test that an absent label yields an empty span."""
        assert extract_section("Tips: Go early.", CULTURAL_CONTEXT) == ""

    def test_labels_are_case_insensitive(self) -> None:
        """Test lowercase labels are recognised."""
        text = "description: lower case.\ntips: still found."
        assert extract_section(text, DESCRIPTION) == "lower case."
        assert extract_section(text, TIPS) == "still found."

    def test_markdown_emphasis_stripped(self) -> None:
        """Test that bold markers around labels do not leak into values."""
        text = "**Description:** Walk the ramparts.\n**Tips:** Go early."
        assert extract_section(text, DESCRIPTION) == "Walk the ramparts."
        assert extract_section(text, TIPS) == "Go early."

    def test_label_words_inside_prose_ignored(self) -> None:
        """Test that a label word in the middle of a line does not open a section."""
        text = "Description: Ask about the cost: it varies.\nTips: Bring cash."
        assert extract_section(text, DESCRIPTION) == "Ask about the cost: it varies."
        assert extract_section(text, TIPS) == "Bring cash."
        assert extract_section("Description: Some tips: none.", TIPS) == ""


class TestExtractBullet:
    """Tests for extract_bullet function."""

    def test_reads_rest_of_line(self) -> None:
        """Test that only the marker's line is returned."""
        span = "- Cost: ₹500\n- Booking: Online"
        assert extract_bullet(span, "Cost:") == "₹500"
        assert extract_bullet(span, "Booking:") == "Online"

    def test_marker_inside_value_ignored(self) -> None:
        """Test that a field name inside another field's value is not read as a field."""
        span = "- Booking: Ask at the desk, cost: varies\n- Cost: ₹300"
        assert extract_bullet(span, "Cost:") == "₹300"

    def test_missing_marker(self) -> None:
        """Test that a missing field yields an empty string."""
        assert extract_bullet("- Cost: Free", "Transport:") == ""

    def test_last_line_without_newline(self) -> None:
        """Test a field on the final line of the span."""
        assert extract_bullet("• Transport: Auto rickshaw", "Transport:") == "Auto rickshaw"


class TestParsePracticalInfo:
    """Tests for parse_practical_info function."""

    def test_all_fields(self) -> None:
        """Test that all six logistics fields are read."""
        span = extract_section(DETAIL, PRACTICAL_INFO)
        info = parse_practical_info(span)
        assert info == PracticalInfo(
            duration="1 hour",
            cost="Free",
            booking="Not required",
            dress_code="Modest clothing",
            photography="Allowed without flash",
            transport="Walk from the old city",
        )
        assert info.is_complete()

    def test_empty_span(self) -> None:
        """Test that an empty span gives an empty logistics block."""
        info = parse_practical_info("")
        assert info == PracticalInfo()
        assert not info.is_complete()

    def test_partial_fields(self) -> None:
        """Test that absent fields stay empty."""
        info = parse_practical_info("* Duration: 2 hours\n* Cost: ₹200")
        assert info.duration == "2 hours"
        assert info.cost == "₹200"
        assert info.booking == ""


class TestParseSections:
    """Tests for parse_sections function."""

    def test_full_detail(self) -> None:
        """Test parsing every labelled subsection."""
        details = parse_sections(DETAIL)
        assert details.description == "Watch the morning prayers from the steps."
        assert details.cultural_context == "A ritual performed here for centuries."
        assert details.practical_info.cost == "Free"
        assert details.tips == "Arrive 15 minutes early."
        assert details.weather_alternative == "Visit the Kashi Vishwanath corridor."

    def test_blank_detail(self) -> None:
        """Test that blank detail text yields empty details."""
        assert parse_sections("") == ActivityDetails()
        assert parse_sections("  \n\t") == ActivityDetails()

    def test_unlabelled_text_is_ignored(self) -> None:
        """Test that free text without labels yields empty fields."""
        details = parse_sections("Just a nice place to be.")
        assert details.description == ""
        assert details.tips == ""

    def test_blank_lines_collapsed(self) -> None:
        """Test that blank lines inside a section are dropped."""
        details = parse_sections("Description: First line.\n\n\nSecond line.")
        assert details.description == "First line.\nSecond line."

    def test_lowercase_label_in_prose_does_not_take_section(self) -> None:
        """Test that "tips:" inside a description leaves the real Tips line intact."""
        details = parse_sections(
            "Description: The guide shares photography tips: shoot at dawn.\n"
            "Cultural Context: Old shrine.\n"
            "Tips: Carry water.",
        )
        assert details.description == "The guide shares photography tips: shoot at dawn."
        assert details.cultural_context == "Old shrine."
        assert details.tips == "Carry water."

    def test_bulleted_labels(self) -> None:
        """Test labels written as list items or headings."""
        details = parse_sections("- Description: Fort walk.\n### Tips: Wear shoes.")
        assert details.description == "Fort walk."
        assert details.tips == "Wear shoes."
