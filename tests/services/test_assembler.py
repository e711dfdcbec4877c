# tests/services/test_assembler.py
"""Tests for cultural_planner/services/parser/assembler.py module."""

import pytest
from pytest_mock import MockerFixture

from cultural_planner.configs import settings
from cultural_planner.data import SLOT_TEMPLATES
from cultural_planner.errors import EmptyOrInvalidResponseTextError
from cultural_planner.services.parser.assembler import (
    assemble,
    normalize_destination,
    normalize_duration,
    parse_itinerary,
)
from cultural_planner.services.parser.defaults import default_content
from cultural_planner.services.parser.extractor import extract_activities

MESSY_INPUTS: list[object] = [
    None,
    42,
    "",
    "   \n\t",
    "garbage without structure",
    "Day 9: [10:00] X | Y",
    "Day 2:\n[03:00 PM] B | b\nDay 1:\n[09:00 AM] A | a",
    "[25:00] Bad | Time\n[10:00 AM] Lunch break",
    "p1\n\np2\n\np3\n\np4\n\np5",
    "Day 1: a\nDay 1: b\nDay 3: [7:00 pm] Aarti | Ghat",
]


class TestParseItinerary:
    """Tests for parse_itinerary function."""

    def test_single_activity_per_day(self, scenario_a_text: str) -> None:
        """Test parsing two days with one activity each."""
        itinerary = parse_itinerary(scenario_a_text, 2, "Agra")

        day_one, day_two = itinerary.days
        assert len(day_one.slots) == 1
        slot = day_one.slots[0]
        assert slot.time == "09:00 AM"
        assert slot.title == "Visit Temple"
        assert slot.location == "City Temple"
        assert slot.description == "A peaceful morning visit."
        assert [s.title for s in day_two.slots] == ["Local Market"]

    def test_full_detail(self, full_activity_text: str) -> None:
        """Test that every subsection of a detailed activity is kept."""
        itinerary = parse_itinerary(full_activity_text, 2, "Varanasi")

        aarti, weaving = itinerary.days[0].slots
        assert aarti.title == "Sunrise Aarti"
        assert aarti.cultural_context == "A ritual performed here for centuries."
        assert aarti.practical_info.is_complete()
        assert aarti.tips == "Arrive 15 minutes early."
        assert aarti.weather_alternative == "Visit the Kashi Vishwanath corridor."
        assert weaving.time == "02:00 PM"
        assert weaving.description == "See Banarasi silk woven on handlooms."
        assert [s.title for s in itinerary.days[1].slots] == ["Sarnath Excursion"]

    def test_empty_text_uses_generic_fallback(self) -> None:
        """Test that empty text gives the generic bank for the destination."""
        itinerary = parse_itinerary("", 3, "Unknown City")

        assert itinerary.duration == 3
        for plan in itinerary.days:
            assert len(plan.slots) == 4
            assert all("Unknown City" in slot.location for slot in plan.slots)
        assert itinerary == default_content.itinerary(3, "Unknown City")

    @pytest.mark.parametrize("text", MESSY_INPUTS)
    @pytest.mark.parametrize("duration", [1, 2, 5])
    def test_always_exact_days(self, text: object, duration: int) -> None:
        """Test that any input yields exactly the requested, sorted days."""
        itinerary = parse_itinerary(text, duration, "Jaipur")

        assert [plan.day for plan in itinerary.days] == list(range(1, duration + 1))
        for plan in itinerary.days:
            assert plan.slots
            minutes = [slot.minute_of_day for slot in plan.slots]
            assert minutes == sorted(minutes)
            assert all(0 <= minute < 24 * 60 for minute in minutes)

    @pytest.mark.parametrize("text", MESSY_INPUTS)
    def test_idempotent(self, text: object) -> None:
        """Test that parsing the same input twice gives equal results."""
        assert parse_itinerary(text, 3, "Agra") == parse_itinerary(text, 3, "Agra")

    def test_slots_sorted_with_stable_ties(self) -> None:
        """Test chronological order with ties kept in extraction order."""
        text = "Day 1:\n[03:00 PM] B | b\n[09:00 AM] A | a\n[03:00 PM] C | c"
        itinerary = parse_itinerary(text, 1, "Agra")
        assert [slot.title for slot in itinerary.days[0].slots] == ["A", "B", "C"]

    def test_hour_only_header_extracted(self) -> None:
        """Test that a "[9 AM]" header yields its own activity, not defaults."""
        text = "Day 1:\n[9 AM] Visit Temple | City Temple\nDescription: Morning.\n"
        itinerary = parse_itinerary(text, 1, "Unknown City")

        (slot,) = itinerary.days[0].slots
        assert slot.title == "Visit Temple"
        assert slot.time == "09:00 AM"
        assert slot.description == "Morning."

    def test_unparseable_time_sorted_last(self) -> None:
        """Test that a slot with an invalid time is kept at the end of its day."""
        text = (
            "Day 1:\n[25:00] Midnight Feast | Rooftop\n"
            "[09:00 PM] Late Walk | Ghat\n[09:00 AM] A | a\n"
        )
        itinerary = parse_itinerary(text, 1, "Agra")

        slots = itinerary.days[0].slots
        assert [slot.title for slot in slots] == ["A", "Late Walk", "Midnight Feast"]
        assert slots[-1].time == "25:00"

    def test_activities_stay_in_their_day(self) -> None:
        """Test that each day only holds activities from its own section."""
        text = "Day 1:\n[09:00 AM] A | a\nDay 2:\n[10:00 AM] B | b\n[11:00 AM] C | c"
        itinerary = parse_itinerary(text, 2, "Agra")
        assert [s.title for s in itinerary.days[0].slots] == ["A"]
        assert [s.title for s in itinerary.days[1].slots] == ["B", "C"]

    def test_day_without_activities_gets_default_slots(self) -> None:
        """Test the slot-tier fallback inside an otherwise parsed itinerary."""
        text = "Day 1: relax by the river\nDay 2:\n[10:00 AM] Fort | Amber Fort"
        itinerary = parse_itinerary(text, 2, "Agra")

        titles = {t.title for t in SLOT_TEMPLATES}
        assert len(itinerary.days[0].slots) == 4
        assert all(slot.title in titles for slot in itinerary.days[0].slots)
        assert [s.title for s in itinerary.days[1].slots] == ["Fort"]

    def test_padded_day_gets_default_slots(self) -> None:
        """Test that a day missing from the text is still populated."""
        itinerary = parse_itinerary("Day 1:\n[09:00 AM] A | a", 3, "Pune")
        assert len(itinerary.days[1].slots) == 4
        assert all("Pune" in slot.location for slot in itinerary.days[2].slots)

    def test_padded_days_skip_extraction(self, mocker: MockerFixture) -> None:
        """Test that padded days take default slots without scanning their text."""
        extract = mocker.patch(
            "cultural_planner.services.parser.assembler.extract_activities",
            wraps=extract_activities,
        )
        itinerary = parse_itinerary("Day 1:\n[09:00 AM] A | a", 3, "Pune")

        extract.assert_called_once()
        assert extract.call_args.args[1] == 1
        assert itinerary.days[1].slots == default_content.day_slots(2, "Pune")
        assert itinerary.days[2].slots == default_content.day_slots(3, "Pune")

    def test_internal_error_uses_fallback(self, mocker: MockerFixture) -> None:
        """Test that an unexpected error yields the itinerary-tier fallback."""
        mocker.patch(
            "cultural_planner.services.parser.assembler.segment_response",
            side_effect=RuntimeError("boom"),
        )
        itinerary = parse_itinerary("Day 1:\n[09:00 AM] A | a", 2, "Agra")
        assert itinerary == default_content.itinerary(2, "Agra")

    def test_non_string_text_uses_fallback(self) -> None:
        """Test that non-string text is treated as empty."""
        assert parse_itinerary(123, 2, "Jaipur") == default_content.itinerary(2, "Jaipur")

    def test_payload_uses_camel_case(self, scenario_a_text: str) -> None:
        """Test the serialized shape handed to the rendering layer."""
        payload = parse_itinerary(scenario_a_text, 2, "Agra").to_payload()

        assert set(payload[0]) == {"day", "timeSlots"}
        slot = payload[0]["timeSlots"][0]
        assert slot["time"] == "09:00 AM"
        assert "culturalContext" in slot
        assert "weatherAlternative" in slot
        assert "dressCode" in slot["practicalInfo"]
        assert "minuteOfDay" not in slot
        assert "minute_of_day" not in slot


class TestAssemble:
    """Tests for assemble function."""

    @pytest.mark.parametrize("text", ["", "  ", None, 5])
    def test_rejects_empty_text(self, text: object) -> None:
        """Test that blank or non-string text raises."""
        with pytest.raises(EmptyOrInvalidResponseTextError):
            assemble(text, 1, "Agra")  # type: ignore[arg-type]

    def test_assembles(self, scenario_a_text: str) -> None:
        """Test direct assembly of well-formed text."""
        assert assemble(scenario_a_text, 2, "Agra").duration == 2


class TestNormalization:
    """Tests for input normalization helpers."""

    @pytest.mark.parametrize(
        ("duration", "expected"),
        [(3, 3), ("2", 2), (2.0, 2), (0, 1), (-4, 1), (None, 1), (True, 1), ("abc", 1)],
    )
    def test_normalize_duration(self, duration: object, expected: int) -> None:
        """Test coercion of requested durations."""
        assert normalize_duration(duration) == expected

    @pytest.mark.parametrize(
        ("destination", "expected"),
        [
            ("Agra", "Agra"),
            ("  Agra ", "Agra"),
            ("", settings.DEFAULT_DESTINATION),
            ("   ", settings.DEFAULT_DESTINATION),
            (None, settings.DEFAULT_DESTINATION),
            (7, settings.DEFAULT_DESTINATION),
        ],
    )
    def test_normalize_destination(self, destination: object, expected: str) -> None:
        """Test destination fallback to the configured default."""
        assert normalize_destination(destination) == expected

    def test_missing_destination_in_fallback(self) -> None:
        """Test that fallback content names the default destination."""
        itinerary = parse_itinerary("", 1, None)
        assert all(
            settings.DEFAULT_DESTINATION in slot.location for slot in itinerary.days[0].slots
        )

    def test_zero_duration_gives_one_day(self) -> None:
        """Test that a non-positive duration is raised to one day."""
        assert parse_itinerary("", 0, "Agra").duration == 1
