# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import pytest

SCENARIO_A_TEXT = (
    "Day 1:\n"
    "[09:00 AM] Visit Temple | City Temple\n"
    "Description: A peaceful morning visit.\n"
    "Day 2:\n"
    "[10:00 AM] Local Market | Old Bazaar\n"
)

FULL_ACTIVITY_TEXT = """Here is your cultural journey!

Day 1:
[06:30 AM] Sunrise Aarti | Dashashwamedh Ghat
Description: Watch the morning prayers from the steps.
Cultural Context: A ritual performed here for centuries.
Practical Info:
- Duration: 1 hour
- Cost: Free
- Booking: Not required
- Dress Code: Modest clothing
- Photography: Allowed without flash
- Transport: Walk from the old city
Tips: Arrive 15 minutes early.
Weather Alternative: Visit the Kashi Vishwanath corridor.

[2:00 PM] Silk Weaving Visit | Madanpura
Description: See Banarasi silk woven on handlooms.

Day 2:
[09:00 AM] Sarnath Excursion | Sarnath
Description: Visit the deer park.
"""


@pytest.fixture
def scenario_a_text() -> str:
    """Two-day text with one activity per day."""
    return SCENARIO_A_TEXT


@pytest.fixture
def full_activity_text() -> str:
    """Two-day text with a fully detailed first activity."""
    return FULL_ACTIVITY_TEXT
