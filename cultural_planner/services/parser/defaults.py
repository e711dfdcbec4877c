"""
Deterministic fallback content.

Two tiers:
- slot tier: single activities for a day whose text had no usable entries
- itinerary tier: a whole N-day plan when the pipeline cannot run at all
"""

from collections.abc import Mapping, Sequence

from cultural_planner.configs.settings import DEFAULT_ANCHOR_TIMES
from cultural_planner.data.fallback_bank import (
    CURATED_BANKS,
    DESTINATION_PLACEHOLDER,
    GENERIC_BANK,
    PLACEHOLDER_DAY_TEXT,
    SLOT_TEMPLATES,
    ActivityTemplate,
)
from cultural_planner.schemas.itinerary import ActivitySlot, DayPlan, Itinerary
from cultural_planner.services.parser.time_normalizer import parse_time

Bank = Sequence[Sequence[ActivityTemplate]]


def _build_slot(template: ActivityTemplate, time: str, destination: str) -> ActivitySlot:
    indicator = parse_time(time)
    if indicator is None:
        msg = f"Fallback template time {time!r} is not a valid time of day"
        raise ValueError(msg)
    return ActivitySlot(
        time=indicator.display,
        minute_of_day=indicator.minute_of_day,
        **template.render(destination),
    )


class DefaultContentProvider:
    """
    Source of pre-authored activities.

    Attributes:
        anchor_times: Times of the slots generated for an empty day.
    """

    def __init__(
        self,
        slot_templates: Sequence[ActivityTemplate] = SLOT_TEMPLATES,
        curated_banks: Mapping[str, Bank] = CURATED_BANKS,
        generic_bank: Bank = GENERIC_BANK,
        anchor_times: Sequence[str] = DEFAULT_ANCHOR_TIMES,
    ) -> None:
        self._slot_templates = tuple(slot_templates)
        self._curated_banks = curated_banks
        self._generic_bank = generic_bank
        self.anchor_times = tuple(anchor_times)

    def slot(self, anchor: str, day: int, destination: str) -> ActivitySlot:
        """
        Build one default activity.

        The template is picked by ``(anchor hour + day) % bank size`` with the
        anchor hour on the 24-hour clock, so consecutive days rotate through
        the bank.

        Args:
            anchor: Time of the activity, e.g. ``"03:00 PM"``.
            day: Day number the activity belongs to.
            destination: Display name substituted into the template.

        Returns:
            A fully populated activity slot.
        """
        indicator = parse_time(anchor)
        if indicator is None:
            msg = f"Anchor time {anchor!r} is not a valid time of day"
            raise ValueError(msg)
        anchor_hour = indicator.minute_of_day // 60
        template = self._slot_templates[(anchor_hour + day) % len(self._slot_templates)]
        return _build_slot(template, anchor, destination)

    def day_slots(self, day: int, destination: str) -> tuple[ActivitySlot, ...]:
        """Return one default activity per anchor time."""
        return tuple(self.slot(anchor, day, destination) for anchor in self.anchor_times)

    def placeholder_text(self, destination: str) -> str:
        """Text of a day the generator did not cover."""
        return PLACEHOLDER_DAY_TEXT.replace(DESTINATION_PLACEHOLDER, destination)

    def bank_for(self, destination: str) -> Bank:
        """Return the curated bank for a known destination, else the generic one."""
        return self._curated_banks.get(destination, self._generic_bank)

    def is_curated(self, destination: str) -> bool:
        """Whether the destination has its own curated bank."""
        return destination in self._curated_banks

    def itinerary(self, duration: int, destination: str) -> Itinerary:
        """
        Build a complete itinerary from the fallback banks.

        Days beyond the bank's length cycle back to its first day.

        Args:
            duration: Number of days, at least 1.
            destination: Display name used for bank lookup and substitution.

        Returns:
            An itinerary of exactly ``duration`` days.
        """
        bank = self.bank_for(destination)
        plans = []
        for index in range(duration):
            templates = bank[index % len(bank)]
            slots = [_build_slot(t, t.time, destination) for t in templates]
            slots.sort(key=lambda slot: slot.minute_of_day)
            plans.append(DayPlan(day=index + 1, slots=tuple(slots)))
        return Itinerary(days=tuple(plans))


default_content = DefaultContentProvider()
