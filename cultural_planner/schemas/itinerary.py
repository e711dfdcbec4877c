"""
Schemas for parsed cultural itineraries.

All models are frozen: a parsed itinerary is a value handed to the rendering
layer and is never mutated afterwards. Field names are snake_case in Python
and camelCase on the wire.
"""

from dataclasses import dataclass, field
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from cultural_planner.configs.settings import (
    MAX_DESTINATION_LENGTH,
    MAX_TRIP_DURATION,
    MIN_TRIP_DURATION,
)

MINUTES_PER_DAY = 24 * 60


@dataclass(frozen=True, slots=True, order=True)
class TimeIndicator:
    """
    Canonical time of day.

    Equality and ordering only look at ``minute_of_day``; ``display`` is the
    canonical ``"HH:MM AM/PM"`` rendering of the same value.
    """

    minute_of_day: int
    display: str = field(compare=False)


@dataclass(frozen=True, slots=True)
class DaySegment:
    """Raw text attributed to one day, before activity extraction."""

    day: int
    content: str
    placeholder: bool = False


class _FrozenModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        str_strip_whitespace=True,
    )


class PracticalInfo(_FrozenModel):
    """Logistics block attached to an activity."""

    duration: str = ""
    cost: str = ""
    booking: str = ""
    dress_code: str = ""
    photography: str = ""
    transport: str = ""

    def is_complete(self) -> bool:
        """Return True when every logistics field is populated."""
        return all(self.model_dump().values())


class ActivitySlot(_FrozenModel):
    """One time-anchored unit of a day's schedule."""

    time: str = Field(..., min_length=1, examples=["09:00 AM"])
    minute_of_day: int = Field(..., ge=0, lt=MINUTES_PER_DAY, exclude=True)
    title: str = Field(..., min_length=1, examples=["Visit Temple"])
    location: str = Field(..., min_length=1, examples=["City Temple"])
    description: str = ""
    cultural_context: str = ""
    practical_info: PracticalInfo = Field(default_factory=PracticalInfo)
    tips: str = ""
    weather_alternative: str = ""


class DayPlan(_FrozenModel):
    """The ordered activities of a single day."""

    day: int = Field(..., ge=1)
    slots: tuple[ActivitySlot, ...] = Field(..., min_length=1, alias="timeSlots")

    @field_validator("slots")
    @classmethod
    def validate_slot_order(cls, v: tuple[ActivitySlot, ...]) -> tuple[ActivitySlot, ...]:
        """Ensure slots are sorted by time of day."""
        minutes = [slot.minute_of_day for slot in v]
        if minutes != sorted(minutes):
            msg = "Activity slots must be sorted by time of day"
            raise ValueError(msg)
        return v


class Itinerary(_FrozenModel):
    """A complete day-by-day schedule."""

    days: tuple[DayPlan, ...] = Field(..., min_length=1)

    @model_validator(mode="after")
    def validate_day_numbers(self) -> Self:
        """
        Ensure day numbers run from 1 to the number of days.

        Returns:
            Self: Validated model instance

        Raises:
            ValueError: If days are missing, repeated or out of order
        """
        numbers = [plan.day for plan in self.days]
        if numbers != list(range(1, len(self.days) + 1)):
            msg = f"Day numbers must be 1..{len(self.days)} in order, got {numbers}"
            raise ValueError(msg)
        return self

    @property
    def duration(self) -> int:
        """Number of days in the itinerary."""
        return len(self.days)

    def to_payload(self) -> list[dict[str, Any]]:
        """
        Serialize the itinerary for the rendering layer.

        Returns:
            A list of ``{"day": ..., "timeSlots": [...]}`` records.
        """
        return self.model_dump(by_alias=True)["days"]


class ItineraryRequest(BaseModel):
    """Validated destination and duration for a generation request."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    destination: str = Field(
        ...,
        min_length=1,
        max_length=MAX_DESTINATION_LENGTH,
        description="Display name of the destination",
        examples=["Agra"],
    )
    duration: int = Field(
        ...,
        ge=MIN_TRIP_DURATION,
        le=MAX_TRIP_DURATION,
        description="The duration of the trip in days",
        examples=[3],
    )
