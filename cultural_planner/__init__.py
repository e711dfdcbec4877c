"""Parse free-form generated travel itineraries into ordered day plans."""

from cultural_planner.schemas import ActivitySlot, DayPlan, Itinerary, PracticalInfo
from cultural_planner.services import ItineraryService, parse_itinerary

__all__ = [
    "ActivitySlot",
    "DayPlan",
    "Itinerary",
    "ItineraryService",
    "PracticalInfo",
    "parse_itinerary",
]
