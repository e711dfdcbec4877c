from cultural_planner.schemas.itinerary import (
    ActivitySlot,
    DayPlan,
    DaySegment,
    Itinerary,
    ItineraryRequest,
    PracticalInfo,
    TimeIndicator,
)
from cultural_planner.schemas.upstream import UpstreamReply, extract_generated_text

__all__ = [
    "ActivitySlot",
    "DayPlan",
    "DaySegment",
    "Itinerary",
    "ItineraryRequest",
    "PracticalInfo",
    "TimeIndicator",
    "UpstreamReply",
    "extract_generated_text",
]
