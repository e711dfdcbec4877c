from cultural_planner.services.itinerary import ItineraryService
from cultural_planner.services.parser import DefaultContentProvider, default_content, parse_itinerary

__all__ = [
    "DefaultContentProvider",
    "ItineraryService",
    "default_content",
    "parse_itinerary",
]
