"""Free-text itinerary parser."""

from cultural_planner.services.parser.time_normalizer import (
    format_minute_of_day,
    format_time,
    parse_minute_of_day,
    parse_time,
    resolve_time,
)
from cultural_planner.services.parser.sections import ActivityDetails, parse_sections
from cultural_planner.services.parser.defaults import DefaultContentProvider, default_content
from cultural_planner.services.parser.extractor import extract_activities
from cultural_planner.services.parser.segmenter import segment_response
from cultural_planner.services.parser.assembler import parse_itinerary

__all__ = [
    "ActivityDetails",
    "DefaultContentProvider",
    "default_content",
    "extract_activities",
    "format_minute_of_day",
    "format_time",
    "parse_itinerary",
    "parse_minute_of_day",
    "parse_sections",
    "parse_time",
    "resolve_time",
    "segment_response",
]
