"""
Turn raw generated text into a validated itinerary.

``parse_itinerary`` is total: any failure inside the pipeline is replaced by
the itinerary-tier fallback, never by a partial result.
"""

from operator import attrgetter

from cultural_planner.configs.settings import MIN_TRIP_DURATION, settings
from cultural_planner.errors import (
    EmptyOrInvalidResponseTextError,
    ItineraryConsistencyError,
    log_absorbed,
)
from cultural_planner.monitoring import get_logger, preview
from cultural_planner.schemas.itinerary import ActivitySlot, DayPlan, DaySegment, Itinerary
from cultural_planner.services.parser.defaults import DefaultContentProvider, default_content
from cultural_planner.services.parser.extractor import extract_activities
from cultural_planner.services.parser.segmenter import segment_response

logger = get_logger(__name__)

_by_minute = attrgetter("minute_of_day")


def normalize_duration(duration: object) -> int:
    """Coerce a requested duration to a whole number of days, at least the minimum."""
    if isinstance(duration, bool):
        return MIN_TRIP_DURATION
    try:
        days = int(duration)  # type: ignore[call-overload]
    except (TypeError, ValueError, OverflowError):
        return MIN_TRIP_DURATION
    return max(MIN_TRIP_DURATION, days)


def normalize_destination(destination: object) -> str:
    """Return a usable destination display name."""
    if isinstance(destination, str) and destination.strip():
        return destination.strip()
    return settings.DEFAULT_DESTINATION


def _segment_slots(
    segment: DaySegment,
    destination: str,
    provider: DefaultContentProvider,
) -> tuple[ActivitySlot, ...]:
    # Padded days carry no generated text to scan
    if segment.placeholder:
        logger.info(
            "Filling padded day with default activities",
            day=segment.day,
            destination=destination,
        )
        return provider.day_slots(segment.day, destination)
    return extract_activities(segment.content, segment.day, destination, provider)


def assemble(
    text: str,
    duration: int,
    destination: str,
    provider: DefaultContentProvider = default_content,
) -> Itinerary:
    """
    Run segmentation and extraction without any failure handling.

    Args:
        text: Generated itinerary text.
        duration: Number of days, at least 1.
        destination: Destination display name.
        provider: Source of fallback content.

    Returns:
        The assembled itinerary.

    Raises:
        EmptyOrInvalidResponseTextError: If the text is blank or not a string.
        ItineraryConsistencyError: If the result does not cover every day.
    """
    if not isinstance(text, str) or not text.strip():
        raise EmptyOrInvalidResponseTextError

    plans = [
        DayPlan(
            day=segment.day,
            slots=tuple(sorted(_segment_slots(segment, destination, provider), key=_by_minute)),
        )
        for segment in segment_response(text, duration, destination, provider)
    ]
    plans.sort(key=attrgetter("day"))

    if [plan.day for plan in plans] != list(range(1, duration + 1)):
        msg = f"Expected days 1..{duration}, assembled {[plan.day for plan in plans]}"
        raise ItineraryConsistencyError(detail=msg)

    return Itinerary(days=tuple(plans))


def parse_itinerary(
    text: object,
    duration: object,
    destination: object,
    provider: DefaultContentProvider = default_content,
) -> Itinerary:
    """
    Parse generated text into an itinerary of exactly ``duration`` days.

    Never raises: blank input, malformed input and internal errors all yield
    the itinerary-tier fallback for the destination.

    Args:
        text: Generated itinerary text (any value is accepted).
        duration: Requested number of days.
        destination: Destination display name.
        provider: Source of fallback content.

    Returns:
        A structurally valid itinerary.
    """
    days = normalize_duration(duration)
    place = normalize_destination(destination)

    try:
        itinerary = assemble(text, days, place, provider)  # type: ignore[arg-type]
    except Exception as e:
        log_absorbed(logger, e, destination=place, duration=days, text=preview(text))
        return provider.itinerary(days, place)

    logger.info(
        "Parsed itinerary",
        destination=place,
        duration=days,
        activities=sum(len(plan.slots) for plan in itinerary.days),
    )
    return itinerary
