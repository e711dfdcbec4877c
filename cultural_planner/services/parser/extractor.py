"""
Time-anchored activity extraction for one day's text.

The day text is tokenized line by line and fed through a small finite
grammar::

    AWAITING_MARKER --HEADER--> IN_ACTIVITY_HEADER --TEXT--> IN_DETAIL_BLOB
          ^                          |    ^                      |
          +------ BROKEN_HEADER -----+    +-------- HEADER ------+

A header line carries a bracketed time followed by ``title | location``;
every text line after it, up to the next bracketed time, is its detail blob.
A bracketed time that cannot be parsed is kept as written and sorts to the
end of the day.
Scanning is a single pass over the lines with no backtracking.
"""

from dataclasses import dataclass, field
from enum import Enum
from re import IGNORECASE
from re import compile as re_compile

from cultural_planner.monitoring import get_logger
from cultural_planner.schemas.itinerary import ActivitySlot, TimeIndicator
from cultural_planner.services.parser.defaults import DefaultContentProvider, default_content
from cultural_planner.services.parser.sections import parse_sections
from cultural_planner.services.parser.time_normalizer import resolve_time

logger = get_logger(__name__)

# "[09:00 AM]", "[9 AM]" or a range "[09:00 AM - 11:00 AM]"; the start time anchors the slot
_CLOCK = r"[\d:]+(?:\s*[ap]\.?\s*m\.?)?"
BRACKETED_TIME = re_compile(
    rf"\[\s*({_CLOCK})(?:\s*(?:-|–|to)\s*{_CLOCK})?\s*\]",
    IGNORECASE,
)
SEPARATOR = "|"
HEADER_TRIM = " \t*_-–:"


class TokenKind(Enum):
    HEADER = "header"
    BROKEN_HEADER = "broken_header"
    TEXT = "text"


class ScanState(Enum):
    AWAITING_MARKER = "awaiting_marker"
    IN_ACTIVITY_HEADER = "in_activity_header"
    IN_DETAIL_BLOB = "in_detail_blob"


@dataclass(frozen=True, slots=True)
class LineToken:
    """One classified line of day text."""

    kind: TokenKind
    text: str
    time: TimeIndicator | None = None
    title: str = ""
    location: str = ""


@dataclass(slots=True)
class _OpenActivity:
    time: TimeIndicator
    title: str
    location: str
    detail_lines: list[str] = field(default_factory=list)


def tokenize_line(line: str) -> LineToken:
    """
    Classify a single line.

    Args:
        line: One line of day text.

    Returns:
        A ``HEADER`` token with time, title and location, a ``BROKEN_HEADER``
        token for a bracketed time without a usable ``title | location``, or
        a ``TEXT`` token.
    """
    match = BRACKETED_TIME.search(line)
    if match is None:
        return LineToken(TokenKind.TEXT, line)

    indicator = resolve_time(match.group(1).strip())
    rest = line[match.end() :]
    title, separator, location = rest.partition(SEPARATOR)
    title = title.strip(HEADER_TRIM)
    location = location.strip(HEADER_TRIM)
    if not separator or not title or not location:
        return LineToken(TokenKind.BROKEN_HEADER, line, time=indicator)

    return LineToken(
        TokenKind.HEADER,
        line,
        time=indicator,
        title=title,
        location=location,
    )


def _close(activity: _OpenActivity) -> ActivitySlot:
    details = parse_sections("\n".join(activity.detail_lines))
    return ActivitySlot(
        time=activity.time.display,
        minute_of_day=activity.time.minute_of_day,
        title=activity.title,
        location=activity.location,
        description=details.description,
        cultural_context=details.cultural_context,
        practical_info=details.practical_info,
        tips=details.tips,
        weather_alternative=details.weather_alternative,
    )


def scan_activities(content: str) -> list[ActivitySlot]:
    """
    Run the extraction grammar over a day's text.

    Args:
        content: Text of a single day.

    Returns:
        Activities in the order they appear; possibly empty.
    """
    slots: list[ActivitySlot] = []
    state = ScanState.AWAITING_MARKER
    current: _OpenActivity | None = None

    for line in content.splitlines():
        token = tokenize_line(line)

        if token.kind is TokenKind.TEXT:
            if state is not ScanState.AWAITING_MARKER and current is not None:
                current.detail_lines.append(token.text)
                state = ScanState.IN_DETAIL_BLOB
            continue

        # Any bracketed time ends the open activity
        if state is not ScanState.AWAITING_MARKER and current is not None:
            slots.append(_close(current))

        if token.kind is TokenKind.HEADER and token.time is not None:
            current = _OpenActivity(token.time, token.title, token.location)
            state = ScanState.IN_ACTIVITY_HEADER
        else:
            logger.debug("Skipping malformed activity header", line=token.text)
            current = None
            state = ScanState.AWAITING_MARKER

    if state is not ScanState.AWAITING_MARKER and current is not None:
        slots.append(_close(current))

    return slots


def extract_activities(
    content: str,
    day: int,
    destination: str,
    provider: DefaultContentProvider = default_content,
) -> tuple[ActivitySlot, ...]:
    """
    Extract the activities of one day, falling back to default content.

    Args:
        content: Text of a single day.
        day: Day number, used to vary fallback content.
        destination: Display name used for fallback content.
        provider: Source of default activities.

    Returns:
        Activities in extraction order, never empty.
    """
    slots = scan_activities(content)
    if slots:
        return tuple(slots)

    logger.warning(
        "No valid time slots found, creating default activities",
        day=day,
        destination=destination,
    )
    return provider.day_slots(day, destination)
