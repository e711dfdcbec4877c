"""
Labelled subsection extraction for one activity's detail text.

A detail blob looks like::

    Description: ...
    Cultural Context: ...
    Practical Info:
    - Duration: 2 hours
    - Cost: ₹500
    Tips: ...
    Weather Alternative: ...

Labels are recognised only at the start of a line, so the same words inside
prose are left alone. Each label's span runs to the first marker of its
ordered candidate list that appears after it, or to the end of the text.
"""

from dataclasses import dataclass, field
from re import IGNORECASE, MULTILINE, Pattern, escape
from re import compile as re_compile

from cultural_planner.schemas.itinerary import PracticalInfo

DESCRIPTION = "Description:"
CULTURAL_CONTEXT = "Cultural Context:"
PRACTICAL_INFO = "Practical Info:"
TIPS = "Tips:"
WEATHER_ALTERNATIVE = "Weather Alternative:"

# label -> plausible next markers, nearest-first in the generator's order
SECTION_BOUNDARIES: dict[str, tuple[str, ...]] = {
    DESCRIPTION: (CULTURAL_CONTEXT, PRACTICAL_INFO, TIPS, WEATHER_ALTERNATIVE),
    CULTURAL_CONTEXT: (PRACTICAL_INFO, TIPS, WEATHER_ALTERNATIVE),
    PRACTICAL_INFO: (TIPS, WEATHER_ALTERNATIVE),
    TIPS: (WEATHER_ALTERNATIVE,),
    WEATHER_ALTERNATIVE: (),
}

PRACTICAL_FIELDS: dict[str, str] = {
    "duration": "Duration:",
    "cost": "Cost:",
    "booking": "Booking:",
    "dress_code": "Dress Code:",
    "photography": "Photography:",
    "transport": "Transport:",
}

BULLET_GLYPHS = "-•*·–"
EMPHASIS_GLYPHS = "*_"

# A label only counts at the start of a line, after any list or emphasis marks
_LABEL_PREFIX = rf"^[ \t#{escape(BULLET_GLYPHS + EMPHASIS_GLYPHS)}]*"
_MARKERS: dict[str, Pattern[str]] = {
    marker: re_compile(_LABEL_PREFIX + escape(marker), IGNORECASE | MULTILINE)
    for marker in (*SECTION_BOUNDARIES, *PRACTICAL_FIELDS.values())
}


@dataclass(frozen=True, slots=True)
class ActivityDetails:
    """Subsections parsed from one activity's detail text."""

    description: str = ""
    cultural_context: str = ""
    practical_info: PracticalInfo = field(default_factory=PracticalInfo)
    tips: str = ""
    weather_alternative: str = ""


def _clean(span: str) -> str:
    return span.strip().strip(EMPHASIS_GLYPHS).strip()


def _collapse_blank_lines(text: str) -> str:
    return "\n".join(line for line in text.splitlines() if line.strip())


def extract_section(text: str, label: str) -> str:
    """
    Extract the span following ``label``.

    Args:
        text: Detail text of one activity.
        label: One of the keys of ``SECTION_BOUNDARIES``.

    Returns:
        The cleaned span, or an empty string when the label is absent.
    """
    start = _MARKERS[label].search(text)
    if start is None:
        return ""

    content_start = start.end()
    content_end = len(text)
    for candidate in SECTION_BOUNDARIES[label]:
        found = _MARKERS[candidate].search(text, content_start)
        if found is not None:
            content_end = found.start()
            break

    return _clean(text[content_start:content_end])


def extract_bullet(text: str, marker: str) -> str:
    """
    Return the rest of the line following ``marker``, bullet glyphs removed.

    Args:
        text: The Practical Info span.
        marker: Field marker such as ``"Cost:"``.

    Returns:
        The field value or an empty string.
    """
    found = _MARKERS[marker].search(text)
    if found is None:
        return ""
    line_end = text.find("\n", found.end())
    value = text[found.end() : line_end if line_end != -1 else len(text)]
    return _clean(value.strip().lstrip(BULLET_GLYPHS))


def parse_practical_info(span: str) -> PracticalInfo:
    """Build the six-field logistics block from a Practical Info span."""
    if not span:
        return PracticalInfo()
    return PracticalInfo(
        **{name: extract_bullet(span, marker) for name, marker in PRACTICAL_FIELDS.items()},
    )


def parse_sections(detail: str) -> ActivityDetails:
    """
    Parse the labelled subsections of an activity.

    Args:
        detail: Text between an activity header and the next header.

    Returns:
        Parsed details; absent labels give empty fields.
    """
    if not detail or not detail.strip():
        return ActivityDetails()

    text = _collapse_blank_lines(detail)
    return ActivityDetails(
        description=extract_section(text, DESCRIPTION),
        cultural_context=extract_section(text, CULTURAL_CONTEXT),
        practical_info=parse_practical_info(extract_section(text, PRACTICAL_INFO)),
        tips=extract_section(text, TIPS),
        weather_alternative=extract_section(text, WEATHER_ALTERNATIVE),
    )
