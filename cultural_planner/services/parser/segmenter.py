"""
Split a raw generated itinerary into per-day segments.

Primary strategy: explicit ``Day <n>:`` markers. Fallback strategy: blank-line
separated chunks distributed evenly across the requested days. Either way the
result is padded or truncated to exactly the requested number of days.
"""

from math import ceil
from re import IGNORECASE
from re import compile as re_compile

from cultural_planner.errors import (
    SegmentationOverflowError,
    SegmentationUnderflowError,
    log_absorbed,
)
from cultural_planner.monitoring import get_logger
from cultural_planner.schemas.itinerary import DaySegment
from cultural_planner.services.parser.defaults import DefaultContentProvider, default_content

logger = get_logger(__name__)

DAY_MARKER = re_compile(r"\bday\s+(\d{1,4})\s*:", IGNORECASE)


def split_by_day_markers(text: str, duration: int) -> list[DaySegment]:
    """
    Cut the text at each ``Day <n>:`` marker.

    A segment runs from the end of its marker to the start of the next marker.
    Days outside ``1..duration`` and empty segments are dropped; repeated
    markers for the same day are merged in textual order.

    Args:
        text: Full generated text.
        duration: Number of requested days.

    Returns:
        Segments in order of first appearance.
    """
    markers = list(DAY_MARKER.finditer(text))
    contents: dict[int, list[str]] = {}

    for current, following in zip(markers, [*markers[1:], None], strict=True):
        day = int(current.group(1))
        if not 1 <= day <= duration:
            continue
        end = following.start() if following is not None else len(text)
        content = text[current.end() : end].strip()
        if content:
            contents.setdefault(day, []).append(content)

    return [DaySegment(day=day, content="\n\n".join(parts)) for day, parts in contents.items()]


def split_into_chunks(text: str) -> list[str]:
    """Split text into non-empty chunks separated by blank lines."""
    chunks: list[str] = []
    block: list[str] = []
    for line in text.splitlines():
        if line.strip():
            block.append(line)
        elif block:
            chunks.append("\n".join(block))
            block = []
    if block:
        chunks.append("\n".join(block))
    return chunks


def distribute_chunks(chunks: list[str], duration: int) -> list[DaySegment]:
    """
    Give ``ceil(len(chunks) / duration)`` chunks to each day, in order.

    Args:
        chunks: Blank-line separated blocks of text.
        duration: Number of requested days.

    Returns:
        Segments for the leading days that received at least one chunk.
    """
    per_day = max(1, ceil(len(chunks) / duration))
    segments = []
    for index in range(duration):
        start = index * per_day
        if start >= len(chunks):
            break
        segments.append(
            DaySegment(day=index + 1, content="\n\n".join(chunks[start : start + per_day])),
        )
    return segments


def segment_response(
    text: str,
    duration: int,
    destination: str,
    provider: DefaultContentProvider = default_content,
) -> tuple[DaySegment, ...]:
    """
    Produce exactly one segment per requested day.

    Args:
        text: Full generated text.
        duration: Number of requested days, at least 1.
        destination: Display name used for placeholder days.
        provider: Source of placeholder text.

    Returns:
        Segments for days ``1..duration`` in ascending order.
    """
    segments = split_by_day_markers(text, duration)

    if not segments:
        chunks = split_into_chunks(text)
        logger.warning(
            "No day markers found, attempting to split content evenly",
            chunks=len(chunks),
            duration=duration,
        )
        segments = distribute_chunks(chunks, duration)

    if len(segments) < duration:
        log_absorbed(
            logger,
            SegmentationUnderflowError(found=len(segments), requested=duration),
            destination=destination,
        )
        covered = {segment.day for segment in segments}
        segments.extend(
            DaySegment(day=day, content=provider.placeholder_text(destination), placeholder=True)
            for day in range(1, duration + 1)
            if day not in covered
        )

    segments.sort(key=lambda segment: segment.day)

    if len(segments) > duration:
        log_absorbed(
            logger,
            SegmentationOverflowError(found=len(segments), requested=duration),
            destination=destination,
        )
        segments = segments[:duration]

    return tuple(segments)
