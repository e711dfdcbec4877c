"""
Time-of-day parsing and canonical formatting.

Accepted tokens are ``H:MM``, ``HH:MM``, either of those followed by an AM/PM
period (case-insensitive, optional dots and space), and a bare hour with a
period such as ``9 AM``. Canonical output is always ``"HH:MM AM"`` /
``"HH:MM PM"``.
"""

from re import IGNORECASE
from re import compile as re_compile

from cultural_planner.schemas.itinerary import MINUTES_PER_DAY, TimeIndicator

# Digit and colon guards keep "123:45", "12:345" and "7:5" from matching a shorter token
TIME_TOKEN = re_compile(
    r"(?<![\d:])(\d{1,2})(?::(\d{2}))?(?![\d:])(?:\s*([ap])\.?\s*m\.?(?![a-z]))?",
    IGNORECASE,
)

# Unparseable times sort after every real time of day
UNPARSED_MINUTE = MINUTES_PER_DAY - 1

_NOON = 12 * 60


def parse_time(token: str) -> TimeIndicator | None:
    """
    Parse the first time of day found in a token.

    Without a period, hours of 12 and above are read as 24-hour afternoon
    values and smaller hours as morning values, so a bare ``"12:00"`` is noon.

    Args:
        token: Text such as ``"9:00"``, ``"09:00 AM"``, ``"9 AM"`` or ``"14:30"``.

    Returns:
        The parsed time, or None when no valid time is present.
    """
    if not isinstance(token, str):
        return None
    # A bare hour is only a time when it carries a period
    match = next(
        (m for m in TIME_TOKEN.finditer(token) if m.group(2) is not None or m.group(3)),
        None,
    )
    if match is None:
        return None

    period = match.group(3)
    hours = int(match.group(1))
    minutes = int(match.group(2) or 0)
    if minutes > 59:
        return None

    if period:
        if not 1 <= hours <= 12:
            return None
        total = (hours % 12) * 60 + minutes
        if period.lower() == "p":
            total += _NOON
    else:
        if hours > 23:
            return None
        total = hours * 60 + minutes

    return TimeIndicator(minute_of_day=total, display=format_minute_of_day(total))


def resolve_time(token: str) -> TimeIndicator:
    """
    Parse a token, keeping unparseable ones as they are.

    Args:
        token: Raw time text taken from an activity header.

    Returns:
        The parsed time, or the unchanged token placed at the end of the day.
    """
    parsed = parse_time(token)
    if parsed is not None:
        return parsed
    return TimeIndicator(minute_of_day=UNPARSED_MINUTE, display=token)


def parse_minute_of_day(token: str) -> int | None:
    """Return the minute-of-day projection of a token, or None if unparseable."""
    parsed = parse_time(token)
    return parsed.minute_of_day if parsed else None


def format_minute_of_day(minute: int) -> str:
    """
    Render a minute-of-day value in canonical form.

    Args:
        minute: Value in ``0..1439``.

    Returns:
        Zero-padded ``"HH:MM AM/PM"`` string.

    Raises:
        ValueError: If the value is outside a single day.
    """
    if not 0 <= minute < MINUTES_PER_DAY:
        msg = f"Minute of day must be within 0..{MINUTES_PER_DAY - 1}, got {minute}"
        raise ValueError(msg)
    hours, minutes = divmod(minute, 60)
    period = "PM" if hours >= 12 else "AM"
    display_hour = hours % 12 or 12
    return f"{display_hour:02d}:{minutes:02d} {period}"


def format_time(token: str) -> str:
    """
    Normalize a time token to ``"HH:MM AM/PM"``.

    Unparseable tokens are returned unchanged.
    """
    parsed = parse_time(token)
    return parsed.display if parsed else token
