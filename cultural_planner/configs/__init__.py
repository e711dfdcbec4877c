from cultural_planner.configs.settings import (
    DEFAULT_ANCHOR_TIMES,
    LOG_PREVIEW_LENGTH,
    MAX_DESTINATION_LENGTH,
    MAX_TRIP_DURATION,
    MIN_TRIP_DURATION,
    Settings,
    settings,
)

__all__ = [
    "DEFAULT_ANCHOR_TIMES",
    "LOG_PREVIEW_LENGTH",
    "MAX_DESTINATION_LENGTH",
    "MAX_TRIP_DURATION",
    "MIN_TRIP_DURATION",
    "Settings",
    "settings",
]
