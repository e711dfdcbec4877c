from cultural_planner.data.fallback_bank import (
    CURATED_BANKS,
    GENERIC_BANK,
    PLACEHOLDER_DAY_TEXT,
    SLOT_TEMPLATES,
    ActivityTemplate,
)

__all__ = [
    "CURATED_BANKS",
    "GENERIC_BANK",
    "PLACEHOLDER_DAY_TEXT",
    "SLOT_TEMPLATES",
    "ActivityTemplate",
]
