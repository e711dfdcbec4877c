from cultural_planner.errors.base import BaseAppError, log_absorbed
from cultural_planner.errors.itinerary import (
    EmptyOrInvalidResponseTextError,
    ItineraryConsistencyError,
    ItineraryError,
    MalformedUpstreamPayloadError,
    MissingUpstreamCredentialError,
    SegmentationOverflowError,
    SegmentationUnderflowError,
    UpstreamRequestFailedError,
)

__all__ = [
    "BaseAppError",
    "EmptyOrInvalidResponseTextError",
    "ItineraryConsistencyError",
    "ItineraryError",
    "MalformedUpstreamPayloadError",
    "MissingUpstreamCredentialError",
    "SegmentationOverflowError",
    "SegmentationUnderflowError",
    "UpstreamRequestFailedError",
    "log_absorbed",
]
