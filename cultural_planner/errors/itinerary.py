"""
Itinerary pipeline error classes.

Every error here is absorbed inside the package: the public parse and
generate operations fall back to default content instead of raising.
"""

from cultural_planner.errors.base import BaseAppError


class ItineraryError(BaseAppError):
    """Base exception for itinerary generation and parsing errors."""

    def __init__(self, detail: str = "Itinerary processing failed") -> None:
        super().__init__(detail)


class MissingUpstreamCredentialError(ItineraryError):
    """No API key is configured for the generation service."""

    def __init__(self, detail: str = "Generation service API key is missing") -> None:
        super().__init__(detail)


class UpstreamRequestFailedError(ItineraryError):
    """The generation request raised or returned a non-success status."""

    def __init__(
        self,
        detail: str = "Generation service request failed",
        status_code: int | None = None,
    ) -> None:
        if status_code is not None:
            detail = f"{detail} (status {status_code})"
        super().__init__(detail)
        self.status_code = status_code


class MalformedUpstreamPayloadError(ItineraryError):
    """The generation service answered with an unexpected payload shape."""

    def __init__(self, detail: str = "Invalid generation service payload") -> None:
        super().__init__(detail)


class EmptyOrInvalidResponseTextError(ItineraryError):
    """The generated text is missing, blank, or not a string."""

    def __init__(self, detail: str = "Generated itinerary text is empty or invalid") -> None:
        super().__init__(detail)


class SegmentationUnderflowError(ItineraryError):
    """Fewer day segments were found than days requested."""

    def __init__(self, found: int, requested: int) -> None:
        detail = f"Only found {found} day(s) but {requested} were requested, padding"
        super().__init__(detail)
        self.found = found
        self.requested = requested


class SegmentationOverflowError(ItineraryError):
    """More day segments were found than days requested."""

    def __init__(self, found: int, requested: int) -> None:
        detail = f"Found {found} day(s) but only {requested} were requested, truncating"
        super().__init__(detail)
        self.found = found
        self.requested = requested


class ItineraryConsistencyError(ItineraryError):
    """The assembled itinerary does not match the requested shape."""

    def __init__(self, detail: str = "Assembled itinerary is inconsistent") -> None:
        super().__init__(detail)
