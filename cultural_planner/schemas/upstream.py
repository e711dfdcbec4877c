"""
Schemas for the generation service exchange.

The generation service speaks the OpenAI-compatible chat completion format
(OpenRouter). Only the fields the parser relies on are modelled; everything
else in the payload is ignored.
"""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from cultural_planner.errors import (
    EmptyOrInvalidResponseTextError,
    MalformedUpstreamPayloadError,
)


@dataclass(frozen=True, slots=True)
class UpstreamReply:
    """Raw reply of one generation request."""

    status_code: int
    payload: Any = None

    @property
    def ok(self) -> bool:
        """Whether the service reported success."""
        return 200 <= self.status_code < 300


class CompletionMessage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    role: str | None = None
    content: Any = None


class CompletionChoice(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message: CompletionMessage


class ChatCompletion(BaseModel):
    """Subset of a chat completion response."""

    model_config = ConfigDict(extra="ignore")

    choices: list[CompletionChoice] = Field(..., min_length=1)


def extract_generated_text(payload: object) -> str:
    """
    Pull the generated itinerary text out of a completion payload.

    Args:
        payload: Decoded JSON body returned by the generation service.

    Returns:
        The content of the first choice.

    Raises:
        MalformedUpstreamPayloadError: If the payload is not a chat completion.
        EmptyOrInvalidResponseTextError: If the content is blank or not a string.
    """
    try:
        completion = ChatCompletion.model_validate(payload)
    except ValidationError as e:
        msg = f"Invalid generation service payload: {e.error_count()} validation error(s)"
        raise MalformedUpstreamPayloadError(detail=msg) from e

    content = completion.choices[0].message.content
    if not isinstance(content, str) or not content.strip():
        raise EmptyOrInvalidResponseTextError
    return content
