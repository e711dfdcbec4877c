"""Protocol definitions for generation service clients."""

from collections.abc import Awaitable
from typing import Protocol, runtime_checkable

from cultural_planner.schemas.upstream import UpstreamReply


@runtime_checkable
class CompletionClientProtocol(Protocol):
    """
    Protocol for text generation clients.

    Implementations own the HTTP exchange (endpoint, headers, model choice)
    and hand back the raw status and decoded JSON body. They may raise on
    transport errors; the itinerary service treats that like a failed reply.
    """

    def complete(self, system_instruction: str, prompt: str) -> Awaitable[UpstreamReply]:
        """Send one chat completion request."""
        ...
