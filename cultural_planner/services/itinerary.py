# cultural_planner/services/itinerary.py

from pydantic import SecretStr

from cultural_planner.clients.protocols import CompletionClientProtocol
from cultural_planner.configs.settings import settings
from cultural_planner.decorators import with_retry
from cultural_planner.errors import (
    MalformedUpstreamPayloadError,
    MissingUpstreamCredentialError,
    UpstreamRequestFailedError,
    log_absorbed,
)
from cultural_planner.monitoring import get_logger
from cultural_planner.schemas.itinerary import Itinerary, ItineraryRequest
from cultural_planner.schemas.upstream import UpstreamReply, extract_generated_text
from cultural_planner.services.parser.assembler import parse_itinerary
from cultural_planner.services.parser.defaults import DefaultContentProvider, default_content

logger = get_logger(__name__)


class ItineraryService:
    """
    Fetch a generated itinerary and parse it, degrading to fallback content.

    The caller builds the system instruction and prompt; this service only
    runs the exchange through the injected client and interprets the reply.
    Every failure (missing key, transport error, non-success status, bad
    payload, blank text) yields the fallback itinerary for the destination.
    """

    def __init__(
        self,
        client: CompletionClientProtocol,
        api_key: SecretStr | str | None = None,
        provider: DefaultContentProvider = default_content,
        max_retries: int = settings.UPSTREAM_MAX_RETRIES,
        retry_delay: float = settings.UPSTREAM_RETRY_DELAY,
        max_delay: float = settings.UPSTREAM_MAX_DELAY,
    ) -> None:
        """
        Initialize the service.

        Args:
            client: Generation service client.
            api_key: Credential the client is configured with; defaults to
                ``settings.OPENROUTER_API_KEY``.
            provider: Source of fallback content.
            max_retries: Extra attempts after a failed request.
            retry_delay: Initial backoff delay in seconds.
            max_delay: Maximum backoff delay in seconds.
        """
        self._client = client
        self._api_key = api_key if api_key is not None else settings.OPENROUTER_API_KEY
        self._provider = provider
        self._request = with_retry(
            max_attempts=max_retries + 1,
            base_delay=retry_delay,
            max_delay=max_delay,
        )(self._request_once)

    def _has_credential(self) -> bool:
        key = self._api_key
        if isinstance(key, SecretStr):
            key = key.get_secret_value()
        return bool(key and key.strip())

    async def _request_once(self, system_instruction: str, prompt: str) -> UpstreamReply:
        try:
            reply = await self._client.complete(system_instruction, prompt)
        except Exception as e:
            detail = f"Generation service request failed: {e}"
            raise UpstreamRequestFailedError(detail=detail) from e

        if not isinstance(reply, UpstreamReply):
            msg = f"Unexpected reply type: {type(reply).__name__}"
            raise MalformedUpstreamPayloadError(detail=msg)
        if not reply.ok:
            raise UpstreamRequestFailedError(status_code=reply.status_code)
        return reply

    async def fetch_text(self, system_instruction: str, prompt: str) -> str:
        """
        Run the generation exchange and return the generated text.

        Args:
            system_instruction: System message for the model.
            prompt: User prompt for the model.

        Returns:
            The generated itinerary text.

        Raises:
            MissingUpstreamCredentialError: If no API key is configured.
            UpstreamRequestFailedError: If every attempt failed.
            MalformedUpstreamPayloadError: If the reply is not a chat completion.
            EmptyOrInvalidResponseTextError: If the generated text is unusable.
        """
        if not self._has_credential():
            raise MissingUpstreamCredentialError

        reply = await self._request(system_instruction, prompt)
        logger.info("Generation service reply received", status=reply.status_code)
        return extract_generated_text(reply.payload)

    async def generate(
        self,
        request: ItineraryRequest,
        system_instruction: str,
        prompt: str,
    ) -> Itinerary:
        """
        Generate an itinerary for the request.

        Args:
            request: Destination and duration.
            system_instruction: System message for the model.
            prompt: User prompt for the model.

        Returns:
            An itinerary of exactly ``request.duration`` days.
        """
        logger.info(
            "Generating itinerary",
            destination=request.destination,
            duration=request.duration,
        )
        try:
            text = await self.fetch_text(system_instruction, prompt)
        except Exception as e:
            log_absorbed(logger, e, destination=request.destination, duration=request.duration)
            return self._provider.itinerary(request.duration, request.destination)

        return parse_itinerary(text, request.duration, request.destination, self._provider)
