"""HTTP client for the Gemini generateContent endpoint.

One POST per call, no retries. Transport, status and decoding failures are
all raised as GeminiError so callers handle a single exception type.
"""

import logging

import httpx
from pydantic import ValidationError

from novicegpt.llm.config import GeminiConfig, get_gemini_config
from novicegpt.models.schemas import GenerateContentRequest, GenerateContentResponse

logger = logging.getLogger(__name__)


class GeminiError(Exception):
    """Raised when a generateContent call fails.

    Attributes:
        status_code: HTTP status of the response, when one was received.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class GeminiClient:
    """Thin async wrapper around the generateContent REST call."""

    def __init__(
        self,
        config: GeminiConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Optional client configuration.
                    Loads from environment if not provided.
            transport: Optional httpx transport, used to stub the endpoint.
        """
        self._config = config or get_gemini_config()
        self._transport = transport

    @property
    def config(self) -> GeminiConfig:
        return self._config

    async def generate_content(self, request: GenerateContentRequest) -> GenerateContentResponse:
        """Send one generateContent request.

        Args:
            request: Ordered conversation turns.

        Returns:
            The decoded response. Missing nested fields decode as None.

        Raises:
            GeminiError: On network error, non-2xx status, or an undecodable body.
        """
        payload = request.model_dump(exclude_none=True)
        logger.debug(f"Sending {len(request.contents)} turn(s) to {self._config.model_name}")

        async with httpx.AsyncClient(timeout=self._config.timeout, transport=self._transport) as client:
            try:
                response = await client.post(
                    self._config.endpoint,
                    params={"key": self._config.api_key},
                    json=payload,
                    headers={"Content-Type": "application/json"},
                )
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise GeminiError(
                    f"HTTP {e.response.status_code}", status_code=e.response.status_code
                ) from e
            except httpx.RequestError as e:
                # Message omits the URL, which carries the key
                raise GeminiError(f"Connection failed: {type(e).__name__}") from e

        try:
            return GenerateContentResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise GeminiError(
                f"Malformed response body: {e.error_count()} error(s)",
                status_code=response.status_code,
            ) from e


# Module-level singleton instance
_gemini_client: GeminiClient | None = None


def get_gemini_client() -> GeminiClient:
    """Get or create the shared Gemini client.

    The client holds no conversation state, so every chat page can use it.

    Returns:
        The GeminiClient instance.
    """
    global _gemini_client
    if _gemini_client is None:
        _gemini_client = GeminiClient()
    return _gemini_client
