"""HTTP client for the remote text-generation endpoint.

One call, one POST. Every outcome is folded into a CompletionResult so the
controller never has to catch transport errors itself.
"""

import logging
from enum import Enum

import httpx
from pydantic import BaseModel, ValidationError

from freegpt.config import ChatConfig, get_chat_config
from freegpt.models.schemas import CompletionRequest, CompletionResponse

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    """Failure categories surfaced by the completion client."""

    REMOTE_FAILURE = "remote_failure"


class CompletionResult(BaseModel):
    """Outcome of a completion call.

    Exactly one of ``text`` and ``error`` is set.

    Attributes:
        text: Reply text on success (may be the fallback reply).
        error: Failure category on failure.
        detail: Human-readable cause, for logs only.
    """

    text: str | None = None
    error: ErrorKind | None = None
    detail: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, text: str) -> "CompletionResult":
        return cls(text=text)

    @classmethod
    def failure(cls, detail: str) -> "CompletionResult":
        return cls(error=ErrorKind.REMOTE_FAILURE, detail=detail)


class CompletionClient:
    """Sends prompts to the configured endpoint.

    No retries: a failed call is terminal for that turn.
    """

    def __init__(
        self,
        config: ChatConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Optional chat configuration.
                    Loads from environment if not provided.
            transport: Optional HTTPX transport, e.g. an ASGI app in tests.
        """
        self._config = config or get_chat_config()
        self._transport = transport

    async def complete(self, prompt: str) -> CompletionResult:
        """Request a reply for ``prompt``.

        Args:
            prompt: The user's submitted text.

        Returns:
            Success with the reply (or the fallback reply when the endpoint
            sent none), or a REMOTE_FAILURE result.
        """
        payload = CompletionRequest(prompt=prompt)
        async with httpx.AsyncClient(
            timeout=self._config.request_timeout, transport=self._transport
        ) as client:
            try:
                response = await client.post(
                    self._config.endpoint_url,
                    json=payload.model_dump(),
                    headers={"Accept": "application/json"},
                )
                response.raise_for_status()
                body = CompletionResponse.model_validate_json(response.content)
            except httpx.HTTPStatusError as e:
                logger.warning(f"Completion endpoint returned HTTP {e.response.status_code}")
                return CompletionResult.failure(f"HTTP {e.response.status_code}")
            except httpx.RequestError as e:
                logger.warning(f"Completion request failed: {e!r}")
                return CompletionResult.failure(f"Connection failed: {e}")
            except ValidationError as e:
                logger.warning(f"Malformed completion response: {e.error_count()} error(s)")
                return CompletionResult.failure("Malformed response body")

        if body.response is None or not body.response.strip():
            logger.info("Completion response had no text; using fallback reply")
            return CompletionResult.success(self._config.fallback_reply)
        return CompletionResult.success(body.response)
