"""Chat widget configuration with environment variable loading.

Pydantic-based settings for the completion endpoint, the canned replies
shown in the transcript, and the storage keys used for persistence.
"""

import os
from urllib.parse import urlparse

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_GREETING = "Hello! How can I help you today?"


class ChatConfig(BaseModel):
    """Configuration for the chat widget.

    Attributes:
        endpoint_url: Address the prompt is POSTed to.
        request_timeout: Seconds before a completion call fails (None = wait forever).
        greeting: Canonical first assistant message, also used for reseeding.
        fallback_reply: Shown when the endpoint answers without a reply text.
        error_reply: Shown when the completion call fails.
        title: Panel header text.
        messages_key: Storage key holding the serialized transcript.
        panel_key: Storage key holding the serialized panel state.
    """

    # Env defaults go through the validators below as well
    model_config = ConfigDict(validate_default=True)

    endpoint_url: str = Field(
        default_factory=lambda: os.getenv(
            "CHAT_ENDPOINT_URL", "http://localhost:8000/generate"
        ),
        description="Text-generation endpoint URL",
    )
    request_timeout: float | None = Field(
        default_factory=lambda: os.getenv("CHAT_REQUEST_TIMEOUT", "60"),
        gt=0,
        description="Completion request timeout in seconds",
    )
    greeting: str = Field(
        default_factory=lambda: os.getenv("CHAT_GREETING", DEFAULT_GREETING),
        description="Greeting that opens every conversation",
    )
    fallback_reply: str = Field(
        default_factory=lambda: os.getenv(
            "CHAT_FALLBACK_REPLY", "Sorry, I couldn't generate a response."
        ),
        description="Reply used when the endpoint returns no text",
    )
    error_reply: str = Field(
        default_factory=lambda: os.getenv(
            "CHAT_ERROR_REPLY", "Sorry, something went wrong. Please try again."
        ),
        description="Reply used when the completion call fails",
    )
    title: str = Field(
        default_factory=lambda: os.getenv("CHAT_TITLE", "AI Assistant"),
        description="Panel title",
    )
    messages_key: str = Field(default="freegpt.messages", min_length=1)
    panel_key: str = Field(default="freegpt.panel", min_length=1)

    @field_validator("endpoint_url")
    @classmethod
    def validate_endpoint_url(cls, v: str) -> str:
        """Validate that the endpoint is an absolute http(s) URL."""
        v = v.strip()
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(
                "CHAT_ENDPOINT_URL must be an absolute http(s) URL"
            )
        return v

    @field_validator("request_timeout", mode="before")
    @classmethod
    def parse_timeout(cls, v: object) -> object:
        """Accept 'none'/'off'/empty to disable the timeout."""
        if isinstance(v, str) and v.strip().lower() in ("", "none", "off"):
            return None
        return v

    @field_validator("greeting", "fallback_reply", "error_reply")
    @classmethod
    def validate_reply_text(cls, v: str) -> str:
        """Reject blank canned replies; they would render as empty bubbles."""
        if not v or not v.strip():
            raise ValueError("reply text must not be blank")
        return v.strip()


def get_chat_config() -> ChatConfig:
    """Create chat configuration from environment.

    Returns:
        Configured ChatConfig instance.

    Raises:
        ValidationError: If a setting is invalid.
    """
    return ChatConfig()
