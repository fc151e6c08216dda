import uuid
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class MessageOrigin(str, Enum):
    """Who authored a transcript message."""

    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """A single transcript entry.

    Attributes:
        id: Random identifier, stable for list diffing.
        content: The message text.
        origin: Author of the message (user or assistant).
        created_at: Local time the message was created.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    content: str
    origin: MessageOrigin
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_user(self) -> bool:
        return self.origin is MessageOrigin.USER

    @classmethod
    def from_user(cls, content: str) -> "Message":
        return cls(content=content, origin=MessageOrigin.USER)

    @classmethod
    def from_assistant(cls, content: str) -> "Message":
        return cls(content=content, origin=MessageOrigin.ASSISTANT)


class PanelState(BaseModel):
    """Visibility and layout flags of the chat panel.

    Attributes:
        visible: Whether the panel is shown (otherwise only the launcher is).
        expanded: Whether the panel uses the expanded layout.
    """

    model_config = ConfigDict(frozen=True)

    visible: bool = True
    expanded: bool = False


class CompletionRequest(BaseModel):
    """Request payload sent to the text-generation endpoint.

    Attributes:
        prompt: The submitted user text.
    """

    prompt: str


class CompletionResponse(BaseModel):
    """Reply payload from the text-generation endpoint.

    Only ``response`` is read; any other fields the endpoint sends are ignored.

    Attributes:
        response: The generated text, if the endpoint produced one.
    """

    model_config = ConfigDict(extra="ignore")

    response: str | None = None
