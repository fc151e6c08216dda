"""Pydantic models for transcript state and the completion wire format.

Provides validation and a single JSON encoding shared by the network
layer and browser storage.

Models:
    - Message: Individual transcript entry
    - MessageOrigin: Author of a message (user or assistant)
    - PanelState: Panel visibility and layout flags
    - CompletionRequest: Outgoing prompt payload
    - CompletionResponse: Incoming generated-text payload
"""

from freegpt.models.schemas import (
    CompletionRequest,
    CompletionResponse,
    Message,
    MessageOrigin,
    PanelState,
)

__all__ = [
    "CompletionRequest",
    "CompletionResponse",
    "Message",
    "MessageOrigin",
    "PanelState",
]
