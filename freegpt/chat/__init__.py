"""Client-side conversation state machine for the chat panel.

Responsibilities:
    - Ordered transcript of user and assistant messages
    - One completion call per turn, with failures folded into the transcript
    - Busy gating: at most one outstanding request per panel
    - Best-effort persistence of transcript and panel flags

Holds no UI code; the NiceGUI page renders whatever ChatWidget exposes.
"""

from freegpt.chat.client import CompletionClient, CompletionResult, ErrorKind
from freegpt.chat.controller import ConversationController, ConversationStatus
from freegpt.chat.panel import PanelController
from freegpt.chat.persistence import PersistenceAdapter, PersistedState
from freegpt.chat.transcript import TranscriptStore
from freegpt.chat.widget import ChatWidget

__all__ = [
    "ChatWidget",
    "CompletionClient",
    "CompletionResult",
    "ConversationController",
    "ConversationStatus",
    "ErrorKind",
    "PanelController",
    "PersistedState",
    "PersistenceAdapter",
    "TranscriptStore",
]
