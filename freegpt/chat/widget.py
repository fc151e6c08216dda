"""Chat widget facade: the state one panel exposes to the presentation layer."""

import logging
from collections.abc import Callable, MutableMapping
from typing import Any

from freegpt.chat.client import CompletionClient
from freegpt.chat.controller import ConversationController
from freegpt.chat.panel import PanelController
from freegpt.chat.persistence import PersistenceAdapter
from freegpt.chat.transcript import TranscriptStore
from freegpt.config import ChatConfig, get_chat_config
from freegpt.models.schemas import Message, PanelState

logger = logging.getLogger(__name__)


class ChatWidget:
    """Conversation plus panel state for one mounted panel.

    Build it with ``ChatWidget.mount``, which hydrates both states from
    storage before anything is rendered.
    """

    def __init__(
        self,
        conversation: ConversationController,
        panel: PanelController,
    ) -> None:
        self.conversation = conversation
        self.panel = panel

    @classmethod
    def mount(
        cls,
        storage: MutableMapping[str, Any],
        config: ChatConfig | None = None,
        client: CompletionClient | None = None,
    ) -> "ChatWidget":
        """Create a widget backed by ``storage``.

        Args:
            storage: Per-browser key-value store.
            config: Optional chat configuration.
                    Loads from environment if not provided.
            client: Optional completion client (built from config if omitted).

        Returns:
            A widget whose transcript and panel state reflect what was
            persisted, falling back to defaults for anything missing.
        """
        config = config or get_chat_config()
        persistence = PersistenceAdapter(
            storage,
            messages_key=config.messages_key,
            panel_key=config.panel_key,
        )
        persisted = persistence.load()
        logger.info(
            "Mounting chat widget "
            f"(restored messages: {persisted.messages is not None}, "
            f"restored panel: {persisted.panel is not None})"
        )

        conversation = ConversationController(
            client=client or CompletionClient(config),
            persistence=persistence,
            transcript=TranscriptStore(persisted.messages or ()),
            config=config,
        )
        panel = PanelController(persisted.panel, on_change=persistence.save_panel)
        return cls(conversation, panel)

    @property
    def messages(self) -> tuple[Message, ...]:
        return self.conversation.messages

    @property
    def pending(self) -> bool:
        return self.conversation.pending

    @property
    def draft(self) -> str:
        return self.conversation.draft

    @property
    def panel_state(self) -> PanelState:
        return self.panel.state

    async def submit(self, text: str | None = None) -> bool:
        return await self.conversation.submit(text)

    def set_draft(self, text: str) -> None:
        self.conversation.set_draft(text)

    def toggle_visible(self) -> PanelState:
        return self.panel.toggle_visible()

    def toggle_expanded(self) -> PanelState:
        return self.panel.toggle_expanded()

    def reset(self) -> bool:
        return self.conversation.reset()

    def subscribe(self, listener: Callable[[], None]) -> Callable[[], None]:
        return self.conversation.subscribe(listener)

    def close(self) -> None:
        self.conversation.close()
