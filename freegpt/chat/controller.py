"""Conversation state machine: submit, await the endpoint, resolve.

The controller is the only writer of the transcript. Each accepted
submission appends one user message, makes one completion call and then
appends exactly one assistant message, whatever the call's outcome.

While a call is outstanding the controller is AWAITING_REPLY and rejects
further submissions; there is no queue. Everything before and after the
single ``await`` runs without interleaving on the event loop, so no lock
is needed.
"""

import logging
from collections.abc import Callable
from enum import Enum

from freegpt.chat.client import CompletionClient, CompletionResult
from freegpt.chat.persistence import PersistenceAdapter
from freegpt.chat.transcript import TranscriptStore
from freegpt.config import ChatConfig, get_chat_config
from freegpt.models.schemas import Message

logger = logging.getLogger(__name__)


class ConversationStatus(str, Enum):
    """States of the conversation controller."""

    IDLE = "idle"
    AWAITING_REPLY = "awaiting_reply"


class ConversationController:
    """Drives one conversation for one panel."""

    def __init__(
        self,
        client: CompletionClient,
        persistence: PersistenceAdapter,
        transcript: TranscriptStore | None = None,
        config: ChatConfig | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            client: Completion client used for every turn.
            persistence: Adapter the transcript is mirrored to.
            transcript: Hydrated transcript; an empty one is reseeded.
            config: Optional chat configuration.
                    Loads from environment if not provided.
        """
        self._client = client
        self._persistence = persistence
        self._config = config or get_chat_config()
        self._transcript = transcript or TranscriptStore()
        self._status = ConversationStatus.IDLE
        self._draft = ""
        self._closed = False
        self._listeners: list[Callable[[], None]] = []
        self.ensure_seeded()

    @property
    def messages(self) -> tuple[Message, ...]:
        return self._transcript.all()

    @property
    def status(self) -> ConversationStatus:
        return self._status

    @property
    def pending(self) -> bool:
        """True while a reply is outstanding; drives the typing indicator."""
        return self._status is ConversationStatus.AWAITING_REPLY

    @property
    def draft(self) -> str:
        return self._draft

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(self, listener: Callable[[], None]) -> Callable[[], None]:
        """Register a callback run after every state change.

        Returns:
            A function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_draft(self, text: str) -> None:
        self._draft = text or ""

    def ensure_seeded(self) -> bool:
        """Restore the greeting if the transcript is empty.

        Returns:
            True if the transcript was reseeded.
        """
        if not self._transcript.is_empty():
            return False
        logger.info("Transcript empty; reseeding with greeting")
        self._transcript.append(Message.from_assistant(self._config.greeting))
        self._changed()
        return True

    def reset(self) -> bool:
        """Start a new conversation containing only the greeting.

        Rejected while a reply is outstanding, so the reply cannot land
        in the fresh transcript.

        Returns:
            True if the conversation was reset.
        """
        if self.pending or self._closed:
            return False
        self._transcript = TranscriptStore()
        self._draft = ""
        return self.ensure_seeded()

    async def submit(self, text: str | None = None) -> bool:
        """Run one turn for ``text`` (the current draft if omitted).

        Returns once the reply has been appended.

        Returns:
            False if the submission was rejected (blank text, a reply
            still outstanding, or the controller closed), True otherwise.
        """
        text = (self._draft if text is None else text).strip()
        if not text or self.pending or self._closed:
            return False

        self._transcript.append(Message.from_user(text))
        self._draft = ""
        self._status = ConversationStatus.AWAITING_REPLY
        self._changed()

        try:
            result = await self._client.complete(text)
        except Exception:
            logger.exception("Completion client raised unexpectedly")
            result = CompletionResult.failure("Unexpected client error")

        self._resolve(result)
        return True

    def close(self) -> None:
        """Detach from the panel. A reply still in flight will be dropped."""
        if self._closed:
            return
        self._closed = True
        self._listeners.clear()
        logger.debug("Conversation controller closed")

    def _resolve(self, result: CompletionResult) -> None:
        if self._closed:
            logger.debug("Discarding reply for a closed conversation")
            return
        if result.ok:
            reply = result.text or self._config.fallback_reply
        else:
            logger.warning(f"Turn failed: {result.detail}")
            reply = self._config.error_reply
        self._transcript.append(Message.from_assistant(reply))
        self._status = ConversationStatus.IDLE
        self._changed()

    def _changed(self) -> None:
        self._persistence.save_messages(self._transcript.all())
        for listener in list(self._listeners):
            listener()
