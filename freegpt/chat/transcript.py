"""Ordered, append-only store of transcript messages."""

from collections.abc import Iterable, Iterator

from freegpt.models.schemas import Message


class TranscriptStore:
    """Holds the conversation in display order.

    Messages can only be appended. The controller is the single writer;
    an emptied transcript is replaced as a whole, never edited in place.
    """

    def __init__(self, messages: Iterable[Message] = ()) -> None:
        self._messages: list[Message] = list(messages)

    def append(self, message: Message) -> None:
        self._messages.append(message)

    def all(self) -> tuple[Message, ...]:
        """Return a snapshot of every message, oldest first."""
        return tuple(self._messages)

    def is_empty(self) -> bool:
        return not self._messages

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(self.all())
