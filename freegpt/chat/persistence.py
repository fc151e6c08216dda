"""Best-effort persistence of transcript and panel state.

Both records are stored as JSON text in a per-browser key-value mapping
(NiceGUI's ``app.storage.user`` in the app, a plain dict in tests).
Nothing here ever raises to the caller: unreadable records load as absent
and failed writes are logged and dropped.
"""

import logging
from collections.abc import Callable, MutableMapping, Sequence
from typing import Any, NamedTuple

from pydantic import TypeAdapter, ValidationError

from freegpt.models.schemas import Message, PanelState

logger = logging.getLogger(__name__)

_MESSAGES = TypeAdapter(list[Message])


class PersistedState(NamedTuple):
    """Records found in storage; ``None`` means use the in-memory default."""

    messages: list[Message] | None
    panel: PanelState | None


class PersistenceAdapter:
    """Mirrors widget state to a durable key-value store."""

    def __init__(
        self,
        storage: MutableMapping[str, Any],
        *,
        messages_key: str = "freegpt.messages",
        panel_key: str = "freegpt.panel",
    ) -> None:
        self._storage = storage
        self._messages_key = messages_key
        self._panel_key = panel_key

    def load(self) -> PersistedState:
        """Read both records. Each is independently optional."""
        messages = self._read(self._messages_key, _MESSAGES.validate_json)
        panel = self._read(self._panel_key, PanelState.model_validate_json)
        return PersistedState(messages=messages, panel=panel)

    def save_messages(self, messages: Sequence[Message]) -> None:
        self._write(self._messages_key, lambda: _MESSAGES.dump_json(list(messages)))

    def save_panel(self, panel: PanelState) -> None:
        self._write(self._panel_key, panel.model_dump_json)

    def _read(self, key: str, parse: Callable[[str | bytes], Any]) -> Any:
        try:
            raw = self._storage.get(key)
        except Exception:
            logger.exception(f"Failed to read '{key}' from storage")
            return None
        if raw is None:
            return None
        if not isinstance(raw, (str, bytes)):
            logger.warning(f"Ignoring '{key}' record of unexpected type {type(raw).__name__}")
            return None
        try:
            return parse(raw)
        except ValidationError as e:
            logger.warning(f"Ignoring corrupt '{key}' record: {e.error_count()} error(s)")
            return None

    def _write(self, key: str, encode: Callable[[], str | bytes]) -> None:
        try:
            encoded = encode()
            self._storage[key] = encoded.decode() if isinstance(encoded, bytes) else encoded
        except Exception:
            logger.exception(f"Failed to write '{key}' to storage")
