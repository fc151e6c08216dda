"""Panel visibility and layout flags."""

import logging
from collections.abc import Callable

from freegpt.models.schemas import PanelState

logger = logging.getLogger(__name__)


class PanelController:
    """Owns the two panel toggles and persists every change.

    Independent of the conversation: toggling never touches messages.
    """

    def __init__(
        self,
        state: PanelState | None = None,
        on_change: Callable[[PanelState], None] | None = None,
    ) -> None:
        self._state = state or PanelState()
        self._on_change = on_change

    @property
    def state(self) -> PanelState:
        return self._state

    def toggle_visible(self) -> PanelState:
        return self._update(visible=not self._state.visible)

    def toggle_expanded(self) -> PanelState:
        return self._update(expanded=not self._state.expanded)

    def _update(self, **changes: bool) -> PanelState:
        self._state = self._state.model_copy(update=changes)
        logger.debug(f"Panel state changed: {self._state}")
        if self._on_change is not None:
            self._on_change(self._state)
        return self._state
