"""Per-panel scope for UI-side resources.

Anything a panel acquires outside its own element tree (state listeners,
browser event subscriptions) is registered here and released together when
the browser client goes away.
"""

import logging
from collections.abc import Callable
from contextlib import ExitStack

logger = logging.getLogger(__name__)


class PanelResources:
    """Release callbacks for one panel, run in reverse order of registration."""

    def __init__(self) -> None:
        self._stack = ExitStack()
        self._released = False

    @property
    def released(self) -> bool:
        return self._released

    def add(self, release: Callable[[], None]) -> None:
        if self._released:
            raise RuntimeError("panel resources already released")
        self._stack.callback(release)

    def release(self) -> None:
        if self._released:
            return
        self._released = True
        logger.debug("Releasing panel resources")
        self._stack.close()
