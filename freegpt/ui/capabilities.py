"""Lookup of optional browser capabilities exposed by NiceGUI."""

import logging
from collections.abc import Callable
from typing import Any

from nicegui import ui

logger = logging.getLogger(__name__)


def fullscreen_element() -> Callable[..., Any] | None:
    """Return NiceGUI's fullscreen element factory, or None if unavailable.

    Callers must handle None; the panel then expands within the page only.
    """
    factory = getattr(ui, "fullscreen", None)
    if factory is None:
        logger.info("Installed NiceGUI has no fullscreen element")
    return factory
