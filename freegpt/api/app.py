"""FastAPI host application.

Serves the NiceGUI chat page (mounted by freegpt.main) and a health
route. The chat itself talks to the external completion endpoint; there
is no chat logic on this server.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from freegpt import __version__
from freegpt.config import get_chat_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Log startup and shutdown of the host application.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    config = get_chat_config()
    logger.info(f"Starting FreeGPT host (completion endpoint: {config.endpoint_url})")
    yield
    logger.info("Shutting down FreeGPT host...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI host application.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="FreeGPT",
        description="Host for the FreeGPT chat panel.",
        version=__version__,
        docs_url="/docs",
        redoc_url=None,
        lifespan=lifespan,
    )

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "freegpt"}

    return application
