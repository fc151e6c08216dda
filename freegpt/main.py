"""Main application entry point.

Runs FastAPI with the NiceGUI chat panel mounted on it, or NiceGUI alone.
Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)

TITLE = "FreeGPT"
FAVICON = "🤖"


def _storage_secret() -> str:
    return os.getenv("NICEGUI_STORAGE_SECRET", "freegpt-storage-secret")


def run_integrated() -> None:
    """Run FastAPI with NiceGUI mounted on the same server.

    FastAPI serves /health, NiceGUI serves the chat page at /.
    """
    import uvicorn
    from nicegui import ui

    from freegpt.api.app import create_app
    from freegpt.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    app = create_app()

    # Mount NiceGUI onto FastAPI
    ui.run_with(
        app,
        title=TITLE,
        favicon=FAVICON,
        storage_secret=_storage_secret(),
    )

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8080"))
    logger.info(f"Starting integrated server on http://{host}:{port}")

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


def run_standalone() -> None:
    """Run the NiceGUI chat page on NiceGUI's own server."""
    from nicegui import ui

    from freegpt.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    ui.run(
        title=TITLE,
        favicon=FAVICON,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8080")),
        storage_secret=_storage_secret(),
        reload=False,
        show=False,
    )


def main() -> None:
    """Application entry point.

    Set RUN_MODE=standalone to run NiceGUI without the FastAPI host.
    Default is integrated mode.
    """
    mode = os.getenv("RUN_MODE", "integrated").lower()

    logger.info(f"Starting FreeGPT in {mode} mode")

    if mode == "standalone":
        run_standalone()
    else:
        run_integrated()


if __name__ in {"__main__", "__mp_main__"}:
    main()
