"""FreeGPT - a single-panel chat widget for a remote text-generation endpoint.

Combines NiceGUI for the browser panel, HTTPX for the completion call,
Pydantic for messages and settings, and FastAPI for hosting.

Components:
    - chat: conversation state machine, completion client, persistence
    - models: message, panel and wire schemas
    - ui: NiceGUI page rendering the panel
    - api: hosting application
"""

__version__ = "0.1.0"
