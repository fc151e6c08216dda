"""Integration tests for components working together.

No mocks of our own code - the real CompletionClient talks HTTP to a
FastAPI stub of the text-generation endpoint through httpx.ASGITransport.

Coverage:
    - Completion client success, fallback and failure paths
    - Full conversation turns with persistence across remounts
    - Host application routes
"""
