"""Unit tests for individual components in isolation.

Coverage:
    - models/: Pydantic validation and serialization
    - chat/: Transcript, controller, panel, persistence and widget
    - config: Settings validation and environment loading

Uses in-memory fakes for the completion client and a dict for storage.
Leverages pytest-check for multiple assertions per test.
"""
