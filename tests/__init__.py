"""Test package for the FreeGPT chat widget.

Structure:
    - unit/: State machine, persistence, panel, config and model tests
    - integration/: Real HTTP client against an in-process stub endpoint

Uses pytest with pytest-asyncio (auto mode) and pytest-check for soft
assertions.
"""
