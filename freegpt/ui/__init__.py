"""NiceGUI interface - thin visualization layer for the chat panel.

Responsibilities:
    - Transcript display with a typing indicator while a reply is pending
    - Draft input bound to the conversation controller
    - Panel show/hide and expanded layout toggles
    - Light/dark theme toggle

Contains no conversation logic. Renders whatever freegpt.chat exposes.
"""
