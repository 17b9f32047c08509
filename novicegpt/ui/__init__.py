"""NiceGUI interface - thin visualization layer for the chat session.

Responsibilities:
    - Transcript display with auto-scroll to the newest message
    - PDF upload control and uploaded file label
    - Auto-growing input with Enter to send, Shift+Enter for a newline

Contains no business logic. Delegates all operations to ChatSession.
"""
