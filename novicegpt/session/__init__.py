"""Chat session state for one conversation.

Responsibilities:
    - Ordered transcript with a single pending placeholder
    - PDF upload ingestion into hidden request context
    - Request dispatch and reply resolution

Contains no UI code. The presentation layer subscribes to changes.
"""

from novicegpt.session.chat_session import ChatSession
from novicegpt.session.transcript import Transcript

__all__ = ["ChatSession", "Transcript"]
