"""Pydantic models for chat state and the Gemini wire format.

Provides type safety and tolerant decoding of the remote response.

Models:
    - Message: Individual entry in the chat transcript
    - GenerateContentRequest: Outgoing Gemini request body
    - GenerateContentResponse: Incoming Gemini response body
    - IngestionResult: Outcome of a document upload
"""

from novicegpt.models.schemas import (
    Candidate,
    Content,
    GenerateContentRequest,
    GenerateContentResponse,
    IngestionResult,
    Message,
    MessageRole,
    Part,
)

__all__ = [
    "Candidate",
    "Content",
    "GenerateContentRequest",
    "GenerateContentResponse",
    "IngestionResult",
    "Message",
    "MessageRole",
    "Part",
]
