"""Gemini access for the chat session.

Responsibilities:
    - Environment-backed client configuration
    - Request encoding and tolerant response decoding
    - Collapsing transport failures into one error type

Maintains clean separation from the UI layer.
"""

from novicegpt.llm.config import GeminiConfig, get_gemini_config
from novicegpt.llm.gemini_client import GeminiClient, GeminiError, get_gemini_client

__all__ = [
    "GeminiClient",
    "GeminiConfig",
    "GeminiError",
    "get_gemini_client",
    "get_gemini_config",
]
