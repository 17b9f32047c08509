"""Unit tests for individual components in isolation.

Coverage:
    - models/: Message and Gemini wire schemas
    - parsing/: PDF validation and page text extraction
    - llm/: Configuration and HTTP client
    - session/: Transcript, ingestion and dispatch

Uses mocks for external services. Leverages pytest-check for multiple
assertions per test.
"""
