"""NoviceGPT - single-page chat over the Gemini API with optional PDF context.

Combines NiceGUI for the chat interface, httpx for the Gemini REST call,
pypdf for document text extraction, and Pydantic for data validation.

Components:
    - session: transcript state, document ingestion and request dispatch
    - llm: Gemini configuration and HTTP client
    - parsing: PDF text extraction
    - ui: Web interface for chat interactions
    - api: FastAPI host application
    - models: Message and wire schemas
"""

__version__ = "0.1.0"
