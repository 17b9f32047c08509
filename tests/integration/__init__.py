"""Integration tests for components working together.

Coverage:
    - Upload of a real (generated) PDF followed by a chat dispatch
    - FastAPI host endpoints through ASGITransport

The Gemini endpoint is replaced by an httpx.MockTransport.
"""
