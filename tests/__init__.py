"""Test package for NoviceGPT.

Structure:
    - unit/: Individual function and class tests
    - integration/: Session, client and host working together

The Gemini endpoint is always stubbed with httpx.MockTransport; no test
needs network access or an API key.
Leverages pytest with pytest-check for soft assertions.
"""
