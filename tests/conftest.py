"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - gemini_config: Config with a fixed test key and no timeout
    - make_client: Factory for a GeminiClient backed by an httpx.MockTransport
    - blank_pdf_bytes: A one-page PDF with no text, generated with pypdf
    - text_pdf_bytes: A two-page PDF with one line of text per page
    - async_client: HTTPX client for the FastAPI host
"""

import io
from collections.abc import AsyncGenerator, Callable

import httpx
import pytest
from httpx import ASGITransport, AsyncClient
from pypdf import PdfWriter

from novicegpt.api.app import create_app
from novicegpt.llm.config import DEFAULT_BASE_URL, DEFAULT_MODEL, GeminiConfig
from novicegpt.llm.gemini_client import GeminiClient


def gemini_reply(text: str) -> dict:
    """Minimal generateContent body carrying one text candidate."""
    return {
        "candidates": [
            {
                "content": {"parts": [{"text": text}], "role": "model"},
                "finishReason": "STOP",
            }
        ]
    }


@pytest.fixture
def gemini_config() -> GeminiConfig:
    """Return a config that does not depend on the environment."""
    return GeminiConfig(
        api_key="test-key",
        model_name=DEFAULT_MODEL,
        base_url=DEFAULT_BASE_URL,
        timeout=None,
    )


@pytest.fixture
def make_client(gemini_config: GeminiConfig) -> Callable[..., GeminiClient]:
    """Build a GeminiClient whose requests go to the given handler.

    Returns:
        Factory taking an httpx.MockTransport handler.
    """

    def factory(handler) -> GeminiClient:
        return GeminiClient(config=gemini_config, transport=httpx.MockTransport(handler))

    return factory


@pytest.fixture
def blank_pdf_bytes() -> bytes:
    """Return a single blank page PDF."""
    writer = PdfWriter()
    writer.add_blank_page(width=72, height=72)
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


def build_text_pdf(*page_lines: str) -> bytes:
    """Assemble a minimal PDF with one line of Helvetica text per page."""
    page_count = len(page_lines)
    font_id = 3 + 2 * page_count
    kids = " ".join(f"{3 + 2 * i} 0 R" for i in range(page_count))

    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        f"<< /Type /Pages /Kids [{kids}] /Count {page_count} >>".encode(),
    ]
    for i, line in enumerate(page_lines):
        content = f"BT /F1 12 Tf 10 50 Td ({line}) Tj ET".encode()
        objects.append(
            (
                "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 200 100] "
                f"/Resources << /Font << /F1 {font_id} 0 R >> >> /Contents {4 + 2 * i} 0 R >>"
            ).encode()
        )
        objects.append(b"<< /Length %d >>\nstream\n" % len(content) + content + b"\nendstream")
    objects.append(b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>")

    out = io.BytesIO()
    out.write(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(out.tell())
        out.write(b"%d 0 obj\n" % number + body + b"\nendobj\n")
    xref_offset = out.tell()
    out.write(b"xref\n0 %d\n0000000000 65535 f \n" % (len(objects) + 1))
    for offset in offsets:
        out.write(b"%010d 00000 n \n" % offset)
    out.write(b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (len(objects) + 1, xref_offset))
    return out.getvalue()


@pytest.fixture
def text_pdf_bytes() -> bytes:
    """Return a two page PDF with one line of text on each page."""
    return build_text_pdf("Hello World", "Second page")


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for the host application.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=create_app())
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
