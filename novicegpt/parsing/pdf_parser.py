"""PDF text extraction using pypdf.

Reads a PDF page by page, collecting the text fragments pypdf reports for
each page, and flattens them into the plain-text context sent with chat
requests.
"""

import io
import logging

from pypdf import PageObject, PdfReader
from pypdf.errors import PdfReadError

logger = logging.getLogger(__name__)

# Constants
PDF_MIME_TYPE = "application/pdf"
MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
PDF_MAGIC_BYTES = b"%PDF"


class PDFParseError(Exception):
    """Raised when PDF parsing fails."""

    pass


def _validate_pdf_bytes(file_content: bytes) -> None:
    """Validate PDF file content before parsing.

    Args:
        file_content: Raw bytes of the PDF file.

    Raises:
        PDFParseError: If validation fails.
    """
    if not file_content:
        raise PDFParseError("Empty file provided")

    if len(file_content) > MAX_FILE_SIZE:
        size_mb = len(file_content) / (1024 * 1024)
        raise PDFParseError(f"File size ({size_mb:.1f}MB) exceeds maximum allowed (10MB)")

    if not file_content.lstrip()[:10].startswith(PDF_MAGIC_BYTES):
        raise PDFParseError("Invalid PDF: file does not start with PDF header")


def _page_fragments(page: PageObject) -> list[str]:
    fragments: list[str] = []

    def visit(text: str, cm: list, tm: list, font_dict: dict | None, font_size: float) -> None:
        fragment = text.strip()
        if fragment:
            fragments.append(fragment)

    page.extract_text(visitor_text=visit)
    return fragments


def extract_page_texts(file_content: bytes) -> list[str]:
    """Extract the text of every page, in page order.

    Within a page, text fragments are joined with a single space. A page
    whose extraction fails is logged and yields an empty string so page
    positions are preserved.

    Args:
        file_content: Raw bytes of the PDF file.

    Returns:
        One string per page, page 1 first.

    Raises:
        PDFParseError: If the file is invalid, too large, empty, or corrupt.
    """
    _validate_pdf_bytes(file_content)

    try:
        reader = PdfReader(io.BytesIO(file_content))
        pages = list(reader.pages)
    except PdfReadError as e:
        raise PDFParseError(f"Corrupt or invalid PDF: {e}") from e
    except Exception as e:
        raise PDFParseError(f"Failed to read PDF: {e}") from e

    if not pages:
        raise PDFParseError("PDF contains no pages")

    page_texts: list[str] = []
    for i, page in enumerate(pages):
        try:
            page_texts.append(" ".join(_page_fragments(page)))
        except Exception as e:
            logger.warning(f"Failed to extract text from page {i + 1}: {e}")
            page_texts.append("")

    if not any(text.strip() for text in page_texts):
        logger.warning("PDF contains no extractable text (may be scanned/image-based)")

    return page_texts


def combine_pages(page_texts: list[str]) -> str:
    """Flatten page texts into one string, each page terminated by a newline."""
    return "".join(f"{text}\n" for text in page_texts)
