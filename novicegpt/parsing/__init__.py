"""PDF parsing utilities for document context.

Responsibilities:
    - PDF validation (header, size, emptiness)
    - Page-ordered text extraction with pypdf
    - Flattening pages into a single context string
"""

from novicegpt.parsing.pdf_parser import (
    PDF_MIME_TYPE,
    PDFParseError,
    combine_pages,
    extract_page_texts,
)

__all__ = ["PDF_MIME_TYPE", "PDFParseError", "combine_pages", "extract_page_texts"]
