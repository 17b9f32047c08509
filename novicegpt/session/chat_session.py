"""Chat session controller.

Owns the transcript and the hidden document context for one chat page, and
turns a user submission into a single Gemini call whose outcome always ends
up in the transcript as an assistant message.
"""

import asyncio
import logging
from collections.abc import Callable

from novicegpt.llm.gemini_client import GeminiClient, GeminiError
from novicegpt.models.schemas import (
    GenerateContentRequest,
    IngestionResult,
    Message,
    MessageRole,
)
from novicegpt.parsing.pdf_parser import PDF_MIME_TYPE, combine_pages, extract_page_texts
from novicegpt.session.transcript import Listener, Transcript

logger = logging.getLogger(__name__)

PENDING_LABEL = "AI is typing..."
DOCUMENT_PREFIX = "This is the content of the uploaded PDF:"
NO_RESPONSE_TEXT = "No response from AI."
ERROR_TEXT = "Something went wrong. Please try again."

PageExtractor = Callable[[bytes], list[str]]

_WIRE_ROLES = {
    MessageRole.USER: "user",
    MessageRole.ASSISTANT: "model",
}


class ChatSession:
    """State and behavior of one chat conversation.

    Attributes:
        transcript: Messages shown to the user, in chronological order.
        hidden_document_text: Text of the last successfully extracted upload.
            Sent with every request, never rendered.
        uploaded_file_name: Label of the last accepted upload.
        is_dispatching: True while a request is in flight.
        generation: Bumped by new_chat; a reply that returns under an older
            generation is dropped.
    """

    def __init__(
        self,
        client: GeminiClient,
        extractor: PageExtractor = extract_page_texts,
    ) -> None:
        self._client = client
        self._extractor = extractor
        self.transcript = Transcript()
        self.hidden_document_text: str = ""
        self.uploaded_file_name: str | None = None
        self.is_dispatching: bool = False
        self.generation: int = 0

    def add_listener(self, listener: Listener) -> None:
        """Run listener after every transcript or document change."""
        self.transcript.add_listener(listener)

    async def ingest_document(self, file_name: str, content_type: str | None, data: bytes) -> IngestionResult:
        """Extract an uploaded PDF into the hidden document context.

        Non-PDF uploads are ignored without a notice. Extraction failures
        leave the previous context in place and return the error as a
        notice for the user.

        Args:
            file_name: Original name of the uploaded file.
            content_type: Declared MIME type.
            data: Raw file bytes.

        Returns:
            IngestionResult describing what happened.
        """
        if content_type != PDF_MIME_TYPE:
            logger.debug(f"Ignoring upload {file_name!r} with type {content_type!r}")
            return IngestionResult(ok=False)

        self.uploaded_file_name = file_name

        try:
            page_texts = await asyncio.to_thread(self._extractor, data)
        except Exception as e:
            logger.warning(f"Text extraction failed for {file_name}: {e}")
            self.transcript.notify()
            return IngestionResult(ok=False, file_name=file_name, error=f"Could not read {file_name}: {e}")

        self.hidden_document_text = combine_pages(page_texts)
        logger.info(f"Loaded document context from {file_name} ({len(page_texts)} pages)")
        self.transcript.notify()
        return IngestionResult(ok=True, file_name=file_name, pages=len(page_texts))

    def build_request(self) -> GenerateContentRequest:
        """Assemble the outbound turns from hidden context and transcript.

        The pending placeholder is never included.
        """
        turns = []
        if self.hidden_document_text.strip():
            turns.append(("user", f"{DOCUMENT_PREFIX}\n{self.hidden_document_text}"))
        for message in self.transcript:
            if message.is_pending:
                continue
            turns.append((_WIRE_ROLES[message.role], message.content))
        return GenerateContentRequest.from_turns(turns)

    async def dispatch(self, text: str) -> Message | None:
        """Send one user message and resolve the reply into the transcript.

        Args:
            text: Raw input text; surrounding whitespace is trimmed.

        Returns:
            The assistant message that replaced the placeholder, or None if
            the input was blank, another dispatch is still in flight, or the
            chat was reset before the reply arrived.
        """
        text = text.strip()
        if not text or self.is_dispatching:
            return None

        self.is_dispatching = True
        generation = self.generation
        try:
            self.transcript.append(self.transcript.new_message(MessageRole.USER, text))
            self.transcript.append(self.transcript.new_message(MessageRole.PENDING, PENDING_LABEL))

            try:
                response = await self._client.generate_content(self.build_request())
                reply = (response.first_text() or NO_RESPONSE_TEXT).strip()
            except GeminiError as e:
                logger.error(f"Gemini request failed: {e}")
                reply = ERROR_TEXT

            if generation != self.generation:
                logger.info("Dropping reply for a conversation that was reset")
                return None

            final = self.transcript.new_message(MessageRole.ASSISTANT, reply)
            self.transcript.resolve_pending(final)
            return final
        finally:
            if generation == self.generation:
                self.is_dispatching = False

    def new_chat(self) -> None:
        """Clear the transcript and abandon any open request.

        The document context is kept.
        """
        self.generation += 1
        self.is_dispatching = False
        self.transcript.clear()
