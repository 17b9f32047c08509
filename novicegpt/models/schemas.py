from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class MessageRole(str, Enum):
    """Roles a transcript entry can take."""

    USER = "user"
    ASSISTANT = "assistant"
    PENDING = "pending"


class Message(BaseModel):
    """A single entry in the chat transcript.

    Attributes:
        id: Ordering key, increasing within a session.
        role: Who authored the entry. PENDING marks the placeholder shown
            while a response is awaited.
        content: Plain message text.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    role: MessageRole
    content: str

    @property
    def is_pending(self) -> bool:
        return self.role is MessageRole.PENDING


class Part(BaseModel):
    """One part of a Gemini content turn. Only text parts are used."""

    model_config = ConfigDict(extra="ignore")

    text: str | None = None


class Content(BaseModel):
    """A Gemini content turn (request or response side)."""

    model_config = ConfigDict(extra="ignore")

    role: str | None = None
    parts: list[Part] | None = None


class Candidate(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    content: Content | None = None
    finish_reason: str | None = Field(None, alias="finishReason")


class GenerateContentRequest(BaseModel):
    """Request body for the generateContent endpoint.

    Attributes:
        contents: Chronological list of turns; order is significant.
    """

    contents: list[Content] = Field(default_factory=list)

    @classmethod
    def from_turns(cls, turns: list[tuple[Literal["user", "model"], str]]) -> "GenerateContentRequest":
        """Build a request from (role, text) pairs, one text part per turn."""
        return cls(contents=[Content(role=role, parts=[Part(text=text)]) for role, text in turns])


class GenerateContentResponse(BaseModel):
    """Response body from the generateContent endpoint.

    Every nested field is optional so a sparse or partial body decodes
    without raising; unknown fields (usageMetadata, modelVersion, ...) are
    ignored.
    """

    model_config = ConfigDict(extra="ignore")

    candidates: list[Candidate] | None = None

    def first_text(self) -> str | None:
        """Return candidates[0].content.parts[0].text, or None if any link is missing."""
        if not self.candidates:
            return None
        content = self.candidates[0].content
        if content is None or not content.parts:
            return None
        return content.parts[0].text


class IngestionResult(BaseModel):
    """Outcome of a document upload.

    Attributes:
        ok: Whether the hidden document text was replaced.
        file_name: Name of the accepted file, if any.
        pages: Number of pages extracted.
        error: Notice to surface to the user, None when silent.
    """

    ok: bool
    file_name: str | None = None
    pages: int = Field(default=0, ge=0)
    error: str | None = None
