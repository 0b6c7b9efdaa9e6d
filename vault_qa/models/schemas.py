"""Pydantic models for the question and upload API payloads."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class QuestionRequest(BaseModel):
    """Request payload for the question endpoint.

    Attributes:
        text: The user's question, sent as ``question`` on the wire.
        model: Model identifier the backend should answer with.
    """

    model_config = ConfigDict(populate_by_name=True)

    text: str = Field(..., min_length=1, alias="question")
    model: str = Field(..., min_length=1)

    @field_validator("text", mode="before")
    @classmethod
    def strip_text(cls, v: str) -> str:
        """Strip whitespace from question before validation."""
        if isinstance(v, str):
            return v.strip()
        return v


class ContextSnippet(BaseModel):
    """A retrieved passage shown as supporting evidence for an answer."""

    title: str = ""
    text: str = ""


class AnswerResponse(BaseModel):
    """Answer returned by the question endpoint.

    Attributes:
        answer: Markdown answer text.
        context: Snippets the answer was built from, in retrieval order.
        tokens: Total tokens the backend spent on the answer.
    """

    answer: str
    context: list[ContextSnippet] = Field(default_factory=list)
    tokens: int = 0

    @field_validator("context", mode="before")
    @classmethod
    def null_context_is_empty(cls, v: object) -> object:
        """Treat a null context as no snippets."""
        return [] if v is None else v


class UploadResult(BaseModel):
    """Outcome of a file batch upload.

    Attributes:
        successful_file_names: Files the backend accepted.
        failed_file_names: Rejected files mapped to their failure reason.
    """

    successful_file_names: list[str] = Field(default_factory=list)
    failed_file_names: dict[str, str] = Field(default_factory=dict)

    @field_validator("successful_file_names", mode="before")
    @classmethod
    def null_names_are_empty(cls, v: object) -> object:
        return [] if v is None else v

    @field_validator("failed_file_names", mode="before")
    @classmethod
    def null_failures_are_empty(cls, v: object) -> object:
        return {} if v is None else v


class UploadFile(BaseModel):
    """A single file in an upload batch.

    Attributes:
        name: Original filename.
        content: Raw file bytes.
        content_type: MIME type reported by the browser.
    """

    name: str = Field(..., min_length=1)
    content: bytes
    content_type: str = "application/octet-stream"
