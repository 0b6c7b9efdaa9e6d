"""Pydantic models for API requests and responses.

Provides type safety and validation for everything exchanged with the
question/upload API.

Models:
    - QuestionRequest: Outgoing question payload
    - AnswerResponse: Answer with its context snippets and token count
    - ContextSnippet: A retrieved passage backing an answer
    - UploadFile: One file in an upload batch
    - UploadResult: Accepted and rejected filenames for a batch
"""

from vault_qa.models.schemas import (
    AnswerResponse,
    ContextSnippet,
    QuestionRequest,
    UploadFile,
    UploadResult,
)

__all__ = [
    "AnswerResponse",
    "ContextSnippet",
    "QuestionRequest",
    "UploadFile",
    "UploadResult",
]
