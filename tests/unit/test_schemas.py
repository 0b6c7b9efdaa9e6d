"""Unit tests for API payload models."""

import pytest
import pytest_check as check
from pydantic import ValidationError

from vault_qa.models.schemas import AnswerResponse, QuestionRequest, UploadFile, UploadResult


class TestQuestionRequest:
    """Tests for QuestionRequest serialization and validation."""

    def test_serializes_text_as_question(self) -> None:
        """Wire payload uses the backend's field names."""
        request = QuestionRequest(text="How many leave days?", model="GPT Turbo")

        assert request.model_dump(by_alias=True) == {
            "question": "How many leave days?",
            "model": "GPT Turbo",
        }

    def test_accepts_wire_field_name(self) -> None:
        """Model can be built from the wire name as well."""
        request = QuestionRequest.model_validate({"question": "hi", "model": "m"})

        assert request.text == "hi"

    def test_strips_question(self) -> None:
        """Surrounding whitespace is removed."""
        request = QuestionRequest(text="  hello \n", model="m")

        assert request.text == "hello"

    def test_rejects_blank_question(self) -> None:
        """Whitespace-only question fails validation."""
        with pytest.raises(ValidationError):
            QuestionRequest(text="   ", model="m")


class TestAnswerResponse:
    """Tests for AnswerResponse decoding."""

    def test_decodes_full_answer(self) -> None:
        """Answer, ordered snippets and tokens are decoded."""
        response = AnswerResponse.model_validate({
            "answer": "# Title",
            "context": [
                {"title": "a.pdf", "text": "first"},
                {"title": "b.pdf", "text": "second"},
            ],
            "tokens": 120,
        })

        check.equal(response.answer, "# Title")
        check.equal([c.title for c in response.context], ["a.pdf", "b.pdf"])
        check.equal(response.tokens, 120)

    def test_null_context_is_empty(self) -> None:
        """Backend may send null for an empty context list."""
        response = AnswerResponse.model_validate({"answer": "x", "context": None, "tokens": 1})

        assert response.context == []

    def test_missing_tokens_default_to_zero(self) -> None:
        """Tokens default to zero when absent."""
        response = AnswerResponse.model_validate({"answer": "x"})

        check.equal(response.tokens, 0)
        check.equal(response.context, [])

    def test_requires_answer(self) -> None:
        """Answer text is mandatory."""
        with pytest.raises(ValidationError):
            AnswerResponse.model_validate({"context": []})


class TestUploadResult:
    """Tests for UploadResult decoding."""

    def test_decodes_lists(self) -> None:
        """Successful names and failure reasons are decoded."""
        result = UploadResult.model_validate({
            "successful_file_names": ["a.pdf", "b.txt"],
            "failed_file_names": {"c.epub": "unsupported"},
        })

        check.equal(result.successful_file_names, ["a.pdf", "b.txt"])
        check.equal(result.failed_file_names, {"c.epub": "unsupported"})

    def test_absent_fields_are_empty(self) -> None:
        """Missing fields default to empty."""
        result = UploadResult.model_validate({})

        check.equal(result.successful_file_names, [])
        check.equal(result.failed_file_names, {})

    def test_null_fields_are_empty(self) -> None:
        """Null fields default to empty."""
        result = UploadResult.model_validate({
            "successful_file_names": None,
            "failed_file_names": None,
        })

        check.equal(result.successful_file_names, [])
        check.equal(result.failed_file_names, {})


class TestUploadFile:
    """Tests for UploadFile."""

    def test_default_content_type(self) -> None:
        """Content type defaults to octet-stream."""
        upload = UploadFile(name="notes.txt", content=b"hello")

        assert upload.content_type == "application/octet-stream"

    def test_rejects_empty_name(self) -> None:
        """Files must carry a name."""
        with pytest.raises(ValidationError):
            UploadFile(name="", content=b"hello")
