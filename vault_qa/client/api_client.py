"""HTTP client for the external question/upload API.

The page never talks to the API directly; every call goes through
VaultAPIClient so errors reach the flows as a single exception type.
"""

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from vault_qa.config import UIConfig
from vault_qa.models.schemas import AnswerResponse, QuestionRequest, UploadFile, UploadResult

logger = logging.getLogger(__name__)

QUESTIONS_PATH = "/api/questions"
UPLOAD_PATH = "/upload"

ModelT = TypeVar("ModelT", bound=BaseModel)


class APIError(Exception):
    """Raised when a call to the question/upload API fails.

    Attributes:
        message: Human-readable failure description.
        status_code: HTTP status if the server answered, else None.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _error_from_response(response: httpx.Response) -> APIError:
    """Build an APIError from a non-2xx response.

    The backend writes plain-text error bodies, so the body text is the
    most useful message when present.
    """
    detail = response.text.strip()
    if not detail:
        detail = f"HTTP {response.status_code}"
    return APIError(detail, status_code=response.status_code)


class VaultAPIClient:
    """Async client for the question and upload endpoints.

    A fresh httpx.AsyncClient is opened per call, so an instance holds no
    connections and can be shared freely between page clients.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 120.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: API base URL without trailing slash.
            timeout: Per-request timeout in seconds.
            transport: Optional transport override (used by tests).
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    @classmethod
    def from_config(cls, config: UIConfig) -> "VaultAPIClient":
        return cls(base_url=config.api_base_url, timeout=config.request_timeout)

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        )

    async def _post(self, path: str, model: type[ModelT], **kwargs: Any) -> ModelT:
        """POST to the API and decode the JSON body into ``model``.

        Raises:
            APIError: On transport failure, non-2xx status or bad body.
        """
        async with self._client() as client:
            try:
                response = await client.post(path, **kwargs)
            except httpx.RequestError as e:
                logger.warning(f"Request to {path} failed: {e}")
                raise APIError(f"Connection failed: {e}") from e

        if response.is_error:
            error = _error_from_response(response)
            logger.warning(f"{path} returned {response.status_code}: {error.message}")
            raise error

        try:
            return model.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.error(f"Undecodable response from {path}: {e}")
            raise APIError(f"Invalid response from server: {e}") from e

    async def submit_question(self, question: str, model: str) -> AnswerResponse:
        """Ask the backend a question.

        Args:
            question: The user's question.
            model: Model identifier to answer with.

        Returns:
            The answer with its context snippets and token count.

        Raises:
            APIError: If the request fails.
        """
        payload = QuestionRequest(text=question, model=model)
        logger.info(f"Submitting question ({len(payload.text)} chars) with model {model}")
        return await self._post(
            QUESTIONS_PATH,
            AnswerResponse,
            json=payload.model_dump(by_alias=True),
        )

    async def upload_files(self, files: list[UploadFile]) -> UploadResult:
        """Upload a batch of files to the knowledge base.

        Args:
            files: Files to upload, sent as repeated ``files`` parts.

        Returns:
            Accepted filenames and rejected filenames with reasons.

        Raises:
            APIError: If the request fails.
        """
        parts = [("files", (f.name, f.content, f.content_type)) for f in files]
        logger.info(f"Uploading {len(parts)} file(s)")
        return await self._post(UPLOAD_PATH, UploadResult, files=parts)
