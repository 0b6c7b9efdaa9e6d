"""Request/response state for the question and upload flows.

Each flow owns one FlowState. A state is exactly one of idle, loading,
succeeded (with payload) or failed (with reason), so combinations such as
"loading while showing an old answer" cannot be represented.

The flows hold no UI elements. The page passes an ``on_change`` callback
that re-renders whatever depends on the flow.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from vault_qa.client.api_client import APIError, VaultAPIClient
from vault_qa.models.schemas import AnswerResponse, UploadFile, UploadResult

logger = logging.getLogger(__name__)

T = TypeVar("T")

QUESTION_ERROR_FALLBACK = "Error asking question"
UPLOAD_ERROR_FALLBACK = "Error uploading files"


class FlowStatus(str, Enum):
    """Lifecycle of a single request."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class FlowState(Generic[T]):
    """Tagged state of a flow.

    Build instances with the classmethods; they guarantee that ``payload``
    is only set when succeeded and ``error`` only when failed.
    """

    status: FlowStatus = FlowStatus.IDLE
    payload: T | None = None
    error: str | None = None

    @classmethod
    def idle(cls) -> "FlowState[T]":
        return cls(FlowStatus.IDLE)

    @classmethod
    def loading(cls) -> "FlowState[T]":
        return cls(FlowStatus.LOADING)

    @classmethod
    def succeeded(cls, payload: T) -> "FlowState[T]":
        return cls(FlowStatus.SUCCEEDED, payload=payload)

    @classmethod
    def failed(cls, reason: str) -> "FlowState[T]":
        return cls(FlowStatus.FAILED, error=reason)

    @property
    def is_loading(self) -> bool:
        return self.status is FlowStatus.LOADING


class QuestionFlow:
    """Question text plus the state of the last submission."""

    def __init__(
        self,
        client: VaultAPIClient,
        model: str,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        """Initialize the flow.

        Args:
            client: API client used for submissions.
            model: Model identifier sent with every question.
            on_change: Called after every state transition.
        """
        self.question: str = ""
        self.state: FlowState[AnswerResponse] = FlowState.idle()
        self._client = client
        self._model = model
        self._on_change = on_change

    @property
    def loading(self) -> bool:
        return self.state.is_loading

    @property
    def can_submit(self) -> bool:
        """True when a question is present and nothing is in flight."""
        return bool(self.question.strip()) and not self.loading

    @property
    def response(self) -> AnswerResponse | None:
        return self.state.payload

    @property
    def error_message(self) -> str:
        return self.state.error or ""

    def _set_state(self, state: FlowState[AnswerResponse]) -> None:
        self.state = state
        if self._on_change is not None:
            self._on_change()

    async def submit(self, question: str | None = None) -> bool:
        """Submit the current question.

        Args:
            question: Replaces the current question text when given.

        Returns:
            True if the submission was sent, False if it was a no-op
            (empty question or a submission already in flight).
        """
        if question is not None:
            self.question = question
        if not self.can_submit:
            return False

        text = self.question.strip()
        logger.info(f"Asking question: {text[:80]}")
        self._set_state(FlowState.loading())

        try:
            response = await self._client.submit_question(text, self._model)
        except APIError as e:
            logger.warning(f"Error asking question: {e.message}")
            self._set_state(FlowState.failed(e.message or QUESTION_ERROR_FALLBACK))
            return True
        except Exception:
            logger.exception("Unexpected failure while asking question")
            self._set_state(FlowState.failed(QUESTION_ERROR_FALLBACK))
            raise

        logger.info(f"Answer received ({response.tokens} tokens, {len(response.context)} snippets)")
        self._set_state(FlowState.succeeded(response))
        return True

    async def handle_shortcut(self, key: str, ctrl: bool) -> bool:
        """Submit on Ctrl+Enter when the flow can submit.

        Returns:
            True if the key combination triggered a submission.
        """
        if key != "Enter" or not ctrl or not self.can_submit:
            return False
        return await self.submit()


class UploadFlow:
    """Uploaded/failed file lists plus the state of the last batch."""

    def __init__(
        self,
        client: VaultAPIClient,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self.uploaded: list[str] = []
        self.failed: dict[str, str] = {}
        self.state: FlowState[UploadResult] = FlowState.idle()
        self._client = client
        self._on_change = on_change

    @property
    def loading(self) -> bool:
        return self.state.is_loading

    @property
    def error_message(self) -> str:
        return self.state.error or ""

    def _set_state(self, state: FlowState[UploadResult]) -> None:
        self.state = state
        if self._on_change is not None:
            self._on_change()

    async def upload(self, files: list[UploadFile]) -> bool:
        """Upload a batch of files.

        Previous results are cleared before the request is sent.

        Args:
            files: Files dropped or picked by the user.

        Returns:
            True if the batch was sent, False if it was a no-op
            (empty batch or an upload already in flight).
        """
        if not files or self.loading:
            return False

        self.uploaded = []
        self.failed = {}
        self._set_state(FlowState.loading())

        try:
            result = await self._client.upload_files(files)
        except APIError as e:
            logger.warning(f"Error uploading files: {e.message}")
            self.uploaded = []
            self.failed = {}
            reason = f"Error: {e.message}" if e.message else UPLOAD_ERROR_FALLBACK
            self._set_state(FlowState.failed(reason))
            return True
        except Exception:
            logger.exception("Unexpected failure while uploading files")
            self._set_state(FlowState.failed(UPLOAD_ERROR_FALLBACK))
            raise

        self.uploaded = list(result.successful_file_names)
        self.failed = dict(result.failed_file_names)
        logger.info(f"Upload finished: {len(self.uploaded)} succeeded, {len(self.failed)} failed")
        self._set_state(FlowState.succeeded(result))
        return True
