"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - fake_backend: In-process stand-in for the question/upload API
    - api_client: VaultAPIClient wired to fake_backend via ASGITransport
    - async_client: HTTPX client for the Vault QA host app
    - ui_config: UIConfig with explicit test values
"""

from collections.abc import AsyncGenerator

import pytest
from fastapi import FastAPI, HTTPException, UploadFile
from fastapi.responses import PlainTextResponse
from httpx import ASGITransport, AsyncClient
from pydantic import BaseModel

from vault_qa.api import app
from vault_qa.client.api_client import VaultAPIClient
from vault_qa.config import UIConfig


class FakeQuestion(BaseModel):
    question: str
    model: str


class FakeBackend:
    """Records requests and serves canned answers, like the real API would."""

    def __init__(self) -> None:
        self.questions: list[FakeQuestion] = []
        self.uploads: list[list[tuple[str, bytes]]] = []
        self.app = self._create_app()

    def _create_app(self) -> FastAPI:
        backend = FastAPI()

        @backend.post("/api/questions", response_model=None)
        async def questions(form: FakeQuestion) -> dict | PlainTextResponse:
            self.questions.append(form)
            if form.question == "explode":
                return PlainTextResponse("vector db unavailable\n", status_code=500)
            return {
                "answer": f"**Answer** to: {form.question}",
                "context": [
                    {"title": "handbook.pdf", "text": "Annual leave is fifteen days."},
                    {"title": "faq.txt", "text": "x" * 300},
                ],
                "tokens": 42,
            }

        @backend.post("/upload")
        async def upload(files: list[UploadFile]) -> dict:
            batch = [(f.filename or "", await f.read()) for f in files]
            self.uploads.append(batch)
            if any(name == "boom.pdf" for name, _ in batch):
                raise HTTPException(status_code=413, detail="too large")
            successful = [name for name, content in batch if content]
            failed = {name: "empty file" for name, content in batch if not content}
            return {
                "successful_file_names": successful,
                "failed_file_names": failed or None,
            }

        return backend


@pytest.fixture
def fake_backend() -> FakeBackend:
    """Return a fresh fake question/upload API."""
    return FakeBackend()


@pytest.fixture
def api_client(fake_backend: FakeBackend) -> VaultAPIClient:
    """Return an API client that talks to the fake backend in-process."""
    return VaultAPIClient(
        base_url="http://backend.test",
        timeout=5.0,
        transport=ASGITransport(app=fake_backend.app),
    )


@pytest.fixture
def ui_config() -> UIConfig:
    """Return a UIConfig independent of the environment."""
    return UIConfig(
        api_base_url="http://backend.test/",
        question_model="GPT Turbo",
        request_timeout=5.0,
        admin_user_type="admin",
    )


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for the Vault QA host app.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
