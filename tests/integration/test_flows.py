"""Integration tests for the page flows against the fake backend.

No mocks: flows drive the real API client, which talks HTTP to an
in-process FastAPI stand-in for the question/upload service.
"""

import pytest_check as check

from vault_qa.client.api_client import VaultAPIClient
from vault_qa.models.schemas import UploadFile
from vault_qa.ui.presentation import SnippetView
from vault_qa.ui.state import FlowStatus, QuestionFlow, UploadFlow


class TestQuestionWorkflow:
    """Question submission from text box to rendered snippets."""

    async def test_question_answer_cycle(self, api_client: VaultAPIClient) -> None:
        changes: list[FlowStatus] = []

        def record() -> None:
            changes.append(flow.state.status)

        flow = QuestionFlow(api_client, model="GPT Turbo", on_change=record)
        flow.question = "讲讲公司年假制度？"

        await flow.handle_shortcut("Enter", ctrl=True)

        check.equal(changes, [FlowStatus.LOADING, FlowStatus.SUCCEEDED])
        assert flow.response is not None
        views = [SnippetView(snippet=s, index=i) for i, s in enumerate(flow.response.context)]
        check.equal(views[0].body, "Annual leave is fifteen days.")
        check.equal(views[1].body, "x" * 222 + "...")

    async def test_failure_then_recovery(self, api_client: VaultAPIClient) -> None:
        flow = QuestionFlow(api_client, model="GPT Turbo")

        await flow.submit("explode")
        check.equal(flow.error_message, "vector db unavailable")
        check.is_true(flow.can_submit)

        await flow.submit("What is AIM?")
        check.equal(flow.error_message, "")
        check.equal(flow.state.status, FlowStatus.SUCCEEDED)


class TestUploadWorkflow:
    """Upload batches from dropzone to file lists."""

    async def test_mixed_batch(self, api_client: VaultAPIClient) -> None:
        flow = UploadFlow(api_client)

        await flow.upload([
            UploadFile(name="a.pdf", content=b"%PDF-1.4"),
            UploadFile(name="b.txt", content=b"hi"),
            UploadFile(name="empty.txt", content=b""),
        ])

        check.equal(flow.uploaded, ["a.pdf", "b.txt"])
        check.equal(flow.failed, {"empty.txt": "empty file"})

    async def test_rejected_batch_then_success(self, api_client: VaultAPIClient) -> None:
        flow = UploadFlow(api_client)

        await flow.upload([UploadFile(name="boom.pdf", content=b"x")])
        check.is_true(flow.error_message.startswith("Error: "))
        check.equal(flow.uploaded, [])

        await flow.upload([UploadFile(name="a.pdf", content=b"x")])
        check.equal(flow.error_message, "")
        check.equal(flow.uploaded, ["a.pdf"])
