"""NiceGUI landing page: ask questions, read answers, upload documents."""

import logging

from fastapi import Request
from nicegui import events, ui

from vault_qa.client.api_client import VaultAPIClient
from vault_qa.config import UIConfig, get_ui_config
from vault_qa.models.schemas import AnswerResponse, UploadFile
from vault_qa.ui.markdown import render_answer
from vault_qa.ui.presentation import SnippetView, ViewMode, resolve_view_mode
from vault_qa.ui.state import QuestionFlow, UploadFlow

logger = logging.getLogger(__name__)

USER_TYPE_PARAM = "userType"
DROPZONE_PROMPT = "拖放文件添加到知识库这里，或点击选择文件"
SUBMIT_LABEL = "提交"

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;900&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #f5f5f5; min-height: 100vh; }

    .work-area {
        background: white;
        border-radius: 12px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
    }

    .error-banner {
        background: #fef2f2;
        border: 1px solid #fecaca;
        color: #b91c1c;
        border-radius: 8px;
    }

    .dropzone .q-uploader { width: 100%; border: 2px dashed #9ca3af; box-shadow: none; }

    .two-column-list { columns: 2; list-style: disc inside; }

    .context-snippet { border-left: 3px solid #667eea; background: #f9fafb; }
    .context-snippet .snippet-header { cursor: pointer; user-select: none; }
    .snippet-expanded { white-space: pre-wrap; }

    .answer strong { font-weight: 600; }
    .answer em { font-style: italic; }
    .answer pre { margin: 0.5rem 0; }
    .answer code { font-family: 'Menlo', 'Monaco', monospace; }
    .answer ul, .answer ol { margin: 0.5rem 0; }
    .answer a { color: #4f46e5; }

    .failed-files li div { color: #b91c1c; font-size: 0.8rem; }
</style>
"""


def render_snippet(view: SnippetView) -> None:
    """Render one collapsible context snippet."""
    with ui.column().classes("context-snippet w-full gap-1 px-3 py-2"):
        with ui.row().classes("snippet-header w-full items-center gap-2") as header:
            ui.label(view.header).classes("font-semibold")
            ui.label(view.snippet.title).classes("text-gray-500 text-sm")
            arrow = ui.label(view.arrow).classes("text-gray-400 text-xs")
        body = ui.label(view.body).classes("text-sm text-gray-700")

    def toggle() -> None:
        view.toggle()
        arrow.set_text(view.arrow)
        body.set_text(view.body)
        if view.collapsed:
            body.classes(remove="snippet-expanded")
        else:
            body.classes(add="snippet-expanded")

    header.on("click", toggle)


def render_response(response: AnswerResponse) -> None:
    """Render the answer markdown followed by its context snippets."""
    with ui.column().classes("w-full gap-3"):
        ui.html(render_answer(response.answer), sanitize=False).classes(
            "answer text-sm leading-relaxed"
        )
        with ui.column().classes("w-full gap-2"):
            for index, snippet in enumerate(response.context):
                render_snippet(SnippetView(snippet=snippet, index=index))


def build_page(config: UIConfig, client: VaultAPIClient, view_mode: ViewMode) -> None:
    """Build the page body for one browser client."""
    ui.add_head_html(CUSTOM_CSS)

    errors_container: ui.column
    answer_container: ui.column
    files_container: ui.column
    uploader: ui.upload

    def refresh_errors() -> None:
        errors_container.clear()
        with errors_container:
            for message in (question_flow.error_message, upload_flow.error_message):
                if message:
                    ui.label(message).classes("error-banner w-full px-4 py-2 text-sm")

    def refresh_answer() -> None:
        answer_container.clear()
        response = question_flow.response
        if response is None:
            return
        with answer_container:
            if response.tokens:
                with ui.row().classes("items-center gap-1 text-xs text-gray-500"):
                    ui.label("TOTAL TOKENS USED:")
                    ui.label(str(response.tokens)).style("font-weight: 900")
            render_response(response)

    def refresh_files() -> None:
        files_container.clear()
        with files_container:
            if upload_flow.uploaded:
                with ui.column().classes("gap-1"):
                    ui.label("Uploaded Files:").classes("font-semibold")
                    with ui.element("ul"):
                        for name in upload_flow.uploaded:
                            with ui.element("li"):
                                ui.label(name)
            if upload_flow.failed:
                with ui.column().classes("failed-files gap-1"):
                    ui.label("Failed Files:").classes("font-semibold")
                    with ui.element("ul"):
                        for name, reason in upload_flow.failed.items():
                            with ui.element("li"):
                                ui.label(name)
                                ui.label(f"Reason: {reason}")

    def on_question_change() -> None:
        refresh_errors()
        refresh_answer()

    def on_upload_change() -> None:
        refresh_errors()
        refresh_files()

    question_flow = QuestionFlow(client, config.question_model, on_change=on_question_change)
    upload_flow = UploadFlow(client, on_change=on_upload_change)

    async def ask() -> None:
        await question_flow.submit()

    async def handle_key(e: events.KeyEventArguments) -> None:
        if e.action.keydown:
            await question_flow.handle_shortcut(e.key.name, e.modifiers.ctrl)

    async def handle_upload(e: events.MultiUploadEventArguments) -> None:
        files = [
            UploadFile(
                name=f.name,
                content=await f.read(),
                content_type=f.content_type or "application/octet-stream",
            )
            for f in e.files
        ]
        try:
            await upload_flow.upload(files)
        finally:
            uploader.reset()

    # The keyboard element belongs to this page's client and is removed with
    # it, so each page holds exactly one Ctrl+Enter listener.
    ui.keyboard(on_key=handle_key, ignore=[])

    # === UI Layout ===
    with ui.column().classes("w-full max-w-5xl mx-auto p-4 md:p-8 gap-4"):
        ui.label(config.page_title).classes("text-3xl font-bold")
        errors_container = ui.column().classes("w-full gap-2")

        with ui.column().classes("work-area w-full p-5 gap-4"):
            if view_mode.shows_dropzone:
                with ui.column().classes("dropzone w-full gap-2"):
                    ui.label().bind_text_from(
                        upload_flow,
                        "loading",
                        lambda loading: "Loading..." if loading else DROPZONE_PROMPT,
                    ).classes("text-gray-600")
                    uploader = (
                        ui.upload(multiple=True, auto_upload=True, on_multi_upload=handle_upload)
                        .props("flat bordered")
                        .classes("w-full")
                    )
                    uploader.bind_enabled_from(upload_flow, "loading", lambda loading: not loading)
            if view_mode.shows_faq:
                with ui.column().classes("gap-2"):
                    ui.label(config.faq_notice).classes("text-sm text-gray-600")
                    with ui.element("ul").classes("two-column-list w-full text-sm"):
                        for item in config.faq_questions:
                            with ui.element("li"):
                                ui.label(item).classes("inline")

            with ui.row().classes("w-full items-end gap-3"):
                (
                    ui.textarea(placeholder="Enter your question here...")
                    .props("autogrow outlined")
                    .classes("flex-grow")
                    .bind_value(question_flow, "question")
                )
                ui.button(SUBMIT_LABEL, on_click=ask).style("width: 60px").bind_enabled_from(
                    question_flow, "can_submit"
                )
                ui.spinner(size="lg").bind_visibility_from(question_flow, "loading")

            answer_container = ui.column().classes("w-full gap-3")
            ui.element("div").style("height: 32px")
            files_container = ui.column().classes("w-full gap-3")

    refresh_errors()
    refresh_answer()
    refresh_files()


@ui.page("/")
def landing_page(request: Request) -> None:
    """Main question/answer page."""
    config = get_ui_config()
    view_mode = resolve_view_mode(
        request.query_params.get(USER_TYPE_PARAM), config.admin_user_type
    )
    logger.debug(f"Rendering landing page in {view_mode.value} mode")
    build_page(config, VaultAPIClient.from_config(config), view_mode)


def main() -> None:
    ui.run(title="Vault QA", port=8080, reload=False)


if __name__ == "__main__":
    main()
