"""Vault QA - question/answer console for an external document QA service.

Combines NiceGUI for the page, FastAPI for hosting it, httpx for calls to
the question-answering API, and Pydantic for payloads and configuration.

Components:
    - api: FastAPI application hosting the page
    - client: HTTP client for the external question/upload API
    - models: Request/response schemas
    - ui: Landing page, flow state and markdown rendering
"""

__version__ = "0.1.0"
