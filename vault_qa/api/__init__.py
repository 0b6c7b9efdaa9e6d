"""FastAPI host for the Vault QA page.

Endpoints:
    - GET /health: Service health status
    - GET /: Landing page (mounted by NiceGUI at startup)
"""

from vault_qa.api.app import app, create_app

__all__ = ["app", "create_app"]
