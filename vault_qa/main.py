"""Main application entry point.

Runs FastAPI (port 8000) with NiceGUI mounted for the landing page.
Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def run_integrated() -> None:
    """Run FastAPI with NiceGUI mounted on the same server.

    FastAPI serves /health and the docs, NiceGUI serves the page.
    Both accessible on port 8000.
    """
    import uvicorn
    from nicegui import ui

    from vault_qa.api.app import create_app
    from vault_qa.ui.landing_page import landing_page  # noqa: F401 - Registers the page

    app = create_app()

    # Mount NiceGUI onto FastAPI
    ui.run_with(
        app,
        title="Vault QA",
        favicon="💬",
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "vault-qa-secret"),
    )

    port = int(os.getenv("PORT", "8000"))
    logger.info(f"Starting integrated server on http://localhost:{port}")
    logger.info(f"Landing page available at http://localhost:{port}/ (admin: /?userType=admin)")

    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


def run_standalone() -> None:
    """Run only the NiceGUI page on its own server (port 8080).

    Useful during UI development; there is no /health endpoint.
    """
    from vault_qa.ui.landing_page import main as run_page

    logger.info("Starting standalone page on http://localhost:8080")
    run_page()


def main() -> None:
    """Application entry point.

    Set RUN_MODE=standalone to run the page without the FastAPI host.
    Default is integrated mode.
    """
    mode = os.getenv("RUN_MODE", "integrated").lower()

    logger.info(f"Starting Vault QA in {mode} mode")

    if mode == "standalone":
        run_standalone()
    else:
        run_integrated()


if __name__ == "__main__":
    main()
