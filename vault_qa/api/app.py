"""FastAPI application factory and configuration.

Hosts the NiceGUI page and a health check. Questions and uploads are not
handled here; the page sends them to the external API.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from vault_qa import __version__
from vault_qa.config import get_ui_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Log startup and shutdown, and fail fast on bad configuration.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    config = get_ui_config()
    logger.info(f"Starting Vault QA (API at {config.api_base_url}, model {config.question_model})")
    yield
    logger.info("Shutting down Vault QA...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Vault QA",
        description=(
            "Question/answer console for a document question-answering service. "
            "Serves the web page; answering and document indexing happen in the "
            "external API."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "vault-qa"}

    return application


app = create_app()
