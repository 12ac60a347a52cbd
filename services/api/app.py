"""
Portfolio API - FastAPI Application

Serves the portfolio content and the AI resume summary generator.
"""
import logging
import os
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.responses import FileResponse

from dotenv import load_dotenv
load_dotenv()

from shared.ai import SummaryModelClient
from .config import APIConfig, get_config, log_openai_key_status
from .dependencies import build_summary_client
from .routes import health_router, portfolio_router, summary_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    config: APIConfig = app.state.config
    logger.info("=" * 60)
    logger.info("PORTFOLIO API STARTING")
    logger.info(f"Host: {config.host}")
    logger.info(f"Port: {config.port}")
    logger.info(f"Summary model: {config.openai_model}")
    logger.info("=" * 60)
    log_openai_key_status()

    yield

    logger.info("Shutting down Portfolio API...")
    client: Optional[SummaryModelClient] = app.state.summary_client
    if client is not None:
        try:
            await client.aclose()
        except Exception as e:
            logger.warning(f"Summary client shutdown error: {e}")

    logger.info("Cleanup complete")


def create_app(
    config: Optional[APIConfig] = None,
    summary_client: Optional[SummaryModelClient] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: API configuration; read from the environment when omitted
        summary_client: Model client for summary generation; built from
            config when omitted. Left unset (summary endpoint answers 503)
            if no OpenAI key is configured.
    """
    config = config or get_config()

    if summary_client is None:
        try:
            summary_client = build_summary_client(config)
        except ValueError as e:
            logger.warning(f"Summary generator disabled: {e}")

    app = FastAPI(
        title="Portfolio API",
        description="Portfolio content and AI-tailored resume summaries",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.summary_client = summary_client

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins.split(","),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router)
    app.include_router(summary_router, prefix="/api")
    app.include_router(portfolio_router, prefix="/api")

    # Mount frontend static files
    frontend_path = os.path.join(os.path.dirname(__file__), "..", "..", "frontend")
    if os.path.exists(frontend_path):
        app.mount("/static", StaticFiles(directory=frontend_path), name="static")

        @app.get("/")
        async def serve_frontend():
            """Serve the frontend index.html."""
            return FileResponse(os.path.join(frontend_path, "index.html"))

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    config = get_config()

    logging.basicConfig(
        level=logging.DEBUG if config.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    uvicorn.run(
        "services.api.app:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
    )
