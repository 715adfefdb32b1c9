"""
FastAPI application entry point.

Assembles the FastAPI app around a cascade orchestrator.
"""

import logging
import os
import sys
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from itinerary.shared.llm import create_model_client
from itinerary.shared.logging import setup_logging
from itinerary.generation import CascadeOrchestrator, load_config_from_env
from itinerary.generation.generation_api import router as itinerary_router


# ============================================================================
# Logging configuration (single source of truth for the service)
# ============================================================================
LOG_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)-40s | %(message)s"
)


def configure_logging() -> None:
    """Configure pipe-separated text logs, or JSON lines when LOG_FORMAT=json."""
    level = getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO)
    if os.environ.get("LOG_FORMAT", "").lower() == "json":
        setup_logging(level=level, logger_name="itinerary")
    else:
        logging.basicConfig(
            level=level,
            format=LOG_FORMAT,
            datefmt="%Y-%m-%d %H:%M:%S",
            handlers=[logging.StreamHandler(sys.stdout)],
            force=True,  # Override any prior basicConfig calls
        )

    # Quiet noisy third-party loggers
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("openai").setLevel(logging.WARNING)


def build_orchestrator_from_env() -> CascadeOrchestrator:
    """Build an orchestrator from environment configuration."""
    return CascadeOrchestrator(create_model_client(), load_config_from_env())


def create_app(orchestrator: Optional[CascadeOrchestrator] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        orchestrator: Orchestrator to serve. When omitted, one is built from
            the environment at startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if getattr(app.state, "orchestrator", None) is None:
            app.state.orchestrator = build_orchestrator_from_env()
        yield

    app = FastAPI(
        title="Itinerary Generator",
        description="AI-generated daily travel itineraries with a model cascade",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.orchestrator = orchestrator

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(itinerary_router)

    @app.get("/")
    async def root():
        """Root endpoint with API information."""
        config = app.state.orchestrator.config if app.state.orchestrator else None
        return {
            "name": "Itinerary Generator",
            "version": "0.1.0",
            "endpoints": {"generate": "/api/itinerary"},
            "models": list(config.models) if config else [],
        }

    @app.get("/health")
    async def health():
        """Global health check endpoint."""
        return {"status": "healthy"}

    return app


configure_logging()

app = create_app()


def main() -> None:
    import uvicorn

    uvicorn.run(
        app,
        host=os.environ.get("HOST", "0.0.0.0"),
        port=int(os.environ.get("PORT", "8000")),
    )


if __name__ == "__main__":
    main()
