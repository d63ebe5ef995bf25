"""
SlideREPL - Main Application Entry Point

Serves Go presentation slides in a browser editor that can compile and run
the code on each slide.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sliderepl.core import Settings, get_settings, setup_logging
from sliderepl.api.routes import compiler, slides
from sliderepl.services import get_compiler_service, get_slide_deck_service
from sliderepl.services.compiler import get_unique_names

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown."""
    settings = get_settings()

    # Startup; any failure here aborts the server
    logger.info(f"🚀 Starting {settings.app_name} on {settings.http_listen}...")
    deck = get_slide_deck_service()
    logger.info(f"📑 Slides: \033[93m{settings.slides_file}\033[0m ({len(deck)} slides)")

    compiler_service = get_compiler_service()
    logger.info(f"📁 Build directory: \033[93m{compiler_service.temp_root}\033[0m")
    get_unique_names().start()

    if settings.html_output:
        logger.info("🖋️  Program output is sent as raw HTML")

    yield

    # Shutdown
    logger.info(f"👋 Shutting down {settings.app_name}...")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Go slide presenter with an in-browser compile and run editor",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Submitted code runs on this machine, so other sites may only read
    # responses from origins that were configured explicitly
    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=False,
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
        )

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "app_name": settings.app_name,
            "slide_count": len(get_slide_deck_service()),
        }

    # The slides router ends in a catch-all path, so it goes last
    app.include_router(compiler.router, tags=["compile"])
    app.include_router(slides.router, tags=["slides"])

    return app


# Create the application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    setup_logging(logging.DEBUG if settings.debug else logging.INFO)
    uvicorn.run(
        "sliderepl.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
