from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from hostel_allocation.api.router import router as api_router
from hostel_allocation.config.logging import get_logger, setup_logging
from hostel_allocation.config.settings import settings
from hostel_allocation.core.error_handlers import register_exception_handlers
from hostel_allocation.core.middleware import register_middlewares
from hostel_allocation.core.monitoring import PerformanceTracker
from hostel_allocation.db.init_db import init_db

STATIC_DIR = Path(__file__).resolve().parent / "static"

logger = get_logger(__name__)


def create_app() -> FastAPI:
    """
    Application factory for the FastAPI app.

    - Configures title, version, debug mode from Settings.
    - Registers CORS, core middleware, metrics and exception handlers.
    - Serves the single-page UI from /static and the API routes at the root.
    """
    setup_logging()

    app = FastAPI(
        title=settings.APP_NAME,
        debug=settings.DEBUG,
        version=settings.APP_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS or ["*"],
        allow_credentials=settings.CORS_ORIGINS != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.metrics = PerformanceTracker(enabled=settings.ENABLE_METRICS)

    register_middlewares(app)
    register_exception_handlers(app)

    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
    app.include_router(api_router)

    @app.on_event("startup")
    async def on_startup() -> None:
        if settings.INIT_DB_ON_STARTUP:
            init_db()
        logger.info(f"{settings.APP_NAME} v{settings.APP_VERSION} started ({settings.ENVIRONMENT})")

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    uvicorn.run(
        "hostel_allocation.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development() and settings.DEBUG,
    )


if __name__ == "__main__":
    run()
