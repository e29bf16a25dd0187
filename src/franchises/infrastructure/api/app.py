"""FastAPI application factory."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from franchises.domain.exceptions import StoreError
from franchises.domain.repository.franchise_repository import FranchiseRepository
from franchises.infrastructure.api.middleware import PathScopedCORSMiddleware
from franchises.infrastructure.api.routes import router as franchise_router
from franchises.infrastructure.api.schemas import MessageResponse
from franchises.infrastructure.bootstrap import franchise_repository
from franchises.infrastructure.config import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    repository: FranchiseRepository | None = None,
) -> FastAPI:
    """Build the API around ``repository`` (defaults to the configured store)."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.api_title,
        description="API for managing franchises, branches, and products",
    )
    app.state.franchise_repository = repository or franchise_repository(settings)

    app.add_middleware(
        PathScopedCORSMiddleware,
        path_prefix=franchise_router.prefix,
        allow_origins=settings.cors_origin_list,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
        max_age=3600,
    )

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
        logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Document store unavailable"},
        )

    @app.get("/", response_model=MessageResponse)
    def home():
        return {
            "message": "Welcome to the Franchises API! "
            "Access /franchises for the main API endpoints."
        }

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    app.include_router(franchise_router)
    return app
