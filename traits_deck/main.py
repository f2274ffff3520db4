from contextlib import asynccontextmanager
from typing import AsyncGenerator
import json

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from traits_deck.api.schemas import ErrorResponse
from traits_deck.api.v1.presentation import router as presentation_router
from traits_deck.api.v1.system import router as system_router
from traits_deck.api.v1.ui import router as ui_router
from traits_deck.api.websocket import particles_endpoint
from traits_deck.core.config import settings
from traits_deck.core.logging import get_logger, setup_logging
from traits_deck.core.observability import metrics_router
from traits_deck.core.storage.sessions import get_session_store
from traits_deck.domain.exceptions import (
    AccordionNotFoundException,
    DomainException,
    SessionNotFoundException,
    SlideNotFoundException,
)

logger = get_logger(__name__)


class CustomJSONResponse(JSONResponse):
    def render(self, content) -> bytes:
        return json.dumps(
            content,
            ensure_ascii=False,
            allow_nan=False,
            indent=None,
            separators=(",", ":"),
            default=jsonable_encoder,
        ).encode("utf-8")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    store = get_session_store()
    logger.info(
        "Starting up Treatable Traits Deck",
        version=settings.version,
        environment=settings.environment,
        slides=len(store.registry),
        navigation_policy=store.policy.value,
    )
    try:
        yield
    finally:
        logger.info("Treatable Traits Deck shut down")


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    # Setup logging first
    setup_logging()

    app = FastAPI(
        title=settings.app_name,
        version=settings.version,
        description="Slide deck on Treatable Traits in interstitial lung disease",
        docs_url="/docs" if not settings.is_production() else None,
        redoc_url="/redoc" if not settings.is_production() else None,
        lifespan=lifespan,
        default_response_class=CustomJSONResponse,
    )

    # Include routers
    app.include_router(system_router)
    app.include_router(presentation_router, prefix="/api/v1")
    app.include_router(ui_router)
    app.include_router(metrics_router)

    # WebSocket endpoint
    app.add_api_websocket_route("/ws/particles", particles_endpoint)

    @app.exception_handler(DomainException)
    async def domain_exception_handler(request: Request, exc: DomainException):
        if isinstance(
            exc,
            (SessionNotFoundException, SlideNotFoundException, AccordionNotFoundException),
        ):
            status_code, error = 404, "not_found"
        else:
            status_code, error = 400, "bad_request"
        logger.info(
            "Domain error",
            error=error,
            detail=str(exc),
            path=str(request.url.path),
        )
        return CustomJSONResponse(
            status_code=status_code,
            content=ErrorResponse(error=error, message=str(exc)).model_dump(),
        )

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception",
            error=str(exc),
            path=str(request.url.path),
            method=request.method,
        )

        return CustomJSONResponse(
            status_code=500,
            content=ErrorResponse(
                error="internal_server_error",
                message="An unexpected error occurred",
            ).model_dump(),
        )

    return app


# Create the application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "traits_deck.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development(),
        log_level=settings.log_level.lower(),
    )
