"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from meal_choice.api.account import router as account_router
from meal_choice.api.catalog import router as catalog_router
from meal_choice.api.dashboard import router as dashboard_router
from meal_choice.app_logging import configure_logging
from meal_choice.containers import AppContainer
from meal_choice.services.dashboard import DashboardError, UnknownItemError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(dashboard_router)
    app.include_router(catalog_router)
    app.include_router(account_router)

    @app.exception_handler(UnknownItemError)
    async def unknown_item(request: Request, exc: UnknownItemError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
        )

    @app.exception_handler(DashboardError)
    async def dashboard_conflict(
        request: Request, exc: DashboardError
    ) -> JSONResponse:
        logger.info("Rejected dashboard action", extra={"path": request.url.path})
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)}
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
