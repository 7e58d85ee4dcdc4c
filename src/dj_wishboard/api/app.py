"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from dj_wishboard.api.dj import router as dj_router
from dj_wishboard.api.sessions import router as sessions_router
from dj_wishboard.api.wishes import router as wishes_router
from dj_wishboard.app_logging import configure_logging
from dj_wishboard.containers import AppContainer
from dj_wishboard.domain.errors import NotFound, Unauthorized, WishboardError

_ERROR_STATUS_CODES: tuple[tuple[type[WishboardError], int], ...] = (
    (NotFound, 404),
    (Unauthorized, 403),
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="DJ Wishboard")
    app.state.container = container

    @app.exception_handler(WishboardError)
    async def wishboard_error(request: Request, exc: WishboardError) -> JSONResponse:
        status_code = _status_code_for(exc)
        logger.info(
            "%s %s rejected: %s",
            request.method,
            request.url.path,
            type(exc).__name__,
        )
        return JSONResponse(
            status_code=status_code,
            content={"success": False, "message": str(exc)},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={"success": False, "message": _describe_invalid_request(exc)},
        )

    app.include_router(sessions_router)
    app.include_router(wishes_router)
    app.include_router(dj_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/api/test")
    async def status_overview(request: Request) -> dict[str, object]:
        """Report that the service is up along with collection sizes."""
        state_container: AppContainer = request.app.state.container
        return {
            "message": "DJ Wishboard is running!",
            "sessionsCount": len(state_container.state.sessions),
            "wishesCount": len(state_container.state.wishes),
        }

    public_dir = container.settings.public_dir
    if public_dir is not None:
        if public_dir.is_dir():
            app.mount("/", StaticFiles(directory=public_dir, html=True), name="public")
        else:
            logger.warning("Public directory %s does not exist", public_dir)

    return app


def _status_code_for(exc: WishboardError) -> int:
    for error_type, status_code in _ERROR_STATUS_CODES:
        if isinstance(exc, error_type):
            return status_code
    return 400


def _describe_invalid_request(exc: RequestValidationError) -> str:
    details = []
    for error in exc.errors():
        location = ".".join(
            str(part) for part in error.get("loc", ()) if part not in {"body", "path"}
        )
        message = error.get("msg", "Invalid value")
        details.append(f"{location}: {message}" if location else message)
    return "Invalid request: " + "; ".join(details)
