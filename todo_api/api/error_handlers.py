"""Error Handlers — app-level exception handlers producing the ErrorResponse shape.

Invariants:
    - RequestValidationError (undecodable or mistyped body) → 400 {"error": "invalid request"}
    - Starlette HTTPException (routing misses, wrong method) → its status, {"error": detail}
    - A 400 HTTPException (body bytes FastAPI could not parse) → {"error": "invalid request"}
    - Exception (catch-all) → 500 {"error": "internal error"}, never leaks internal details

Design Decisions:
    - Three-layer handler: validation (Pydantic), HTTP (routing), catch-all (Exception)
    - Bodies built with render_response so content type and shape match route errors
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from todo_api.api.rendering import render_response
from todo_api.schemas.task import ErrorResponse

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Request body could not be decoded into the route's request model."""
        logger.warning(
            f"Invalid request on {request.url.path}: {exc.errors()}",
            extra={"method": request.method, "path": request.url.path},
        )
        return render_response(
            ErrorResponse(error="invalid request").model_dump(exclude_none=True),
            status.HTTP_400_BAD_REQUEST,
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        detail = str(exc.detail)
        if exc.status_code == status.HTTP_400_BAD_REQUEST:
            # FastAPI raises this when the body bytes cannot be parsed (e.g. not UTF-8)
            logger.warning(
                f"Unparseable body on {request.url.path}: {detail}",
                extra={"method": request.method, "path": request.url.path},
            )
            detail = "invalid request"
        response = render_response(
            ErrorResponse(error=detail).model_dump(exclude_none=True),
            exc.status_code,
        )
        if exc.headers:
            response.headers.update(exc.headers)
        return response


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return render_response(
            ErrorResponse(error="internal error").model_dump(exclude_none=True),
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
