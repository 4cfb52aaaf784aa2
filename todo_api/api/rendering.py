"""Response Rendering — JSON response construction and domain-error to HTTP mapping.

Invariants:
    - Every response carries Content-Type: application/json
    - HTTP status for an error is decided by its ErrorCode, never by its message text
    - Unclassified errors are reported as "internal error"; their text never reaches clients
    - validations only appear in the body for INVALID_ARGUMENT errors that carry them
    - Tracing is best-effort: a failing span never changes the response
"""

import logging
from typing import Any

from fastapi import Response, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from pydantic_core import PydanticSerializationError

from todo_api.core.errors import ErrorCode, classify
from todo_api.infrastructure.observability import Tracer
from todo_api.schemas.task import ErrorResponse

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"


def render_response(content: Any, status_code: int) -> Response:
    """Serialize content to JSON; 500 with an empty body if that fails."""
    try:
        if isinstance(content, BaseModel):
            content = content.model_dump(mode="json")
        return JSONResponse(content=content, status_code=status_code)
    except (PydanticSerializationError, TypeError, ValueError) as e:
        logger.error(f"Response serialization failed: {e}", exc_info=True)
        return Response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            media_type=JSON_MEDIA_TYPE,
        )


def render_error_response(
    message: str, err: BaseException | None, tracer: Tracer,
) -> Response:
    """Map err onto a status code and ErrorResponse body."""
    resp = ErrorResponse(error=message)
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    todo_err = classify(err)
    if todo_err is None:
        resp.error = "internal error"
    else:
        match todo_err.code:
            case ErrorCode.NOT_FOUND:
                status_code = status.HTTP_404_NOT_FOUND
            case ErrorCode.INVALID_ARGUMENT:
                status_code = status.HTTP_400_BAD_REQUEST
                if todo_err.validations:
                    resp.validations = dict(todo_err.validations)
            case _:
                status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    if err is not None:
        _record_error(tracer, err)

    return render_response(
        resp.model_dump(mode="json", exclude_none=True), status_code,
    )


def _record_error(tracer: Tracer, err: BaseException) -> None:
    try:
        with tracer.start_span("rest.render_error_response") as span:
            span.record_error(err)
    except Exception as e:
        logger.warning(f"Failed to record error on span: {e}")
