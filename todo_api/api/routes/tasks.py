"""Task Routes — create, fetch and update tasks over JSON.

Invariants:
    - Exactly three routes: POST /tasks, GET /tasks/{id}, PUT /tasks/{id}
    - {id} only matches the canonical 8-4-4-4-12 hex UUID shape; anything else is a
      routing miss (404) and never reaches a handler
    - Undecodable bodies are rejected by FastAPI before the service is called
      (RequestValidationError → 400 "invalid request", see error_handlers)
    - Service errors are rendered through render_error_response with a fixed,
      client-safe message per route

Design Decisions:
    - UUID shape enforced by a Starlette path convertor instead of a Path(pattern=...)
      parameter, so mismatches are routing misses rather than validation errors
    - Handlers return Response objects directly: status and body come from the
      renderers, FastAPI response_model is documentation only
"""

from fastapi import APIRouter, Depends, Response, status
from starlette.convertors import Convertor, register_url_convertor

from todo_api.api.dependencies import get_task_service, get_tracer
from todo_api.api.rendering import render_error_response, render_response
from todo_api.core.repository_protocols import TaskService
from todo_api.infrastructure.observability import Tracer
from todo_api.schemas.task import (
    CreateTasksRequest,
    CreateTasksResponse,
    ErrorResponse,
    ReadTasksResponse,
    Task,
    UpdateTasksRequest,
)

UUID_REGEX = (
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


class UUIDShapeConvertor(Convertor[str]):
    """Matches UUID-shaped segments and passes them through as text."""
    regex = UUID_REGEX

    def convert(self, value: str) -> str:
        return value

    def to_string(self, value: str) -> str:
        return value


# Must run before the route decorators below compile their paths.
register_url_convertor("uuid_shape", UUIDShapeConvertor())

router = APIRouter(prefix="/tasks", tags=["tasks"])

_ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


@router.post(
    "", response_model=CreateTasksResponse,
    status_code=status.HTTP_201_CREATED, responses=_ERROR_RESPONSES,
)
async def create_task(
    body: CreateTasksRequest,
    service: TaskService = Depends(get_task_service),
    tracer: Tracer = Depends(get_tracer),
) -> Response:
    """Create a task."""
    try:
        task = await service.create(
            body.description, body.priority.to_domain(), body.dates.to_domain(),
        )
    except Exception as e:
        return render_error_response("create failed", e, tracer)

    return render_response(
        CreateTasksResponse(task=Task.from_domain(task)),
        status.HTTP_201_CREATED,
    )


@router.get(
    "/{task_id:uuid_shape}", response_model=ReadTasksResponse,
    responses=_ERROR_RESPONSES,
)
async def read_task(
    task_id: str,
    service: TaskService = Depends(get_task_service),
    tracer: Tracer = Depends(get_tracer),
) -> Response:
    """Find a task by id."""
    try:
        task = await service.task(task_id)
    except Exception as e:
        return render_error_response("find failed", e, tracer)

    return render_response(
        ReadTasksResponse(task=Task.from_domain(task)), status.HTTP_200_OK,
    )


@router.put(
    "/{task_id:uuid_shape}", responses=_ERROR_RESPONSES,
)
async def update_task(
    task_id: str,
    body: UpdateTasksRequest,
    service: TaskService = Depends(get_task_service),
    tracer: Tracer = Depends(get_tracer),
) -> Response:
    """Update a task; responds with an empty object."""
    try:
        await service.update(
            task_id,
            body.description,
            body.priority.to_domain(),
            body.dates.to_domain(),
            body.is_done,
        )
    except Exception as e:
        return render_error_response("update failed", e, tracer)

    return render_response({}, status.HTTP_200_OK)
