"""Route Dependencies — per-request wiring of the task service and tracer.

Invariants:
    - Routes receive collaborators only through these providers
    - Tests replace them via app.dependency_overrides (no monkeypatching of routes)
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.config import get_settings
from todo_api.core.repository_protocols import TaskService
from todo_api.infrastructure.database import get_db
from todo_api.infrastructure.observability import LoggingTracer, NoopTracer, Tracer
from todo_api.infrastructure.task_repository import TaskRepository
from todo_api.services.task_manager import TaskManager

_logging_tracer = LoggingTracer()
_noop_tracer = NoopTracer()


def get_task_service(db: AsyncSession = Depends(get_db)) -> TaskService:
    return TaskManager(TaskRepository(db))


def get_tracer() -> Tracer:
    if get_settings().tracing_enabled:
        return _logging_tracer
    return _noop_tracer
