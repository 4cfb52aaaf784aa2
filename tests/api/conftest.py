"""Route test fixtures — FastAPI client wired to a fake TaskService and a recording tracer.

Invariants:
    - No database: get_task_service is overridden, get_db is never resolved
    - The fake records every call so tests can assert the service was never reached
"""

from contextlib import contextmanager

import pytest
from httpx import ASGITransport, AsyncClient

from todo_api.api.dependencies import get_task_service, get_tracer
from todo_api.core.task import Dates, Priority, Task
from todo_api.main import app


class FakeTaskService:
    """Scriptable TaskService double.

    Set `error` to make the next call raise it, or `result` to control the
    Task returned by create/task.
    """

    def __init__(self):
        self.calls: list[tuple] = []
        self.error: BaseException | None = None
        self.result: Task | None = None

    async def create(self, description, priority, dates):
        self.calls.append(("create", description, priority, dates))
        if self.error:
            raise self.error
        return self.result or Task(
            id="abc-123", description=description,
            priority=priority, dates=dates,
        )

    async def task(self, task_id):
        self.calls.append(("task", task_id))
        if self.error:
            raise self.error
        return self.result or Task(
            id=task_id, description="stored task",
            priority=Priority.LOW, dates=Dates(),
        )

    async def update(self, task_id, description, priority, dates, is_done):
        self.calls.append(("update", task_id, description, priority, dates, is_done))
        if self.error:
            raise self.error


class RecordingSpan:
    def __init__(self, name, tracer):
        self.name = name
        self._tracer = tracer

    def record_error(self, err):
        self._tracer.recorded.append((self.name, err))


class RecordingTracer:
    def __init__(self):
        self.recorded: list[tuple[str, BaseException]] = []
        self.ended: list[str] = []

    @contextmanager
    def start_span(self, name):
        try:
            yield RecordingSpan(name, self)
        finally:
            self.ended.append(name)


@pytest.fixture
def fake_service():
    return FakeTaskService()


@pytest.fixture
def tracer():
    return RecordingTracer()


@pytest.fixture
async def client(fake_service, tracer):
    app.dependency_overrides[get_task_service] = lambda: fake_service
    app.dependency_overrides[get_tracer] = lambda: tracer

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
