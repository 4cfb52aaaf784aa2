"""Boundary Protocols — contracts between the HTTP layer, the task service and storage.

Invariants:
    - The HTTP layer depends on TaskService only, never on a concrete service
    - TaskService implementations raise TodoError subclasses for classified failures
    - Implementations are provided via dependency injection (FastAPI Depends)

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
    - Async methods: implementations do IO
"""

from typing import Protocol

from todo_api.core.task import Dates, Priority, Task


class TaskService(Protocol):
    """Capability set consumed by the task routes."""
    async def create(
        self, description: str, priority: Priority, dates: Dates,
    ) -> Task: ...
    async def task(self, task_id: str) -> Task: ...
    async def update(
        self,
        task_id: str,
        description: str,
        priority: Priority,
        dates: Dates,
        is_done: bool,
    ) -> None: ...


class TaskRepository(Protocol):
    """Contract for task persistence — implemented by infrastructure."""
    async def create(
        self, description: str, priority: Priority, dates: Dates,
    ) -> Task: ...
    async def find(self, task_id: str) -> Task: ...
    async def update(
        self,
        task_id: str,
        description: str,
        priority: Priority,
        dates: Dates,
        is_done: bool,
    ) -> None: ...
