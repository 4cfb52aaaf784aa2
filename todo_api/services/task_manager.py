"""Task Manager — validates task input and delegates persistence to a TaskRepository.

Invariants:
    - create/update never reach the repository with input that fails validate_task()
    - Not-found is reported by the repository as NotFoundError and passed through unchanged
    - Holds no per-request state; safe to share across concurrent requests
"""

import logging

from todo_api.core.repository_protocols import TaskRepository
from todo_api.core.task import Dates, Priority, Task, validate_task

logger = logging.getLogger(__name__)


class TaskManager:
    """Default TaskService implementation."""

    def __init__(self, repo: TaskRepository):
        self._repo = repo

    async def create(
        self, description: str, priority: Priority, dates: Dates,
    ) -> Task:
        validate_task(description, priority, dates)
        task = await self._repo.create(description, priority, dates)
        logger.info("Task created", extra={"task_id": task.id})
        return task

    async def task(self, task_id: str) -> Task:
        return await self._repo.find(task_id)

    async def update(
        self,
        task_id: str,
        description: str,
        priority: Priority,
        dates: Dates,
        is_done: bool,
    ) -> None:
        validate_task(description, priority, dates)
        await self._repo.update(task_id, description, priority, dates, is_done)
        logger.info("Task updated", extra={"task_id": task_id})
