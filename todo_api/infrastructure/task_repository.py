"""Task Repository — SQLAlchemy implementation of core TaskRepository.

Invariants:
    - find/update on a missing id raise NotFoundError, never return None
    - Ids that are not valid UUIDs are reported as not found
    - SQLAlchemy errors surface as TodoError(UNKNOWN) with the driver error as __cause__
    - Datetimes read back without tzinfo are treated as UTC (SQLite drops offsets)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.core.errors import ErrorCode, NotFoundError, TodoError
from todo_api.core.task import Dates, Priority, Task
from todo_api.models.task import Task as TaskModel


class TaskRepository:
    """Task persistence bound to one AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def create(
        self, description: str, priority: Priority, dates: Dates,
    ) -> Task:
        row = TaskModel(
            description=description,
            priority=int(priority),
            start_date=_to_utc(dates.start),
            due_date=_to_utc(dates.due),
            is_done=False,
        )
        try:
            self._db.add(row)
            await self._db.commit()
            await self._db.refresh(row)
        except SQLAlchemyError as e:
            await self._db.rollback()
            raise TodoError.wrap(e, ErrorCode.UNKNOWN, "insert task") from e
        return _to_domain(row)

    async def find(self, task_id: str) -> Task:
        key = _parse_id(task_id)
        try:
            result = await self._db.execute(
                select(TaskModel).where(TaskModel.id == key),
            )
        except SQLAlchemyError as e:
            raise TodoError.wrap(e, ErrorCode.UNKNOWN, "select task") from e
        row = result.scalar_one_or_none()
        if row is None:
            raise NotFoundError("Task", task_id)
        return _to_domain(row)

    async def update(
        self,
        task_id: str,
        description: str,
        priority: Priority,
        dates: Dates,
        is_done: bool,
    ) -> None:
        key = _parse_id(task_id)
        try:
            result = await self._db.execute(
                update(TaskModel)
                .where(TaskModel.id == key)
                .values(
                    description=description,
                    priority=int(priority),
                    start_date=_to_utc(dates.start),
                    due_date=_to_utc(dates.due),
                    is_done=is_done,
                    updated_at=datetime.now(timezone.utc),
                ),
            )
            if result.rowcount == 0:
                await self._db.rollback()
                raise NotFoundError("Task", task_id)
            await self._db.commit()
        except SQLAlchemyError as e:
            await self._db.rollback()
            raise TodoError.wrap(e, ErrorCode.UNKNOWN, "update task") from e


def _parse_id(task_id: str) -> uuid.UUID:
    try:
        return uuid.UUID(task_id)
    except ValueError:
        raise NotFoundError("Task", task_id)


def _to_utc(value: datetime | None) -> datetime | None:
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc)
    return value


def _as_utc(value: datetime | None) -> datetime | None:
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _to_domain(row: TaskModel) -> Task:
    return Task(
        id=str(row.id),
        description=row.description,
        priority=Priority(row.priority),
        dates=Dates(start=_as_utc(row.start_date), due=_as_utc(row.due_date)),
        is_done=row.is_done,
    )
