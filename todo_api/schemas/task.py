"""Task Schemas — JSON wire types for the /tasks endpoints.

Invariants:
    - Wire Priority accepts exactly "none", "low", "medium", "high"; anything else
      fails decoding (surfaced as 400 "invalid request")
    - Request fields default to zero values; business rules are checked by the service
    - Request text must be encodable as UTF-8 (no lone surrogates), so anything
      the service accepts can be echoed back in a response
    - Conversion to and from core.task types is total and lossless

Design Decisions:
    - Separate from core.task: wire shapes may change without touching the domain
    - str Enum for Priority: serializes to JSON without custom encoders
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, field_validator

from todo_api.core import task as domain


class Priority(str, Enum):
    """Wire representation of core.task.Priority."""
    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    def to_domain(self) -> domain.Priority:
        return _TO_DOMAIN[self]

    @classmethod
    def from_domain(cls, priority: domain.Priority) -> "Priority":
        return _FROM_DOMAIN[priority]


_TO_DOMAIN = {
    Priority.NONE: domain.Priority.NONE,
    Priority.LOW: domain.Priority.LOW,
    Priority.MEDIUM: domain.Priority.MEDIUM,
    Priority.HIGH: domain.Priority.HIGH,
}
_FROM_DOMAIN = {v: k for k, v in _TO_DOMAIN.items()}


class Dates(BaseModel):
    """Start/due pair, ISO-8601 on the wire."""
    start: datetime | None = None
    due: datetime | None = None

    def to_domain(self) -> domain.Dates:
        return domain.Dates(start=self.start, due=self.due)

    @classmethod
    def from_domain(cls, dates: domain.Dates) -> "Dates":
        return cls(start=dates.start, due=dates.due)


class Task(BaseModel):
    """Task as returned to clients."""
    id: str
    description: str
    priority: Priority
    dates: Dates

    @classmethod
    def from_domain(cls, task: domain.Task) -> "Task":
        return cls(
            id=task.id,
            description=task.description,
            priority=Priority.from_domain(task.priority),
            dates=Dates.from_domain(task.dates),
        )


def _utf8_encodable(v: str) -> str:
    try:
        v.encode("utf-8")
    except UnicodeEncodeError:
        raise ValueError("text is not valid unicode")
    return v


class CreateTasksRequest(BaseModel):
    description: str = ""
    priority: Priority = Priority.NONE
    dates: Dates = Field(default_factory=Dates)

    @field_validator("description")
    @classmethod
    def description_encodable(cls, v: str) -> str:
        return _utf8_encodable(v)


class CreateTasksResponse(BaseModel):
    task: Task


class ReadTasksResponse(BaseModel):
    task: Task


class UpdateTasksRequest(BaseModel):
    description: str = ""
    is_done: bool = False
    priority: Priority = Priority.NONE
    dates: Dates = Field(default_factory=Dates)

    @field_validator("description")
    @classmethod
    def description_encodable(cls, v: str) -> str:
        return _utf8_encodable(v)


class ErrorResponse(BaseModel):
    """Error body; validations only present for invalid-argument errors."""
    error: str
    validations: dict[str, str] | None = None
