"""Task Domain — the to-do entity, its priority ordinal, date range and validation rules.

Invariants:
    - Priority is an ordinal: NONE < LOW < MEDIUM < HIGH
    - Dates fields are independently optional; when both are set start <= due
    - Offset-aware dates must stay inside the datetime range when shifted to UTC
    - validate_task() raises InvalidArgumentError with one message per failing field

Design Decisions:
    - Rules expressed as a private pydantic model: field-level errors come back
      keyed by location, the same shape the API reports under "validations"
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import IntEnum

from pydantic import BaseModel, ValidationError, field_validator, model_validator

from todo_api.core.errors import InvalidArgumentError


class Priority(IntEnum):
    """Task priority ordinal, persisted as its integer value."""
    NONE = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3


@dataclass(frozen=True)
class Dates:
    """Start/due pair; either side may be unset."""
    start: datetime | None = None
    due: datetime | None = None


@dataclass
class Task:
    """Activity that needs to be completed within a period of time."""
    id: str
    description: str
    priority: Priority = Priority.NONE
    dates: Dates = field(default_factory=Dates)
    is_done: bool = False


# ─── Validation ──────────────────────────────────────────────────

class _DateRules(BaseModel):
    start: datetime | None = None
    due: datetime | None = None

    @field_validator("start", "due")
    @classmethod
    def representable_in_utc(cls, v: datetime | None) -> datetime | None:
        if v is None or v.tzinfo is None:
            return v
        try:
            v.astimezone(timezone.utc)
        except OverflowError:
            raise ValueError("date is out of range once converted to UTC")
        return v

    @model_validator(mode="after")
    def start_before_due(self):
        if self.start is None or self.due is None:
            return self
        try:
            after = self.start > self.due
        except TypeError:
            raise ValueError("start and due dates must use the same timezone awareness")
        if after:
            raise ValueError("start date should be before due date")
        return self


class _TaskRules(BaseModel):
    description: str
    priority: Priority
    dates: _DateRules

    @field_validator("description")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("cannot be blank")
        return v


def validate_task(description: str, priority: Priority, dates: Dates) -> None:
    """Check task fields, raising InvalidArgumentError on any failure."""
    try:
        _TaskRules(
            description=description,
            priority=priority,
            dates={"start": dates.start, "due": dates.due},
        )
    except ValidationError as e:
        raise InvalidArgumentError(
            "input validation", validations=_field_messages(e),
        ) from e


def _field_messages(exc: ValidationError) -> dict[str, str]:
    """Collapse pydantic errors to {field: message}, first failure per field wins."""
    messages: dict[str, str] = {}
    for e in exc.errors():
        name = str(e["loc"][0]) if e["loc"] else "task"
        if e["type"] == "value_error":
            msg = str(e["ctx"]["error"])
        else:
            msg = e["msg"]
        messages.setdefault(name, msg)
    return messages
