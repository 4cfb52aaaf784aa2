"""Error Taxonomy — classified exceptions raised by the task service and its repository.

Invariants:
    - Every TodoError carries exactly one ErrorCode
    - validations is only ever set on INVALID_ARGUMENT errors
    - classify() walks the __cause__ chain, never the message text

Design Decisions:
    - Single TodoError base with a code field instead of one class per HTTP status:
      the HTTP layer matches on ErrorCode, subclasses only add constructors
    - Errors from outside the domain (drivers, bugs) stay unclassified; classify()
      returns None for them and the HTTP layer treats them as internal
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Closed set of domain error kinds."""
    UNKNOWN = "unknown"
    NOT_FOUND = "not_found"
    INVALID_ARGUMENT = "invalid_argument"


class TodoError(Exception):
    """Base exception for all classified task errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.UNKNOWN,
        validations: dict[str, str] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.validations = validations

    @classmethod
    def wrap(
        cls, orig: BaseException, code: ErrorCode, message: str,
    ) -> "TodoError":
        """Classify an existing error, keeping it as __cause__."""
        err = cls(message, code)
        err.__cause__ = orig
        return err

    def __str__(self) -> str:
        if self.__cause__ is not None:
            return f"{self.message}: {self.__cause__}"
        return self.message


class NotFoundError(TodoError):
    """Requested resource does not exist."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            f"{resource_type} '{resource_id}' not found", ErrorCode.NOT_FOUND,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class InvalidArgumentError(TodoError):
    """Input rejected by domain validation, optionally with per-field failures."""
    def __init__(
        self, message: str, validations: dict[str, str] | None = None,
    ):
        super().__init__(message, ErrorCode.INVALID_ARGUMENT, validations)


def classify(err: BaseException | None) -> TodoError | None:
    """Return the first TodoError on err or its __cause__ chain, if any."""
    seen: set[int] = set()
    while err is not None and id(err) not in seen:
        if isinstance(err, TodoError):
            return err
        seen.add(id(err))
        err = err.__cause__
    return None
