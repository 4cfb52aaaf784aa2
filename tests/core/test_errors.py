"""Error Taxonomy — classification, wrapping and subclass codes."""

from todo_api.core.errors import (
    ErrorCode, InvalidArgumentError, NotFoundError, TodoError, classify,
)


def test_error_code_is_closed_set():
    assert {c.value for c in ErrorCode} == {"unknown", "not_found", "invalid_argument"}


def test_not_found_carries_code_and_resource():
    err = NotFoundError("Task", "abc")
    assert err.code is ErrorCode.NOT_FOUND
    assert err.resource_id == "abc"
    assert "abc" in str(err)
    assert err.validations is None


def test_invalid_argument_carries_validations():
    err = InvalidArgumentError("input validation", {"description": "cannot be blank"})
    assert err.code is ErrorCode.INVALID_ARGUMENT
    assert err.validations == {"description": "cannot be blank"}


def test_default_code_is_unknown():
    assert TodoError("x").code is ErrorCode.UNKNOWN


def test_wrap_keeps_original_as_cause():
    orig = ConnectionError("refused")
    err = TodoError.wrap(orig, ErrorCode.UNKNOWN, "select task")
    assert err.__cause__ is orig
    assert str(err) == "select task: refused"


def test_classify_returns_none_for_plain_errors():
    assert classify(RuntimeError("x")) is None
    assert classify(None) is None


def test_classify_returns_the_error_itself():
    err = NotFoundError("Task", "1")
    assert classify(err) is err


def test_classify_walks_cause_chain():
    inner = InvalidArgumentError("bad")
    middle = RuntimeError("middle")
    middle.__cause__ = inner
    outer = ValueError("outer")
    outer.__cause__ = middle
    assert classify(outer) is inner


def test_classify_stops_on_cycles():
    a = RuntimeError("a")
    b = RuntimeError("b")
    a.__cause__ = b
    b.__cause__ = a
    assert classify(a) is None
