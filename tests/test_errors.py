"""TurboException carrier."""

from __future__ import annotations

import copy
import pickle

import pytest

from turbo_response import TurboException

pytestmark = pytest.mark.unit


def test_defaults() -> None:
    exc = TurboException()
    assert exc.message == "An error occurred"
    assert str(exc) == "An error occurred"
    assert exc.has_message
    assert not exc.has_title
    assert not exc.has_error
    assert exc.error is None
    assert exc.stack_trace is None


def test_empty_message_falls_back_to_default() -> None:
    assert TurboException(message="").message == "An error occurred"


def test_fields_are_kept() -> None:
    cause = KeyError("id")
    exc = TurboException(error=cause, title="Lookup", message="Missing id", stack_trace="trace")
    assert exc.error is cause
    assert exc.title == "Lookup"
    assert exc.message == "Missing id"
    assert exc.stack_trace == "trace"
    assert exc.has_title
    assert exc.has_error
    assert str(exc) == "Missing id"


def test_fields_are_read_only() -> None:
    exc = TurboException(title="t")
    with pytest.raises(AttributeError):
        exc.title = "other"  # type: ignore[misc]


def test_is_raisable() -> None:
    with pytest.raises(TurboException, match="nope"):
        raise TurboException(message="nope")


@pytest.mark.parametrize(
    "clone",
    [copy.copy, copy.deepcopy, lambda exc: pickle.loads(pickle.dumps(exc))],
    ids=["copy", "deepcopy", "pickle"],
)
def test_survives_copy_and_pickle(clone) -> None:
    exc = TurboException(error={"code": 404}, title="Lookup", message="Missing id", stack_trace="trace")
    cloned = clone(exc)
    assert type(cloned) is TurboException
    assert cloned.error == {"code": 404}
    assert (cloned.title, cloned.message, cloned.stack_trace) == ("Lookup", "Missing id", "trace")
    assert str(cloned) == "Missing id"


def test_pickle_keeps_defaults() -> None:
    cloned = pickle.loads(pickle.dumps(TurboException()))
    assert cloned.message == "An error occurred"
    assert not cloned.has_title
    assert not cloned.has_error
