"""Development validation: opt-in checks on callables that must return results."""

from __future__ import annotations

from typing import Any

import pytest

from resultof import (
    Failure,
    InvariantViolationError,
    Success,
    flat_combine,
    flat_combine_all,
)
from resultof._dev_flags import dev_validate_enabled

pytestmark = pytest.mark.unit


def test_disabled_by_default() -> None:
    assert dev_validate_enabled() is False


@pytest.mark.parametrize(("value", "expected"), [("1", True), ("0", False), ("true", False)])
def test_env_var_must_be_exactly_one(
    monkeypatch: pytest.MonkeyPatch, value: str, expected: bool
) -> None:
    monkeypatch.setenv("RESULTOF_VALIDATE", value)
    assert dev_validate_enabled() is expected


def test_override_takes_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RESULTOF_VALIDATE", "1")
    assert dev_validate_enabled(override=False) is False
    monkeypatch.delenv("RESULTOF_VALIDATE")
    assert dev_validate_enabled(override=True) is True


def test_non_result_passes_through_when_disabled() -> None:
    """Without validation, flat operations hand back whatever the callable returned."""
    assert Success(1).flat_map(lambda v: v + 1) == 2


_FLAT_CALLS: list[tuple[str, Any]] = [
    ("flat_map", lambda: Success(1).flat_map(lambda v: v)),
    ("flat_map_failure", lambda: Failure("e").flat_map_failure(lambda e: e)),
    ("flat_recover", lambda: Failure("e").flat_recover(lambda e: 0)),
    ("flat_combine", lambda: flat_combine(Success(1), Success(2), lambda a, b: a + b)),
    ("flat_combine_all", lambda: flat_combine_all([Success(1)], sum)),
]


@pytest.mark.usefixtures("dev_validation")
@pytest.mark.parametrize(("operation", "call"), _FLAT_CALLS, ids=[c[0] for c in _FLAT_CALLS])
def test_validation_rejects_non_result_returns(operation: str, call: Any) -> None:
    with pytest.raises(InvariantViolationError) as exc:
        call()

    assert exc.value.operation == operation
    assert f"[{operation}]" in str(exc.value)
    assert exc.value.hint


@pytest.mark.usefixtures("dev_validation")
def test_validation_accepts_results() -> None:
    assert Success(1).flat_map(lambda v: Failure(f"e{v}")) == Failure("e1")
    assert flat_combine(Success(1), Success(2), lambda a, b: Success(a + b)) == Success(3)


@pytest.mark.usefixtures("dev_validation")
def test_validation_does_not_affect_short_circuit() -> None:
    """Callables that never run are never validated."""
    assert Failure("e").flat_map(lambda v: v) == Failure("e")
    assert Success(1).flat_recover(lambda e: e) == Success(1)
