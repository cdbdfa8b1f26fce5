"""Pytest configuration and fixtures.

Provides environment isolation and small call-recording test doubles. The
environment fixture is autouse.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from typing import Any

import pytest

# =============================================================================
# Test Doubles
# =============================================================================


@dataclass
class CallRecorder:
    """Callable test double that records every call it receives.

    Returns ``return_value`` when set, otherwise echoes its single positional
    argument (or the tuple of them).
    """

    return_value: Any = None
    calls: list[tuple[Any, ...]] = field(default_factory=list)

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        if self.return_value is not None:
            return self.return_value
        return args[0] if len(args) == 1 else args

    @property
    def call_count(self) -> int:
        return len(self.calls)


@pytest.fixture
def recorder() -> CallRecorder:
    """A fresh call recorder for verifying whether a callable ran."""
    return CallRecorder()


# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def isolate_resultof_env(request, monkeypatch):
    """Clear RESULTOF_* variables so dev validation starts disabled.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return
    for key in list(os.environ.keys()):
        if key.startswith("RESULTOF_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def dev_validation(monkeypatch):
    """Enable development validation for the duration of a test."""
    monkeypatch.setenv("RESULTOF_VALIDATE", "1")
