"""Opt-in development checks, switched on from the environment."""

from __future__ import annotations

import os

__all__ = ["VALIDATE_ENV_VAR", "dev_validate_enabled"]

VALIDATE_ENV_VAR = "RESULTOF_VALIDATE"


def dev_validate_enabled(*, override: bool | None = None) -> bool:
    """Report whether ``flat_*`` return values should be checked at runtime.

    An explicit ``override`` wins. Without one, the check is on only when
    ``RESULTOF_VALIDATE`` is set to the literal string ``"1"``. Nothing is
    cached, so flipping the variable mid-process (for example with
    ``monkeypatch.setenv``) applies to the next operation.
    """
    if override is not None:
        return bool(override)
    return os.getenv(VALIDATE_ENV_VAR) == "1"
