"""resultof: typed success/failure values and combinators.

Public API:
    - Result, Success, Failure: the two-variant result type
    - combine(), flat_combine(): fold 2 to 5 results into one
    - combine_all(), flat_combine_all(): fold any number of same-typed results
    - run_or_catch(), catching: turn raised exceptions into Failure values
"""

from __future__ import annotations

import logging

from resultof.catching import catching, run_or_catch
from resultof.combinators import combine, combine_all, flat_combine, flat_combine_all
from resultof.errors import (
    ArityError,
    InvalidResultError,
    InvariantViolationError,
    ResultOfError,
)
from resultof.result import Failure, Result, Success

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("resultof")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("resultof").addHandler(logging.NullHandler())

__all__ = [
    "ArityError",
    "Failure",
    "InvalidResultError",
    "InvariantViolationError",
    "Result",
    "ResultOfError",
    "Success",
    "catching",
    "combine",
    "combine_all",
    "flat_combine",
    "flat_combine_all",
    "run_or_catch",
]
