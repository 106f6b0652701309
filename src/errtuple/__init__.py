"""errtuple: Go-style (value, error) results for Python.

Public API:
    - run_sync(): Capture the outcome of a zero-argument callable
    - run_async(): Capture how an awaitable settles
    - run(): Dispatch to run_sync() or run_async() by input shape
    - normalize_error(): Turn any failure payload into a canonical error
    - fetch_json(): JSON-over-HTTP request returning a Result
"""

from __future__ import annotations

import logging

from errtuple.config import FetchConfig
from errtuple.errors import (
    ConfigurationError,
    ErrtupleError,
    FetchError,
    InvariantViolationError,
    NormalizedError,
    Thrown,
    throw,
    walk_error_chain,
)
from errtuple.execute import run, run_async, run_sync
from errtuple.fetch import fetch_json
from errtuple.normalize import normalize_error
from errtuple.options import FetchOptions
from errtuple.result import (
    Failure,
    Result,
    ResultTuple,
    Success,
    is_failure,
    is_success,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("errtuple")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("errtuple").addHandler(logging.NullHandler())

__all__ = [
    "ConfigurationError",
    "ErrtupleError",
    "Failure",
    "FetchConfig",
    "FetchError",
    "FetchOptions",
    "InvariantViolationError",
    "NormalizedError",
    "Result",
    "ResultTuple",
    "Success",
    "Thrown",
    "fetch_json",
    "is_failure",
    "is_success",
    "normalize_error",
    "run",
    "run_async",
    "run_sync",
    "throw",
    "walk_error_chain",
]
