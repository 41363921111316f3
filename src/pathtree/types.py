"""Shared enumerations for pathtree."""

from __future__ import annotations

from enum import Enum

__all__ = ["ErrorKind", "InsertPosition"]


class ErrorKind(str, Enum):
    """The two kinds of failure a node operation can report.

    Attributes:
        INVALID_ARGUMENT: Structurally invalid input, detected before any I/O.
        RUNTIME: A precondition failed against backend state, or the backend
            reported an I/O failure.
    """

    INVALID_ARGUMENT = "invalid_argument"
    RUNTIME = "runtime"


class InsertPosition(str, Enum):
    """Where a new suffix rule is placed in the file type registry."""

    PREPEND = "prepend"
    APPEND = "append"
