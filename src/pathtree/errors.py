"""Error types raised by path nodes.

Every failure is a PathTreeError tagged with an ErrorKind. The structured
fields are the source of truth; the message is rendered from them.
"""

from __future__ import annotations

from pathtree.types import ErrorKind

__all__ = [
    "PathTreeError",
    "InvalidPathError",
    "InvalidCharactersError",
    "PathOperationError",
]


class PathTreeError(Exception):
    """Base error for all node operations.

    Attributes:
        kind: Which of the two error kinds this is.
        reason: Human readable description of what went wrong.
        path: Relative path of the node involved (None when not applicable).
        target: Relative path of the second node for copy/link operations.
        operation: Name of the attempted operation, if known.
    """

    kind: ErrorKind = ErrorKind.RUNTIME

    def __init__(
        self,
        reason: str,
        path: str | None = None,
        target: str | None = None,
        operation: str | None = None,
    ) -> None:
        """Initialize the error.

        Args:
            reason: Description of the failure.
            path: Relative path of the node involved.
            target: Relative path of the destination or link target.
            operation: Name of the attempted operation.
        """
        self.reason = reason
        self.path = path
        self.target = target
        self.operation = operation
        super().__init__(self.render())

    def render(self) -> str:
        """Render the structured fields as a message."""
        if self.path is None:
            return self.reason
        if self.target is None:
            return f"{self.reason} ({self.path})"
        return f"{self.reason} ({self.path} -> {self.target})"


class InvalidPathError(PathTreeError, ValueError):
    """Structurally invalid input: bad name, wrong kind, wrong extension."""

    kind = ErrorKind.INVALID_ARGUMENT


class InvalidCharactersError(InvalidPathError):
    """A name contains characters reserved for its node kind."""

    pass


class PathOperationError(PathTreeError, RuntimeError):
    """A precondition failed against backend state, or the backend failed."""

    kind = ErrorKind.RUNTIME
