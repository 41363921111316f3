"""Tests for error types."""

from __future__ import annotations

import pytest

from pathtree.errors import (
    InvalidCharactersError,
    InvalidPathError,
    PathOperationError,
    PathTreeError,
)
from pathtree.types import ErrorKind


class TestPathTreeError:
    """Tests for message rendering."""

    def test_reason_only(self) -> None:
        """Test an error without a path renders the reason alone."""
        error = PathOperationError("Cannot delete the base")
        assert str(error) == "Cannot delete the base"

    def test_reason_and_path(self) -> None:
        """Test the path is appended in parentheses."""
        error = PathOperationError("File exists", "a/b.txt", operation="create")
        assert str(error) == "File exists (a/b.txt)"
        assert error.operation == "create"

    def test_reason_path_and_target(self) -> None:
        """Test copy and link errors render both paths."""
        error = PathOperationError("Failed to copy", "a.txt", target="dest")
        assert str(error) == "Failed to copy (a.txt -> dest)"
        assert error.target == "dest"


class TestErrorKinds:
    """Tests for the two error kinds."""

    def test_invalid_path_is_invalid_argument(self) -> None:
        """Test invalid input is tagged invalid-argument."""
        error = InvalidPathError("Path name cannot be empty")
        assert error.kind == ErrorKind.INVALID_ARGUMENT
        assert isinstance(error, ValueError)

    def test_invalid_characters_is_invalid_path(self) -> None:
        """Test reserved characters are a kind of invalid input."""
        error = InvalidCharactersError("Invalid characters in path", "a*b")
        assert error.kind == ErrorKind.INVALID_ARGUMENT
        assert isinstance(error, InvalidPathError)

    def test_operation_error_is_runtime(self) -> None:
        """Test backend failures are tagged runtime."""
        error = PathOperationError("Failed to write to file", "a.txt")
        assert error.kind == ErrorKind.RUNTIME
        assert isinstance(error, RuntimeError)

    def test_all_errors_share_base(self) -> None:
        """Test a single except clause catches every node error."""
        with pytest.raises(PathTreeError):
            raise InvalidCharactersError("Invalid characters in path", "?")
        with pytest.raises(PathTreeError):
            raise PathOperationError("Directory is not empty", "a")
