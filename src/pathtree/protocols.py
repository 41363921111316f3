"""Protocol definitions for core abstractions.

This module defines abstract interfaces (Protocols) for the collaborators
the path model depends on:
- Filesystem: the storage backend every node delegates I/O to
- GlobParent: the minimal capability a glob node needs from its parent

All concrete implementations satisfy these protocols structurally (duck typing).
Backends never raise for ordinary I/O failures; they report failure with
False (for boolean operations) or None (for value-returning operations).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathtree.model.base import Base


@runtime_checkable
class Filesystem(Protocol):
    """Protocol for storage backend operations.

    Every path argument is an absolute backend path using ``/`` separators.
    """

    def is_dir(self, path: str) -> bool:
        """Check if a path is a directory (following links).

        Args:
            path: Path to check.

        Returns:
            True if path is a directory, False otherwise.
        """
        ...

    def is_file(self, path: str) -> bool:
        """Check if a path is a regular file (following links).

        Args:
            path: Path to check.

        Returns:
            True if path is a file, False otherwise.
        """
        ...

    def is_link(self, path: str) -> bool:
        """Check if a path is a symbolic link.

        Args:
            path: Path to check.

        Returns:
            True if the last component of path is a link.
        """
        ...

    def file_exists(self, path: str) -> bool:
        """Check if a path exists (following links).

        Args:
            path: Path to check.

        Returns:
            True if path exists, False otherwise.
        """
        ...

    def is_writable(self, path: str) -> bool:
        """Check if a path exists and is writable.

        Args:
            path: Path to check.

        Returns:
            True if writable, False otherwise.
        """
        ...

    def filesize(self, path: str) -> int | None:
        """Get the size of a file in bytes.

        Args:
            path: Path to the file.

        Returns:
            Size in bytes, or None on failure.
        """
        ...

    def mkdir(self, path: str, mode: int = 0o777, recursive: bool = False) -> bool:
        """Create a directory.

        Args:
            path: Path to create.
            mode: Permission bits for the new directory.
            recursive: Create missing intermediate directories.

        Returns:
            True on success, False on failure.
        """
        ...

    def rmdir(self, path: str) -> bool:
        """Remove an empty directory.

        Args:
            path: Path to remove.

        Returns:
            True on success, False on failure.
        """
        ...

    def unlink(self, path: str) -> bool:
        """Remove a file or symbolic link.

        Args:
            path: Path to remove.

        Returns:
            True on success, False on failure.
        """
        ...

    def symlink(self, target: str, link: str) -> bool:
        """Create a symbolic link at link pointing to target.

        Args:
            target: Path the link points to.
            link: Path of the link to create.

        Returns:
            True on success, False on failure.
        """
        ...

    def readlink(self, path: str) -> str | None:
        """Read the target of a symbolic link.

        Args:
            path: Path of the link.

        Returns:
            The link text, or None on failure.
        """
        ...

    def scandir(self, path: str) -> list[str] | None:
        """List the entry names of a directory, including ``.`` and ``..``.

        Args:
            path: Path of the directory.

        Returns:
            Sorted entry names, or None on failure.
        """
        ...

    def copy(self, source: str, destination: str) -> bool:
        """Copy a single file.

        Args:
            source: Path of the file to copy.
            destination: Path of the new file.

        Returns:
            True on success, False on failure.
        """
        ...

    def glob(self, pattern: str, sort: bool = True) -> list[str] | None:
        """Expand a wildcard pattern.

        Args:
            pattern: Absolute pattern; wildcards never cross ``/``.
            sort: Sort the matches. Unsorted results use the backend's order.

        Returns:
            Matching absolute paths, or None on failure.
        """
        ...

    def file_get_contents(self, path: str) -> bytes | None:
        """Read the contents of a file.

        Args:
            path: Path of the file.

        Returns:
            File content, or None on failure.
        """
        ...

    def file_put_contents(self, path: str, data: bytes, append: bool = False) -> bool:
        """Write the contents of a file, creating it if needed.

        Args:
            path: Path of the file.
            data: Content to write.
            append: Append to existing content instead of replacing it.

        Returns:
            True on success, False on failure.
        """
        ...


@runtime_checkable
class GlobParent(Protocol):
    """Protocol for nodes that may hold a glob segment below them."""

    def get_filesystem(self) -> Filesystem:
        """Get the backend shared by the tree."""
        ...

    def get_path(self) -> str:
        """Get the path relative to the base."""
        ...

    def get_full_path(self) -> str:
        """Get the absolute backend path."""
        ...

    def get_base(self) -> Base:
        """Get the root of the tree."""
        ...
