"""Directory nodes: listing, creation, copy, delete and child resolution.

Children are never cached. Every listing or lookup asks the backend again,
so the nodes always reflect the backend state at call time.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pathtree.errors import InvalidCharactersError, InvalidPathError, PathOperationError
from pathtree.model.glob import Glob
from pathtree.model.path import Path, RealPath
from pathtree.model.unknown import Unknown

if TYPE_CHECKING:
    from pathtree.model.file import File

logger = logging.getLogger(__name__)

# Permission bits for directories created by the model
DEFAULT_DIRECTORY_MODE = 0o777

# Entries every directory listing contains and the model skips
SELF_AND_PARENT = {".", ".."}


def prepare_destination(target: RealPath) -> Directory:
    """Validate a copy destination and make sure it exists as a directory.

    Args:
        target: Node the caller wants to copy into.

    Returns:
        The target as a Directory, created if it was missing.

    Raises:
        InvalidPathError: If the target is a file.
        PathOperationError: If the target is read-only or cannot be created.
    """
    if target.is_file():
        raise InvalidPathError(
            "Destination should be a directory", target.get_path(), operation="copy"
        )

    if target.is_read_only():
        raise PathOperationError("Destination is read only", target.get_path(), operation="copy")

    destination = Directory.cast_from(target)
    if not destination.exists():
        destination.create()
    return destination


class Directory(RealPath):
    """A real path whose backend entry, if it exists, is a folder."""

    def __init__(self, parent: Directory, name: str) -> None:
        """Initialize the directory node.

        Args:
            parent: Directory this one lives in.
            name: Directory name.

        Raises:
            InvalidPathError: If the name is invalid or the backend entry
                is a file.
        """
        super().__init__(parent, name)
        self._validate_not_file()

    def _validate_not_file(self) -> None:
        if self.get_filesystem().is_file(self.get_full_path()):
            raise InvalidPathError(
                "Path is a file - cannot be used as a directory",
                self.get_display_path(),
                operation="validate",
            )

    @classmethod
    def cast_from(cls, path: Path) -> Directory:
        """Produce a directory node for the same location.

        Args:
            path: Node to cast.

        Returns:
            path itself if it already is a Directory, else a new node.

        Raises:
            InvalidPathError: If path is a file or a glob.
        """
        if not isinstance(path, RealPath):
            raise InvalidPathError(
                "Cannot cast a glob to a directory", path.get_path(), operation="cast"
            )

        if path.is_file():
            raise InvalidPathError(
                "Cannot cast a file to a directory", path.get_path(), operation="cast"
            )

        if isinstance(path, cls):
            return path

        return cls(path.get_parent(), path.get_name())

    def is_directory(self) -> bool:
        return True

    def create(self) -> None:
        """Create the directory and any missing ancestors.

        Raises:
            PathOperationError: If it exists, is read-only, or the backend fails.
        """
        if self.exists():
            raise PathOperationError("Directory exists", self.get_display_path(), operation="create")

        if self.is_read_only():
            raise PathOperationError(
                "Directory is read only", self.get_display_path(), operation="create"
            )

        logger.debug("Creating directory %s", self.get_full_path())
        if not self.get_filesystem().mkdir(
            self.get_full_path(), DEFAULT_DIRECTORY_MODE, recursive=True
        ):
            raise PathOperationError(
                "Failed to create directory", self.get_display_path(), operation="create"
            )

    def copy_to(self, target: RealPath) -> None:
        """Recursively copy the contents of this directory into target.

        Stops at the first failure. Whatever was copied before it stays in
        place.

        Args:
            target: Destination directory (or a node that can become one).

        Raises:
            InvalidPathError: If the target is a file.
            PathOperationError: If the target is read-only or any copy fails.
        """
        destination = prepare_destination(target)
        logger.debug("Copying %s into %s", self.get_full_path(), destination.get_full_path())

        for file in self.get_files():
            file.copy_to(destination)

        for directory in self.get_directories():
            directory.copy_to(destination.directory(directory.get_name()))

    def copy_from(self, source: RealPath) -> None:
        """Copy source into this directory."""
        source.copy_to(self)

    def empty(self, force: bool = False) -> None:
        """Delete every child of this directory.

        Args:
            force: Passed on to each child's delete.
        """
        for path in self.list():
            path.delete(force)

    def is_empty(self) -> bool:
        return not self.list()

    def is_not_empty(self) -> bool:
        return not self.is_empty()

    def delete(self, force: bool = False) -> None:
        """Delete this directory. Nothing happens when it does not exist.

        A symbolic link is unlinked without touching what it points to.

        Args:
            force: Delete the contents of a non-empty directory first.

        Raises:
            PathOperationError: If this is the base, it is read-only, it is
                not empty and force is False, or the backend fails.
        """
        if not self.exists():
            return

        if not self.has_parent():
            raise PathOperationError("Cannot delete the base", operation="delete")

        if self.is_read_only():
            raise PathOperationError(
                "Directory is read only", self.get_display_path(), operation="delete"
            )

        if self.is_link():
            self.unlink()
            return

        if self.is_not_empty() and not force:
            raise PathOperationError(
                "Directory is not empty", self.get_display_path(), operation="delete"
            )

        self.empty(force)

        logger.debug("Deleting directory %s", self.get_full_path())
        if not self.get_filesystem().rmdir(self.get_full_path()):
            raise PathOperationError(
                "Failed to delete directory", self.get_display_path(), operation="delete"
            )

    def list(self) -> list[RealPath]:
        """List every child, resolved to its concrete kind.

        Returns:
            Child nodes in the backend's enumeration order.

        Raises:
            PathOperationError: If the directory does not exist or cannot be read.
        """
        if not self.exists():
            raise PathOperationError(
                "Directory doesn't exist", self.get_display_path(), operation="list"
            )

        names = self.get_filesystem().scandir(self.get_full_path())
        if names is None:
            raise PathOperationError(
                "Failed to read from directory", self.get_display_path(), operation="list"
            )

        return [self.unknown(name) for name in names if name not in SELF_AND_PARENT]

    def get_files(self) -> list[File]:
        return [path for path in self.list() if path.is_file()]

    def get_directories(self) -> list[Directory]:
        return [path for path in self.list() if path.is_directory()]

    def directory(self, name: str) -> Directory:
        """Get a child as a directory, whatever exists there now."""
        return Directory(self, name)

    def file(self, name: str) -> File:
        """Get a child as a file of the kind registered for its name."""
        return self._file_from(Unknown(self, name))

    def unknown(self, name: str) -> RealPath:
        """Resolve a child name to its concrete kind.

        Directories become Directory, regular files become the kind the
        registry picks for the name, anything else stays Unknown.

        Raises:
            InvalidPathError: If the name is not valid for a real path.
        """
        unknown = Unknown(self, name)
        filesystem = self.get_filesystem()

        if filesystem.is_dir(unknown.get_full_path()):
            return Directory.cast_from(unknown)

        if filesystem.is_file(unknown.get_full_path()):
            return self._file_from(unknown)

        return unknown

    def _file_from(self, path: Path) -> File:
        file_class = self.get_file_types().get_file_class_for_name(path.get_name())
        return file_class.cast_from(path)

    def with_path(self, path: str) -> Path:
        """Build the node for a path relative to this directory.

        Leading and trailing separators are ignored, and an empty path gives
        this directory back. A segment holding wildcard characters becomes a
        Glob, and everything below a Glob is a Glob as well.

        Args:
            path: One or more ``/``-separated segments.

        Returns:
            The node for the last segment.

        Raises:
            InvalidPathError: If a segment is invalid, or an intermediate
                segment exists as a file.
        """
        path = path.strip("/")
        if not path:
            return self

        first, _, rest = path.partition("/")

        try:
            node: Path = self.unknown(first)
            if rest:
                node = Directory.cast_from(node)
        except InvalidCharactersError:
            node = Glob(self, first)

        if rest:
            return node.with_path(rest)

        return node

    def with_file(self, path: str) -> File:
        """Build the node for a relative path and cast it to a file kind."""
        return self._file_from(self.with_path(path))

    def with_directory(self, path: str) -> Directory:
        """Build the node for a relative path and cast it to a directory."""
        return Directory.cast_from(self.with_path(path))
