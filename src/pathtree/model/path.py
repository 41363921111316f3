"""Base node classes shared by every kind of path.

Path holds the navigation logic common to all nodes: a name, a parent, and
composition of relative and absolute paths from the parent chain.
RealPath adds the behaviour of nodes backed by a real backend entry: strict
name validation, existence, read-only checks, and symbolic links.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from pathtree.errors import InvalidCharactersError, InvalidPathError, PathOperationError

if TYPE_CHECKING:
    from pathtree.context import TreeContext
    from pathtree.model.base import Base
    from pathtree.model.directory import Directory
    from pathtree.protocols import Filesystem
    from pathtree.registry import FileTypeRegistry

logger = logging.getLogger(__name__)

# Characters never allowed in the name of a real path
RESERVED_CHARACTERS = '/%:|"<>?*\\'

# Names that refer to the current and parent directory
RESERVED_NAMES = {".", ".."}


class Path(ABC):
    """A named node with a parent.

    A node's location never changes after construction. The context is
    received from the parent when the node is built and shared by the
    whole tree.
    """

    def __init__(self, parent: Any, name: str) -> None:
        """Initialize the node.

        Args:
            parent: The node this one lives under.
            name: Single path segment.

        Raises:
            InvalidPathError: If the name is not valid for this kind of node.
        """
        self._validate_name(name)
        self._parent = parent
        self._name = name
        self._context = self._context_from(parent)

    @abstractmethod
    def _validate_name(self, name: str) -> None:
        """Reject names this kind of node cannot hold."""
        ...

    def _context_from(self, parent: Any) -> TreeContext:
        return parent.get_context()

    def get_name(self) -> str:
        """Get the segment name of this node."""
        return self._name

    def get_parent(self) -> Any:
        """Get the node this one lives under."""
        return self._parent

    def has_parent(self) -> bool:
        """Check if the node has a parent. Only the base has none."""
        return True

    def get_context(self) -> TreeContext:
        """Get the context shared by the whole tree."""
        return self._context

    def get_base(self) -> Base:
        """Get the root of the tree."""
        return self._parent.get_base()

    def get_filesystem(self) -> Filesystem:
        """Get the backend shared by the tree."""
        return self._context.filesystem

    def get_file_types(self) -> FileTypeRegistry:
        """Get the file type registry shared by the tree."""
        return self._context.file_types

    def get_path(self) -> str:
        """Get the ``/``-joined names from the base to this node.

        The base itself contributes nothing, so the result has no leading
        separator.
        """
        return f"{self._parent.get_path()}/{self._name}".lstrip("/")

    def get_full_path(self) -> str:
        """Get the absolute backend path of this node."""
        return f"{self._parent.get_full_path()}/{self._name}"

    def get_display_path(self) -> str:
        """Path used in error messages: relative, or absolute for the base."""
        return self.get_path() or self.get_full_path()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.get_full_path()!r})"


class RealPath(Path):
    """A node that always has a directory parent and a backend entry slot."""

    _parent: Directory

    def _validate_name(self, name: str) -> None:
        if not name:
            raise InvalidPathError("Path name cannot be empty", operation="validate")
        if name in RESERVED_NAMES:
            raise InvalidPathError("Path name cannot be . or ..", name, operation="validate")
        if any(char in RESERVED_CHARACTERS for char in name):
            raise InvalidCharactersError("Invalid characters in path", name, operation="validate")

    def get_parent(self) -> Directory:
        """Get the directory this node lives in."""
        return self._parent

    def exists(self) -> bool:
        """Check if the backend holds an entry at this path."""
        return self.get_filesystem().file_exists(self.get_full_path())

    def is_read_only(self) -> bool:
        """Check if this node may not be modified.

        True when the parent is read-only, or when the backend entry exists
        and is not writable. Any read-only ancestor makes every descendant
        read-only.
        """
        if self._parent.is_read_only():
            return True
        filesystem = self.get_filesystem()
        full_path = self.get_full_path()
        return filesystem.file_exists(full_path) and not filesystem.is_writable(full_path)

    def is_directory(self) -> bool:
        return False

    def is_file(self) -> bool:
        return False

    def is_link(self) -> bool:
        """Check if the backend entry is a symbolic link."""
        return self.get_filesystem().is_link(self.get_full_path())

    def link_to(self, target: RealPath) -> None:
        """Create this path as a symbolic link pointing at target.

        Args:
            target: Existing node the link points to.

        Raises:
            PathOperationError: If this path exists, the target does not,
                or the backend fails.
        """
        if self.exists():
            raise PathOperationError(
                "Destination of link already exists", self.get_path(), operation="link"
            )

        if not target.exists():
            raise PathOperationError(
                "Target of link does not exist", target.get_path(), operation="link"
            )

        logger.debug("Linking %s to %s", self.get_full_path(), target.get_full_path())
        if not self.get_filesystem().symlink(target.get_full_path(), self.get_full_path()):
            raise PathOperationError(
                "Failed to create link",
                self.get_path(),
                target=target.get_path(),
                operation="link",
            )

    def link_from(self, source: RealPath) -> None:
        """Create source as a symbolic link pointing at this node."""
        source.link_to(self)

    def get_link_target(self) -> Path:
        """Resolve the node this link points to, from the base.

        Raises:
            PathOperationError: If this is not a link or it cannot be read.
        """
        if not self.is_link():
            raise PathOperationError("Path is not a link", self.get_path(), operation="readlink")

        target = self.get_filesystem().readlink(self.get_full_path())
        if target is None:
            raise PathOperationError("Failed to read link", self.get_path(), operation="readlink")

        return self.get_base().with_path(target)

    def unlink(self) -> None:
        """Remove this path if it is a symbolic link.

        Nothing happens when nothing exists at this path.

        Raises:
            PathOperationError: If the path exists but is not a link, or the
                backend fails.
        """
        is_link = self.is_link()
        if not is_link and self.exists():
            raise PathOperationError("Path is not a link", self.get_path(), operation="unlink")

        if not is_link:
            return

        logger.debug("Removing link %s", self.get_full_path())
        if not self.get_filesystem().unlink(self.get_full_path()):
            raise PathOperationError("Failed to remove link", self.get_path(), operation="unlink")

    def __str__(self) -> str:
        return self._name
