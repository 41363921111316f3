"""Root nodes anchoring a tree to a backend directory."""

from __future__ import annotations

from pathtree.context import create_context
from pathtree.model.directory import Directory
from pathtree.model.path import Path
from pathtree.protocols import Filesystem
from pathtree.registry import FileTypeRegistry

# Name reported by the root of every tree
BASE_NAME = "/"


class Base(Directory):
    """The root of a tree.

    Owns the context shared by every node below it: the backend and the
    file type registry. It has no parent, its name is ``/`` and its
    relative path is empty.
    """

    def __init__(
        self,
        base_directory: str,
        filesystem: Filesystem | None = None,
        file_types: FileTypeRegistry | None = None,
        read_only: bool = False,
    ) -> None:
        """Initialize the root.

        Args:
            base_directory: Absolute backend path the tree is anchored at.
            filesystem: Backend to use. Defaults to the real disk.
            file_types: Registry to use. Defaults to a fresh registry.
            read_only: Mark the whole tree read-only.

        Raises:
            InvalidPathError: If the base directory is a file.
        """
        self._base_directory = base_directory.rstrip("/")
        self._context = create_context(filesystem, file_types)
        self._read_only = read_only
        self._name = BASE_NAME
        self._parent = None
        self._validate_not_file()

    def get_base(self) -> Base:
        return self

    def get_parent(self) -> None:
        return None

    def has_parent(self) -> bool:
        return False

    def get_path(self) -> str:
        return ""

    def get_full_path(self) -> str:
        return self._base_directory

    def is_read_only(self) -> bool:
        """Check if the tree may not be modified.

        True when the explicit override is set, or when the base directory
        exists and the backend reports it not writable.
        """
        if self._read_only:
            return True
        filesystem = self.get_filesystem()
        return filesystem.file_exists(self._base_directory) and not filesystem.is_writable(
            self._base_directory
        )

    def with_path(self, path: str) -> Path:
        """Build the node for a path below the base.

        An absolute backend path inside the base directory is accepted and
        made relative first.
        """
        prefix = f"{self._base_directory}/"
        if path.startswith(prefix):
            path = path[len(prefix):]

        return super().with_path(path)

    def __str__(self) -> str:
        return BASE_NAME


class ReadOnlyBase(Base):
    """A root whose whole tree is read-only."""

    def __init__(
        self,
        base_directory: str,
        filesystem: Filesystem | None = None,
        file_types: FileTypeRegistry | None = None,
    ) -> None:
        super().__init__(base_directory, filesystem, file_types, read_only=True)
