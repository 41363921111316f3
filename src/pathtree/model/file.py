"""File nodes and their content kinds.

File holds the lifecycle shared by every file kind: create, read, write,
delete, copy and cast. Each concrete kind differs only in the codec it owns
and, optionally, the suffixes its names must end with.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from pathtree.codecs import BytesCodec, CodecError, ContentCodec, JsonCodec, YamlCodec
from pathtree.errors import InvalidPathError, PathOperationError
from pathtree.model.directory import Directory, prepare_destination
from pathtree.model.path import Path, RealPath

logger = logging.getLogger(__name__)


class File(RealPath):
    """A real path whose backend entry, if it exists, is not a directory.

    Subclasses set ``codec`` to choose the content model and may set
    ``required_suffixes`` to restrict the names they accept.
    """

    codec: ClassVar[ContentCodec] = ContentCodec()
    required_suffixes: ClassVar[tuple[str, ...]] = ()

    def __init__(self, parent: Directory, name: str) -> None:
        """Initialize the file node.

        Args:
            parent: Directory the file lives in.
            name: File name.

        Raises:
            InvalidPathError: If the name is invalid or the backend entry
                is a directory.
        """
        super().__init__(parent, name)
        self._validate_not_directory()

    def _validate_name(self, name: str) -> None:
        super()._validate_name(name)
        if self.required_suffixes and not name.endswith(self.required_suffixes):
            raise InvalidPathError(
                f"extension must be {' or '.join(self.required_suffixes)}",
                name,
                operation="validate",
            )

    def _validate_not_directory(self) -> None:
        if self.get_filesystem().is_dir(self.get_full_path()):
            raise InvalidPathError(
                "Path is a directory - cannot be used as a file",
                self.get_path(),
                operation="validate",
            )

    @classmethod
    def cast_from(cls, path: Path) -> File:
        """Produce a node of this file kind for the same location.

        Args:
            path: Node to cast.

        Returns:
            path itself if it already is of this kind, else a new node.

        Raises:
            InvalidPathError: If path is a directory or a glob, or its name
                is not valid for this kind.
        """
        if not isinstance(path, RealPath):
            raise InvalidPathError("Cannot cast a glob to a file", path.get_path(), operation="cast")

        if path.is_directory():
            raise InvalidPathError(
                "Cannot cast a directory to a file", path.get_path(), operation="cast"
            )

        if isinstance(path, cls):
            return path

        return cls(path.get_parent(), path.get_name())

    def is_file(self) -> bool:
        return True

    def create(self) -> None:
        """Create the file with the kind's empty content.

        Raises:
            PathOperationError: If the file exists or cannot be written.
        """
        if self.exists():
            raise PathOperationError("File exists", self.get_path(), operation="create")

        self.set_contents(self.codec.empty())

    def get_contents(self) -> Any:
        """Read and decode the file content.

        Raises:
            PathOperationError: If the file does not exist, cannot be read,
                or cannot be decoded.
        """
        if not self.exists():
            raise PathOperationError("File does not exist", self.get_path(), operation="read")

        data = self.get_filesystem().file_get_contents(self.get_full_path())
        if data is None:
            raise PathOperationError("Failed to read from file", self.get_path(), operation="read")

        try:
            return self.codec.decode(data)
        except CodecError as e:
            raise PathOperationError(
                "Failed to decode file", self.get_path(), operation="read"
            ) from e

    def set_contents(self, contents: Any) -> None:
        """Encode and write the file content, replacing what was there.

        The parent directory is created when missing.

        Raises:
            PathOperationError: If the file is read-only or cannot be written.
        """
        self._write(self.codec.encode(contents), append=False)

    def _write(self, data: bytes, append: bool) -> None:
        if self.is_read_only():
            raise PathOperationError("File is read only", self.get_path(), operation="write")

        if not self._parent.exists():
            self._parent.create()

        logger.debug("Writing %d bytes to %s (append=%s)", len(data), self.get_full_path(), append)
        if not self.get_filesystem().file_put_contents(self.get_full_path(), data, append):
            raise PathOperationError("Failed to write to file", self.get_path(), operation="write")

    def delete(self, force: bool = False) -> None:
        """Delete the file. Nothing happens when it does not exist.

        Args:
            force: Delete even when read-only.

        Raises:
            PathOperationError: If read-only and not forced, or the backend fails.
        """
        if not self.exists():
            return

        if self.is_read_only() and not force:
            raise PathOperationError(
                "File cannot be deleted, read only", self.get_path(), operation="delete"
            )

        logger.debug("Deleting file %s", self.get_full_path())
        if not self.get_filesystem().unlink(self.get_full_path()):
            raise PathOperationError("Failed to delete file", self.get_path(), operation="delete")

    def copy_to(self, target: RealPath) -> None:
        """Copy this file into the target directory.

        The target is created when missing.

        Args:
            target: Destination directory (or a node that can become one).

        Raises:
            InvalidPathError: If the target is a file.
            PathOperationError: If the target is read-only or the copy fails.
        """
        destination = prepare_destination(target)
        logger.debug("Copying %s into %s", self.get_full_path(), destination.get_full_path())
        if not self.get_filesystem().copy(
            self.get_full_path(), f"{destination.get_full_path()}/{self._name}"
        ):
            raise PathOperationError(
                "Failed to copy",
                self.get_path(),
                target=destination.get_display_path(),
                operation="copy",
            )

    def get_size(self) -> int | None:
        """Get the size in bytes, or None when the file does not exist."""
        if not self.exists():
            return None
        return self.get_filesystem().filesize(self.get_full_path())


class BasicFile(File):
    """Plain file whose content is raw bytes (text is accepted when writing)."""

    codec = BytesCodec()

    def append_contents(self, contents: str | bytes) -> None:
        """Append to the file content, creating the file when missing.

        Raises:
            PathOperationError: If the file is read-only or cannot be written.
        """
        self._write(self.codec.encode(contents), append=True)


class JsonFile(File):
    """File holding a JSON mapping. Names must end with ``.json``."""

    codec = JsonCodec()
    required_suffixes = (".json",)


class YamlFile(File):
    """File holding a YAML mapping.

    Not registered by default; add it to a registry to resolve ``.yaml``
    and ``.yml`` names to this kind.
    """

    codec = YamlCodec()
    required_suffixes = (".yaml", ".yml")
