"""Tree context for dependency injection.

This module separates object creation from object use. A TreeContext holds
the collaborators shared by every node of one tree: the storage backend and
the file type registry. The base node creates it, and every node receives it
from its parent at construction time, so no node looks anything up globally.

Dependencies are typed using Protocols (abstract interfaces) rather than
concrete implementations, enabling easy substitution of test doubles.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pathtree.protocols import Filesystem

if TYPE_CHECKING:
    from pathtree.registry import FileTypeRegistry


def _default_filesystem() -> Filesystem:
    """Create the default filesystem implementation."""
    from pathtree.filesystem import RealFilesystem
    return RealFilesystem()


def _default_file_types() -> FileTypeRegistry:
    """Create a registry holding only the built-in rules."""
    from pathtree.registry import FileTypeRegistry
    return FileTypeRegistry()


@dataclass
class TreeContext:
    """Container for the collaborators shared by a whole tree.

    The registry is mutable: changes made through it affect every later
    node resolution in the tree.
    """

    filesystem: Filesystem = field(default_factory=_default_filesystem)
    file_types: FileTypeRegistry = field(default_factory=_default_file_types)


def create_context(
    filesystem: Filesystem | None = None,
    file_types: FileTypeRegistry | None = None,
) -> TreeContext:
    """Factory for tree dependencies.

    Args:
        filesystem: Backend to use. Defaults to the real disk.
        file_types: Registry to use. Defaults to a fresh registry.

    Returns:
        Configured TreeContext.
    """
    return TreeContext(
        filesystem=filesystem if filesystem is not None else _default_filesystem(),
        file_types=file_types if file_types is not None else _default_file_types(),
    )
