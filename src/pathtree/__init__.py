"""Typed, navigable object model over filesystem paths."""

__version__ = "0.1.0"

# Export protocol interfaces and the node model
from pathtree.errors import (
    InvalidCharactersError,
    InvalidPathError,
    PathOperationError,
    PathTreeError,
)
from pathtree.model import (
    Base,
    BasicFile,
    Directory,
    File,
    Glob,
    JsonFile,
    ReadOnlyBase,
    Unknown,
    YamlFile,
)
from pathtree.protocols import Filesystem, GlobParent
from pathtree.registry import FileTypeRegistry

__all__ = [
    "__version__",
    "Base",
    "BasicFile",
    "Directory",
    "File",
    "FileTypeRegistry",
    "Filesystem",
    "Glob",
    "GlobParent",
    "InvalidCharactersError",
    "InvalidPathError",
    "JsonFile",
    "PathOperationError",
    "PathTreeError",
    "ReadOnlyBase",
    "Unknown",
    "YamlFile",
]
