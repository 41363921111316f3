"""Path node model."""

from __future__ import annotations

from .base import Base, ReadOnlyBase
from .directory import Directory
from .file import BasicFile, File, JsonFile, YamlFile
from .glob import Glob
from .path import Path, RealPath
from .unknown import Unknown

__all__ = [
    "Base",
    "BasicFile",
    "Directory",
    "File",
    "Glob",
    "JsonFile",
    "Path",
    "ReadOnlyBase",
    "RealPath",
    "Unknown",
    "YamlFile",
]
