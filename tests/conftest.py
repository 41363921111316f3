"""Shared test fixtures."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from pathtree.context import TreeContext
from pathtree.filesystem import MemoryFilesystem
from pathtree.model.base import Base
from pathtree.registry import FileTypeRegistry

BASE_DIRECTORY = "/test"


# ============================================================================
# Backend Fixtures
# ============================================================================


@pytest.fixture
def memory_fs() -> MemoryFilesystem:
    """Create an in-memory backend holding an empty base directory."""
    fs = MemoryFilesystem()
    fs.mkdir(BASE_DIRECTORY)
    return fs


@pytest.fixture
def file_types() -> FileTypeRegistry:
    """Create a registry with the built-in rules."""
    return FileTypeRegistry()


@pytest.fixture
def base(memory_fs: MemoryFilesystem, file_types: FileTypeRegistry) -> Base:
    """Create a tree rooted at the base directory of the memory backend."""
    return Base(BASE_DIRECTORY, memory_fs, file_types)


@pytest.fixture
def populated_fs(memory_fs: MemoryFilesystem) -> MemoryFilesystem:
    """Memory backend with a small tree below the base directory.

    /test/docs/readme.txt   ("hello")
    /test/docs/data.json    ('{"a": "b"}')
    /test/empty/
    """
    memory_fs.mkdir("/test/docs")
    memory_fs.mkdir("/test/empty")
    memory_fs.file_put_contents("/test/docs/readme.txt", b"hello")
    memory_fs.file_put_contents("/test/docs/data.json", b'{"a": "b"}')
    return memory_fs


# ============================================================================
# Mock Fixtures
# ============================================================================


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock backend where nothing exists.

    The mock tracks all backend calls without holding any state.
    """
    fs = MagicMock()
    fs.file_exists.return_value = False
    fs.is_dir.return_value = False
    fs.is_file.return_value = False
    fs.is_link.return_value = False
    fs.is_writable.return_value = True
    return fs


@pytest.fixture
def mock_parent(mock_filesystem: MagicMock, file_types: FileTypeRegistry) -> MagicMock:
    """Create a mock directory parent at /root/parent."""
    parent = MagicMock()
    parent.get_context.return_value = TreeContext(
        filesystem=mock_filesystem, file_types=file_types
    )
    parent.get_path.return_value = "parent"
    parent.get_full_path.return_value = "/root/parent"
    parent.is_read_only.return_value = False
    return parent
