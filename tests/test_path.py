"""Tests for the shared node behaviour in Path and RealPath."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from pathtree.errors import InvalidCharactersError, InvalidPathError, PathOperationError
from pathtree.filesystem import MemoryFilesystem
from pathtree.model.base import Base
from pathtree.model.directory import Directory
from pathtree.model.path import RealPath
from pathtree.model.unknown import Unknown
from pathtree.types import ErrorKind


class TestNameValidation:
    """Tests for real path name validation."""

    def test_empty_name(self, mock_parent: MagicMock) -> None:
        """Test an empty name is rejected."""
        with pytest.raises(InvalidPathError, match="Path name cannot be empty"):
            RealPath(mock_parent, "")

    @pytest.mark.parametrize("name", [".", ".."])
    def test_dot_names(self, mock_parent: MagicMock, name: str) -> None:
        """Test the self and parent markers are rejected."""
        with pytest.raises(InvalidPathError, match=r"Path name cannot be \. or \.\."):
            RealPath(mock_parent, name)

    @pytest.mark.parametrize("name", ["a/b", "50%", "c:", "a|b", 'a"b', "<a>", "a?", "*.txt", "a\\b"])
    def test_reserved_characters(self, mock_parent: MagicMock, name: str) -> None:
        """Test every reserved character is rejected."""
        with pytest.raises(InvalidCharactersError) as exc_info:
            RealPath(mock_parent, name)
        assert exc_info.value.kind == ErrorKind.INVALID_ARGUMENT

    @pytest.mark.parametrize("name", ["file.txt", ".hidden", "with space", "a..b", "ünïcode"])
    def test_valid_names(self, mock_parent: MagicMock, name: str) -> None:
        """Test ordinary names are accepted."""
        assert RealPath(mock_parent, name).get_name() == name


class TestPathComposition:
    """Tests for relative and absolute path composition."""

    def test_paths_from_parent(self, mock_parent: MagicMock) -> None:
        """Test paths are joined onto the parent's paths."""
        path = RealPath(mock_parent, "child")
        assert path.get_path() == "parent/child"
        assert path.get_full_path() == "/root/parent/child"
        assert str(path) == "child"

    def test_child_of_base(self, base: Base) -> None:
        """Test a child of the base has no leading separator."""
        path = Unknown(base, "a")
        assert path.get_path() == "a"
        assert path.get_full_path() == "/test/a"

    def test_nested(self, base: Base) -> None:
        """Test relative and full paths of a nested node."""
        node = Unknown(Directory(Directory(base, "a"), "b"), "c")
        assert node.get_path() == "a/b/c"
        assert node.get_full_path() == "/test/a/b/c"
        assert node.get_full_path() == base.get_full_path() + "/" + node.get_path()

    def test_context_from_parent(self, mock_parent: MagicMock) -> None:
        """Test a node shares its parent's context."""
        path = RealPath(mock_parent, "child")
        assert path.get_context() is mock_parent.get_context.return_value
        assert path.get_filesystem() is mock_parent.get_context.return_value.filesystem

    def test_base_from_parent(self, mock_parent: MagicMock) -> None:
        """Test the base is looked up through the parent."""
        assert RealPath(mock_parent, "child").get_base() is mock_parent.get_base.return_value

    def test_has_parent(self, mock_parent: MagicMock) -> None:
        """Test every non-base node has a parent."""
        path = RealPath(mock_parent, "child")
        assert path.has_parent() is True
        assert path.get_parent() is mock_parent

    def test_repr(self, base: Base) -> None:
        """Test repr shows the kind and full path."""
        assert repr(Unknown(base, "a")) == "Unknown('/test/a')"


class TestReadOnly:
    """Tests for read-only propagation."""

    def test_writable(self, mock_parent: MagicMock) -> None:
        """Test a missing node under a writable parent is writable."""
        assert RealPath(mock_parent, "child").is_read_only() is False

    def test_parent_read_only(self, mock_parent: MagicMock, mock_filesystem: MagicMock) -> None:
        """Test a read-only parent makes the child read-only."""
        mock_parent.is_read_only.return_value = True
        assert RealPath(mock_parent, "child").is_read_only() is True
        mock_filesystem.is_writable.assert_not_called()

    def test_unwritable_entry(self, mock_parent: MagicMock, mock_filesystem: MagicMock) -> None:
        """Test an existing entry without write access is read-only."""
        mock_filesystem.file_exists.return_value = True
        mock_filesystem.is_writable.return_value = False
        assert RealPath(mock_parent, "child").is_read_only() is True
        mock_filesystem.is_writable.assert_called_once_with("/root/parent/child")

    def test_missing_entry_not_checked(
        self, mock_parent: MagicMock, mock_filesystem: MagicMock
    ) -> None:
        """Test writability is only asked for existing entries."""
        mock_filesystem.is_writable.return_value = False
        assert RealPath(mock_parent, "child").is_read_only() is False

    def test_read_only_ancestor(self, base: Base, memory_fs: MemoryFilesystem) -> None:
        """Test an unwritable directory makes every descendant read-only."""
        memory_fs.mkdir("/test/a/b", recursive=True)
        memory_fs.chmod("/test/a", 0o555)

        node = base.with_path("a/b/c")
        assert node.is_read_only() is True
        assert base.with_path("x").is_read_only() is False


class TestLinks:
    """Tests for symbolic link operations."""

    def test_link_to(self, base: Base, memory_fs: MemoryFilesystem) -> None:
        """Test creating a link to an existing node."""
        memory_fs.mkdir("/test/target")
        link = Unknown(base, "link")

        link.link_to(base.directory("target"))

        assert link.is_link() is True
        assert memory_fs.readlink("/test/link") == "/test/target"

    def test_link_from(self, base: Base, memory_fs: MemoryFilesystem) -> None:
        """Test link_from creates the link at the source."""
        memory_fs.mkdir("/test/target")

        base.directory("target").link_from(Unknown(base, "link"))

        assert memory_fs.is_link("/test/link") is True

    def test_link_destination_exists(self, base: Base, memory_fs: MemoryFilesystem) -> None:
        """Test linking onto an existing path is rejected."""
        memory_fs.mkdir("/test/target")
        memory_fs.mkdir("/test/link")

        with pytest.raises(PathOperationError, match=r"Destination of link already exists \(link\)"):
            Unknown(base, "link").link_to(base.directory("target"))

    def test_link_target_missing(self, base: Base) -> None:
        """Test linking to a missing node is rejected."""
        with pytest.raises(PathOperationError, match=r"Target of link does not exist \(target\)"):
            Unknown(base, "link").link_to(Unknown(base, "target"))

    def test_link_backend_failure(
        self, base: Base, memory_fs: MemoryFilesystem, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test a backend failure while linking is reported with both paths."""
        memory_fs.mkdir("/test/target")
        monkeypatch.setattr(memory_fs, "symlink", lambda target, link: False)

        with pytest.raises(PathOperationError, match=r"Failed to create link \(link -> target\)"):
            Unknown(base, "link").link_to(base.directory("target"))

    def test_get_link_target(self, base: Base, memory_fs: MemoryFilesystem) -> None:
        """Test resolving a link to the node it points to."""
        memory_fs.mkdir("/test/dir")
        memory_fs.file_put_contents("/test/dir/data.json", b"{}")
        memory_fs.symlink("/test/dir/data.json", "/test/alias")

        target = base.with_path("alias").get_link_target()

        assert target.get_path() == "dir/data.json"
        assert type(target).__name__ == "JsonFile"

    def test_get_link_target_not_a_link(self, base: Base) -> None:
        """Test resolving a regular node is rejected."""
        with pytest.raises(PathOperationError, match="Path is not a link"):
            Unknown(base, "a").get_link_target()

    def test_unlink(self, base: Base, memory_fs: MemoryFilesystem) -> None:
        """Test unlink removes the link only."""
        memory_fs.mkdir("/test/target")
        memory_fs.symlink("/test/target", "/test/link")

        base.with_path("link").unlink()

        assert memory_fs.is_link("/test/link") is False
        assert memory_fs.is_dir("/test/target") is True

    def test_unlink_missing(self, base: Base) -> None:
        """Test unlinking a missing path does nothing."""
        Unknown(base, "missing").unlink()

    def test_unlink_regular_entry(self, base: Base, memory_fs: MemoryFilesystem) -> None:
        """Test unlinking something that is not a link is rejected."""
        memory_fs.mkdir("/test/dir")
        with pytest.raises(PathOperationError, match="Path is not a link"):
            base.directory("dir").unlink()
