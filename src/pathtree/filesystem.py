"""Filesystem backends for the path model.

This module provides the two interchangeable implementations of the
Filesystem protocol. RealFilesystem wraps standard library operations on
the local disk; MemoryFilesystem keeps the whole tree in memory and enables
testing without real I/O operations.
"""

from __future__ import annotations

import fnmatch
import glob as globlib
import logging
import os
import posixpath
import shutil
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Maximum number of links followed while resolving one path
MAX_LINK_DEPTH = 40


class RealFilesystem:
    """Production filesystem implementation.

    Wraps standard library os, shutil and glob operations.
    Satisfies the Filesystem protocol structurally. OSError is logged and
    reported as False or None, never raised.
    """

    def is_dir(self, path: str) -> bool:
        """Check if a path is a directory."""
        return os.path.isdir(path)

    def is_file(self, path: str) -> bool:
        """Check if a path is a regular file."""
        return os.path.isfile(path)

    def is_link(self, path: str) -> bool:
        """Check if a path is a symbolic link."""
        return os.path.islink(path)

    def file_exists(self, path: str) -> bool:
        """Check if a path exists."""
        return os.path.exists(path)

    def is_writable(self, path: str) -> bool:
        """Check if a path is writable."""
        return os.access(path, os.W_OK)

    def filesize(self, path: str) -> int | None:
        """Get the size of a file."""
        try:
            return os.path.getsize(path)
        except OSError as e:
            logger.debug("filesize failed for %s: %s", path, e)
            return None

    def mkdir(self, path: str, mode: int = 0o777, recursive: bool = False) -> bool:
        """Create a directory."""
        try:
            if recursive:
                os.makedirs(path, mode)
            else:
                os.mkdir(path, mode)
        except OSError as e:
            logger.debug("mkdir failed for %s: %s", path, e)
            return False
        return True

    def rmdir(self, path: str) -> bool:
        """Remove an empty directory."""
        try:
            os.rmdir(path)
        except OSError as e:
            logger.debug("rmdir failed for %s: %s", path, e)
            return False
        return True

    def unlink(self, path: str) -> bool:
        """Remove a file or link."""
        try:
            os.unlink(path)
        except OSError as e:
            logger.debug("unlink failed for %s: %s", path, e)
            return False
        return True

    def symlink(self, target: str, link: str) -> bool:
        """Create a symbolic link."""
        try:
            os.symlink(target, link)
        except OSError as e:
            logger.debug("symlink failed for %s -> %s: %s", link, target, e)
            return False
        return True

    def readlink(self, path: str) -> str | None:
        """Read the target of a symbolic link."""
        try:
            return os.readlink(path)
        except OSError as e:
            logger.debug("readlink failed for %s: %s", path, e)
            return None

    def scandir(self, path: str) -> list[str] | None:
        """List a directory, including the self and parent markers."""
        try:
            names = os.listdir(path)
        except OSError as e:
            logger.debug("scandir failed for %s: %s", path, e)
            return None
        return sorted([".", "..", *names])

    def copy(self, source: str, destination: str) -> bool:
        """Copy a single file."""
        try:
            shutil.copyfile(source, destination)
        except OSError as e:
            logger.debug("copy failed for %s -> %s: %s", source, destination, e)
            return False
        return True

    def glob(self, pattern: str, sort: bool = True) -> list[str] | None:
        """Expand a wildcard pattern."""
        try:
            matches = globlib.glob(pattern)
        except OSError as e:
            logger.debug("glob failed for %s: %s", pattern, e)
            return None
        return sorted(matches) if sort else matches

    def file_get_contents(self, path: str) -> bytes | None:
        """Read the contents of a file."""
        try:
            with open(path, "rb") as handle:
                return handle.read()
        except OSError as e:
            logger.debug("read failed for %s: %s", path, e)
            return None

    def file_put_contents(self, path: str, data: bytes, append: bool = False) -> bool:
        """Write the contents of a file."""
        try:
            with open(path, "ab" if append else "wb") as handle:
                handle.write(data)
        except OSError as e:
            logger.debug("write failed for %s: %s", path, e)
            return False
        return True


@dataclass
class MemoryEntry:
    """A single entry held by MemoryFilesystem.

    Attributes:
        kind: One of "dir", "file" or "link".
        mode: Permission bits.
        content: File content (files only).
        target: Link text (links only).
    """

    kind: str
    mode: int = 0o777
    content: bytes = b""
    target: str = ""


class MemoryFilesystem:
    """In-memory filesystem implementation.

    Entries are keyed by normalized absolute path and kept in insertion
    order, which is the order unsorted glob results come back in. Links
    are followed for every component except where noted.
    Satisfies the Filesystem protocol structurally.
    """

    def __init__(self) -> None:
        """Initialize with an empty root directory."""
        self._entries: dict[str, MemoryEntry] = {"/": MemoryEntry(kind="dir")}

    @staticmethod
    def _normalize(path: str) -> str:
        path = posixpath.normpath("/" + path.lstrip("/"))
        # normpath keeps a leading double slash
        return "/" + path.lstrip("/")

    def _resolve(self, path: str, follow_last: bool = True) -> str | None:
        """Resolve links in a path.

        Args:
            path: Path to resolve.
            follow_last: Also follow a link in the final component.

        Returns:
            The resolved path, or None when a link loop is met. Missing
            components are kept as written, so the result may lie below a
            directory that does not exist.
        """
        parts = [p for p in self._normalize(path).split("/") if p]
        resolved = "/"
        depth = 0
        while parts:
            part = parts.pop(0)
            candidate = posixpath.join(resolved, part)
            entry = self._entries.get(candidate)
            if entry is not None and entry.kind == "link" and (parts or follow_last):
                depth += 1
                if depth > MAX_LINK_DEPTH:
                    return None
                target = posixpath.join(resolved, entry.target)
                parts = [p for p in self._normalize(target).split("/") if p] + parts
                resolved = "/"
                continue
            resolved = candidate
        return resolved

    def _entry(self, path: str, follow_last: bool = True) -> MemoryEntry | None:
        resolved = self._resolve(path, follow_last)
        if resolved is None:
            return None
        return self._entries.get(resolved)

    def _children(self, path: str) -> list[str]:
        prefix = path.rstrip("/") + "/"
        return [
            key[len(prefix):]
            for key in self._entries
            if key != "/" and key.startswith(prefix) and "/" not in key[len(prefix):]
        ]

    def _parent_is_dir(self, path: str) -> bool:
        parent = self._entry(posixpath.dirname(self._normalize(path)))
        return parent is not None and parent.kind == "dir"

    def is_dir(self, path: str) -> bool:
        """Check if a path is a directory."""
        entry = self._entry(path)
        return entry is not None and entry.kind == "dir"

    def is_file(self, path: str) -> bool:
        """Check if a path is a regular file."""
        entry = self._entry(path)
        return entry is not None and entry.kind == "file"

    def is_link(self, path: str) -> bool:
        """Check if a path is a symbolic link."""
        entry = self._entry(path, follow_last=False)
        return entry is not None and entry.kind == "link"

    def file_exists(self, path: str) -> bool:
        """Check if a path exists."""
        return self._entry(path) is not None

    def is_writable(self, path: str) -> bool:
        """Check if a path is writable."""
        entry = self._entry(path)
        return entry is not None and bool(entry.mode & 0o200)

    def filesize(self, path: str) -> int | None:
        """Get the size of a file."""
        entry = self._entry(path)
        if entry is None or entry.kind != "file":
            return None
        return len(entry.content)

    def mkdir(self, path: str, mode: int = 0o777, recursive: bool = False) -> bool:
        """Create a directory."""
        resolved = self._resolve(path, follow_last=False)
        if resolved is None or resolved in self._entries:
            return False
        parent = posixpath.dirname(resolved)
        if not self.file_exists(parent):
            if not recursive or not self.mkdir(parent, mode, recursive=True):
                return False
        if not self.is_dir(parent):
            return False
        self._entries[resolved] = MemoryEntry(kind="dir", mode=mode)
        return True

    def rmdir(self, path: str) -> bool:
        """Remove an empty directory."""
        resolved = self._resolve(path, follow_last=False)
        if resolved is None or resolved == "/":
            return False
        entry = self._entries.get(resolved)
        if entry is None or entry.kind != "dir" or self._children(resolved):
            return False
        del self._entries[resolved]
        return True

    def unlink(self, path: str) -> bool:
        """Remove a file or link."""
        resolved = self._resolve(path, follow_last=False)
        entry = self._entries.get(resolved) if resolved else None
        if entry is None or entry.kind == "dir":
            return False
        del self._entries[resolved]
        return True

    def symlink(self, target: str, link: str) -> bool:
        """Create a symbolic link."""
        resolved = self._resolve(link, follow_last=False)
        if resolved is None or resolved in self._entries or not self._parent_is_dir(resolved):
            return False
        self._entries[resolved] = MemoryEntry(kind="link", target=target)
        return True

    def readlink(self, path: str) -> str | None:
        """Read the target of a symbolic link."""
        entry = self._entry(path, follow_last=False)
        if entry is None or entry.kind != "link":
            return None
        return entry.target

    def scandir(self, path: str) -> list[str] | None:
        """List a directory, including the self and parent markers."""
        resolved = self._resolve(path)
        if resolved is None or not self.is_dir(resolved):
            return None
        return sorted([".", "..", *self._children(resolved)])

    def copy(self, source: str, destination: str) -> bool:
        """Copy a single file."""
        entry = self._entry(source)
        if entry is None or entry.kind != "file":
            return False
        return self.file_put_contents(destination, entry.content)

    def glob(self, pattern: str, sort: bool = True) -> list[str] | None:
        """Expand a wildcard pattern segment by segment."""
        candidates = ["/"]
        for segment in [p for p in self._normalize(pattern).split("/") if p]:
            matched = []
            for current in candidates:
                if not self.is_dir(current):
                    continue
                resolved = self._resolve(current)
                for name in self._children(resolved):
                    if name.startswith(".") and not segment.startswith("."):
                        continue
                    if fnmatch.fnmatchcase(name, segment):
                        matched.append(posixpath.join(current, name))
            candidates = matched
        if candidates == ["/"]:
            return []
        return sorted(candidates) if sort else candidates

    def file_get_contents(self, path: str) -> bytes | None:
        """Read the contents of a file."""
        entry = self._entry(path)
        if entry is None or entry.kind != "file":
            return None
        return entry.content

    def file_put_contents(self, path: str, data: bytes, append: bool = False) -> bool:
        """Write the contents of a file."""
        resolved = self._resolve(path)
        if resolved is None or not self._parent_is_dir(resolved):
            return False
        entry = self._entries.get(resolved)
        if entry is None:
            self._entries[resolved] = MemoryEntry(kind="file", mode=0o666, content=data)
            return True
        if entry.kind != "file" or not entry.mode & 0o200:
            return False
        entry.content = entry.content + data if append else data
        return True

    def touch(self, path: str) -> bool:
        """Create an empty file if it does not exist."""
        if self.file_exists(path):
            return True
        return self.file_put_contents(path, b"")

    def chmod(self, path: str, mode: int) -> bool:
        """Change the permission bits of an entry."""
        entry = self._entry(path)
        if entry is None:
            return False
        entry.mode = mode
        return True
