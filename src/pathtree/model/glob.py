"""Glob nodes: path segments holding wildcard patterns."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pathtree.errors import InvalidCharactersError, PathOperationError
from pathtree.model.path import Path

if TYPE_CHECKING:
    from pathtree.context import TreeContext
    from pathtree.protocols import GlobParent

logger = logging.getLogger(__name__)

# Characters never allowed in a glob segment; wildcards are allowed
GLOB_RESERVED_CHARACTERS = '/%:|"<>'


class Glob(Path):
    """A pattern segment below a directory or another glob.

    A glob never resolves back into a concrete node: every segment added
    below it is another glob, even when it holds no wildcard. Concrete nodes
    come only from expanding the pattern with ``glob()``.
    """

    _parent: GlobParent

    def _validate_name(self, name: str) -> None:
        if not name or any(char in GLOB_RESERVED_CHARACTERS for char in name):
            raise InvalidCharactersError("Invalid characters in path", name, operation="validate")

    def _context_from(self, parent: GlobParent) -> TreeContext:
        return parent.get_base().get_context()

    def get_parent(self) -> GlobParent:
        return self._parent

    def with_path(self, path: str) -> Glob:
        """Append segments below this glob, each becoming a glob.

        Args:
            path: One or more ``/``-separated segments.

        Returns:
            The glob for the last segment, or this glob for an empty path.
        """
        path = path.strip("/")
        if not path:
            return self

        first, _, rest = path.partition("/")
        glob = Glob(self, first)

        if rest:
            return glob.with_path(rest)

        return glob

    def glob(self) -> list[Path]:
        """Expand the pattern against the backend.

        Returns:
            One node per match, resolved from the base so each has its
            concrete kind. Order is the backend's, unsorted.

        Raises:
            PathOperationError: If the backend fails to expand the pattern.
        """
        matches = self.get_filesystem().glob(self.get_full_path(), sort=False)
        if matches is None:
            raise PathOperationError(
                "Failed to glob file path", self.get_display_path(), operation="glob"
            )

        logger.debug("Pattern %s matched %d paths", self.get_full_path(), len(matches))
        base = self.get_base()
        return [base.with_path(match) for match in matches]

    def __str__(self) -> str:
        return self.get_path()
