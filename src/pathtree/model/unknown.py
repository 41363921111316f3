"""Placeholder node for a name whose backend kind is not yet known."""

from __future__ import annotations

from pathtree.model.path import Path, RealPath


class Unknown(RealPath):
    """A real path with no kind commitment.

    Produced when a name does not exist on the backend (or is neither a
    directory nor a regular file). Cast it to Directory or a file kind once
    the caller knows what it should be.
    """

    def delete(self, force: bool = False) -> None:
        """Remove a dangling link left at this path, if any.

        Args:
            force: Accepted for parity with the other kinds; unused.
        """
        self.unlink()

    def diff(self, comparison: Path) -> bool:
        """Check if comparison is a different kind of node."""
        return type(comparison) is not type(self)
