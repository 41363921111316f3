"""Registry mapping file name suffixes to file kinds."""

from __future__ import annotations

import importlib
import logging

from pydantic import BaseModel, ConfigDict, Field

from pathtree.errors import InvalidPathError
from pathtree.model.file import BasicFile, File, JsonFile
from pathtree.types import InsertPosition

logger = logging.getLogger(__name__)


class FileTypeRule(BaseModel):
    """A suffix and the file kind used for names ending with it."""

    model_config = ConfigDict(frozen=True)

    suffix: str = Field(min_length=1)
    kind: type[File]

    def matches(self, filename: str) -> bool:
        """Check if filename ends with this rule's suffix."""
        return filename.endswith(self.suffix)


# Rules every new registry starts with
DEFAULT_RULES = (FileTypeRule(suffix=".json", kind=JsonFile),)

# Kind used when no rule matches
DEFAULT_FILE_CLASS: type[File] = BasicFile


def resolve_kind(kind: type[File] | str) -> type[File]:
    """Resolve a file kind given as a class or an import string.

    Args:
        kind: A File subclass, or ``"package.module:ClassName"``
            (``"package.module.ClassName"`` is accepted too).

    Returns:
        The File subclass.

    Raises:
        InvalidPathError: If the kind cannot be imported or is not a File subclass.
    """
    if isinstance(kind, str):
        module_name, sep, class_name = kind.partition(":")
        if not sep:
            module_name, _, class_name = kind.rpartition(".")
        try:
            resolved = getattr(importlib.import_module(module_name), class_name)
        except (ImportError, AttributeError, ValueError) as e:
            raise InvalidPathError(f"Class {kind} does not exist", operation="register") from e
    else:
        resolved = kind

    if not isinstance(resolved, type) or not issubclass(resolved, File):
        raise InvalidPathError(f"Class {kind} does not exist", operation="register")

    return resolved


class FileTypeRegistry:
    """Ordered list of suffix rules.

    Lookup is a linear scan where the first matching suffix wins, not the
    longest one. A more specific suffix such as ``.enc.gz`` must therefore
    sit ahead of ``.gz`` to take precedence.

    One registry is shared by every node of a tree; changes apply to every
    resolution made afterwards.
    """

    def __init__(self, rules: list[FileTypeRule] | None = None) -> None:
        """Initialize the registry.

        Args:
            rules: Starting rules. Defaults to the built-in ``.json`` rule.
        """
        self._rules: list[FileTypeRule] = list(DEFAULT_RULES if rules is None else rules)

    def _index_of(self, suffix: str) -> int | None:
        for index, rule in enumerate(self._rules):
            if rule.suffix == suffix:
                return index
        return None

    def add_type(
        self,
        suffix: str,
        kind: type[File] | str,
        position: InsertPosition = InsertPosition.PREPEND,
    ) -> None:
        """Register a new suffix rule.

        Args:
            suffix: Trailing string of matching file names.
            kind: File kind for matching names.
            position: Put the rule at the front (default) or the back.

        Raises:
            InvalidPathError: If the kind does not resolve, or the suffix is
                already registered.
        """
        rule = FileTypeRule(suffix=suffix, kind=resolve_kind(kind))

        if self._index_of(suffix) is not None:
            raise InvalidPathError(f"Suffix '{suffix}' already set up", operation="register")

        if position == InsertPosition.PREPEND:
            self._rules.insert(0, rule)
        else:
            self._rules.append(rule)
        logger.debug("Registered %s for suffix %r (%s)", rule.kind.__name__, suffix, position.value)

    def replace_type(self, suffix: str, kind: type[File] | str) -> None:
        """Change the kind of a registered suffix, keeping its position.

        Raises:
            InvalidPathError: If the kind does not resolve, or the suffix is
                not registered.
        """
        resolved = resolve_kind(kind)

        index = self._index_of(suffix)
        if index is None:
            raise InvalidPathError(f"Suffix '{suffix}' has not been set up", operation="register")

        self._rules[index] = FileTypeRule(suffix=suffix, kind=resolved)
        logger.debug("Replaced kind for suffix %r with %s", suffix, resolved.__name__)

    def get_file_class_for_name(self, filename: str) -> type[File]:
        """Pick the file kind for a name.

        Returns:
            The kind of the first rule whose suffix ends filename, or
            BasicFile when none match.
        """
        for rule in self._rules:
            if rule.matches(filename):
                return rule.kind
        return DEFAULT_FILE_CLASS

    def list_types(self) -> list[FileTypeRule]:
        """Get the rules in lookup order."""
        return list(self._rules)
