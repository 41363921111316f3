"""Settings for building a tree from a configuration file."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field

from pathtree.filesystem import MemoryFilesystem, RealFilesystem
from pathtree.model.base import Base, ReadOnlyBase
from pathtree.protocols import Filesystem
from pathtree.registry import FileTypeRegistry
from pathtree.types import InsertPosition

logger = logging.getLogger(__name__)

# Default settings location
CONFIG_DIR = Path.home() / ".pathtree"
CONFIG_FILE = CONFIG_DIR / "config.yaml"

# Environment variable overriding the settings location
CONFIG_ENV_VAR = "PATHTREE_CONFIG"


class FileTypeSetting(BaseModel):
    """A suffix rule as written in a settings file."""

    suffix: str = Field(min_length=1)
    kind: str
    position: InsertPosition = InsertPosition.APPEND


class TreeSettings(BaseModel):
    """Settings for one tree."""

    model_config = ConfigDict(populate_by_name=True)

    base_directory: str = Field(default_factory=os.getcwd, alias="baseDirectory")
    read_only: bool = Field(default=False, alias="readOnly")
    backend: Literal["disk", "memory"] = "disk"
    file_types: list[FileTypeSetting] = Field(default_factory=list, alias="fileTypes")

    @classmethod
    def from_file(cls, path: Path) -> TreeSettings:
        """Load settings from a YAML or JSON file.

        Args:
            path: Settings file. ``.json`` files are parsed as JSON,
                everything else as YAML.

        Returns:
            Parsed TreeSettings.

        Raises:
            FileNotFoundError: If file doesn't exist.
            ValueError: If the content is invalid.
        """
        if not path.exists():
            raise FileNotFoundError(f"Settings file not found: {path}")

        text = path.read_text()
        data = json.loads(text) if path.suffix == ".json" else yaml.safe_load(text)
        return cls.model_validate(data or {})


def get_config_path() -> Path:
    """Get the settings location, honouring the environment override."""
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else CONFIG_FILE


def load_settings(path: Path | None = None) -> TreeSettings:
    """Load settings, falling back to defaults when no file exists.

    Args:
        path: Settings file. Defaults to get_config_path().

    Returns:
        Loaded or default TreeSettings.
    """
    path = path or get_config_path()
    if not path.exists():
        logger.debug("No settings file at %s, using defaults", path)
        return TreeSettings()
    return TreeSettings.from_file(path)


def create_file_types(settings: TreeSettings) -> FileTypeRegistry:
    """Build a registry holding the built-in rules plus configured ones."""
    registry = FileTypeRegistry()
    for setting in settings.file_types:
        registry.add_type(setting.suffix, setting.kind, setting.position)
    return registry


def create_filesystem(settings: TreeSettings) -> Filesystem:
    """Build the backend named by the settings."""
    if settings.backend == "memory":
        return MemoryFilesystem()
    return RealFilesystem()


def create_base(settings: TreeSettings, filesystem: Filesystem | None = None) -> Base:
    """Factory for a configured tree root.

    Args:
        settings: Tree settings.
        filesystem: Backend override (for testing).

    Returns:
        A Base, or a ReadOnlyBase when the settings ask for one.
    """
    backend = filesystem if filesystem is not None else create_filesystem(settings)
    file_types = create_file_types(settings)
    if settings.read_only:
        return ReadOnlyBase(settings.base_directory, backend, file_types)
    return Base(settings.base_directory, backend, file_types)
