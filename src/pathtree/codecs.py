"""Content codecs for file kinds.

A file node owns one codec. The codec turns backend bytes into the kind's
content model and back, and supplies the content written by ``create()``.
Navigation and I/O stay on the node; only the format lives here.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import yaml

__all__ = ["CodecError", "ContentCodec", "BytesCodec", "JsonCodec", "YamlCodec"]

logger = logging.getLogger(__name__)


class CodecError(ValueError):
    """Backend bytes could not be decoded by a codec."""

    pass


class ContentCodec:
    """Base codec: content is the raw backend bytes."""

    def empty(self) -> Any:
        """Content written when a file is created."""
        return b""

    def encode(self, contents: Any) -> bytes:
        """Serialize content for the backend."""
        return contents

    def decode(self, data: bytes) -> Any:
        """Deserialize backend bytes."""
        return data


class BytesCodec(ContentCodec):
    """Raw byte content that also accepts text when writing.

    Reads always return the backend bytes untouched. Strings are encoded
    with the configured encoding before they are written.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def encode(self, contents: str | bytes) -> bytes:
        if isinstance(contents, str):
            return contents.encode(self.encoding)
        return bytes(contents)


def _as_mapping(value: Any, fmt: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        logger.debug("Ignoring %s document of type %s", fmt, type(value).__name__)
        return {}
    return value


class JsonCodec(ContentCodec):
    """Structured content stored as JSON.

    Content that does not decode to a JSON object (empty, ``null``,
    malformed, or a top-level list or scalar) reads as an empty mapping.
    """

    def empty(self) -> dict[str, Any]:
        return {}

    def encode(self, contents: dict[str, Any]) -> bytes:
        return json.dumps(contents).encode("utf-8")

    def decode(self, data: bytes) -> dict[str, Any]:
        if not data.strip():
            return {}
        try:
            value = json.loads(data)
        except ValueError as e:
            logger.debug("Malformed JSON content: %s", e)
            return {}
        return _as_mapping(value, "JSON")


class YamlCodec(ContentCodec):
    """Structured content stored as YAML.

    A document that is not a mapping reads as an empty mapping. Malformed
    YAML raises ``CodecError``.
    """

    def empty(self) -> dict[str, Any]:
        return {}

    def encode(self, contents: dict[str, Any]) -> bytes:
        return yaml.safe_dump(contents, sort_keys=False).encode("utf-8")

    def decode(self, data: bytes) -> dict[str, Any]:
        try:
            value = yaml.safe_load(data)
        except yaml.YAMLError as e:
            raise CodecError(str(e)) from e
        return _as_mapping(value, "YAML")
