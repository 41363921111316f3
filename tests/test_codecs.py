"""Tests for content codecs."""

from __future__ import annotations

import json
import logging

import pytest

from pathtree.codecs import BytesCodec, CodecError, ContentCodec, JsonCodec, YamlCodec


class TestBytesCodec:
    """Tests for raw byte content."""

    def test_encode_string(self) -> None:
        """Test strings are encoded as UTF-8."""
        assert BytesCodec().encode("héllo") == "héllo".encode()

    def test_encode_bytes_passthrough(self) -> None:
        """Test bytes are written unchanged."""
        assert BytesCodec().encode(b"\x00\xff") == b"\x00\xff"

    def test_decode_returns_bytes(self) -> None:
        """Test reads return the backend bytes."""
        assert BytesCodec().decode(b"hello") == b"hello"

    def test_decode_binary(self) -> None:
        """Test bytes that are not valid UTF-8 come back unchanged."""
        data = b"\x89PNG\r\n\x1a\n\xff\xfe\xfd"
        assert BytesCodec().decode(data) == data

    def test_empty(self) -> None:
        """Test new files are empty."""
        assert BytesCodec().empty() == b""


class TestJsonCodec:
    """Tests for JSON content."""

    def test_encode_matches_json_dumps(self) -> None:
        """Test the stored bytes are plain json.dumps output."""
        assert JsonCodec().encode({"a": "b"}) == json.dumps({"a": "b"}).encode()

    def test_decode(self) -> None:
        """Test JSON bytes decode to a mapping."""
        assert JsonCodec().decode(b'{"a": [1, 2]}') == {"a": [1, 2]}

    @pytest.mark.parametrize("data", [b"", b"  \n", b"null"])
    def test_decode_nothing_gives_empty_mapping(self, data: bytes) -> None:
        """Test empty or null content decodes to an empty mapping."""
        assert JsonCodec().decode(data) == {}

    def test_decode_malformed(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test malformed JSON decodes to an empty mapping and is logged."""
        with caplog.at_level(logging.DEBUG, logger="pathtree.codecs"):
            assert JsonCodec().decode(b"{not json") == {}
        assert "Malformed JSON" in caplog.text

    @pytest.mark.parametrize("data", [b"[1, 2]", b'"text"', b"42", b"true"])
    def test_decode_non_mapping(self, data: bytes) -> None:
        """Test a top-level list or scalar decodes to an empty mapping."""
        assert JsonCodec().decode(data) == {}

    def test_empty(self) -> None:
        """Test new JSON files hold an empty mapping."""
        assert JsonCodec().empty() == {}


class TestYamlCodec:
    """Tests for YAML content."""

    def test_encode_keeps_key_order(self) -> None:
        """Test keys are written in insertion order."""
        assert YamlCodec().encode({"b": 1, "a": 2}) == b"b: 1\na: 2\n"

    def test_decode(self) -> None:
        """Test YAML bytes decode to a mapping."""
        assert YamlCodec().decode(b"name: test\nitems:\n  - one\n") == {
            "name": "test",
            "items": ["one"],
        }

    def test_decode_empty(self) -> None:
        """Test empty content decodes to an empty mapping."""
        assert YamlCodec().decode(b"") == {}

    @pytest.mark.parametrize("data", [b"- one\n- two\n", b"just a string\n", b"3\n"])
    def test_decode_non_mapping(self, data: bytes) -> None:
        """Test a document that is not a mapping decodes to an empty mapping."""
        assert YamlCodec().decode(data) == {}

    def test_decode_invalid(self) -> None:
        """Test malformed YAML raises CodecError."""
        with pytest.raises(CodecError):
            YamlCodec().decode(b"key: [unclosed")


class TestContentCodec:
    """Tests for the raw bytes codec."""

    def test_passthrough(self) -> None:
        """Test bytes pass through in both directions."""
        codec = ContentCodec()
        assert codec.encode(b"raw") == b"raw"
        assert codec.decode(b"raw") == b"raw"
        assert codec.empty() == b""
