"""Tests for JsonBodyDecoder."""

import pytest

from modelizer.decoding import BodyParseError, JsonBodyDecoder
from modelizer.decoding.config import DecoderConfig


class TestJsonBodyDecoder:
    def test_decodes_object(self):
        assert JsonBodyDecoder().decode(b'{"id": 1, "tags": ["a"]}') == {
            "id": 1,
            "tags": ["a"],
        }

    def test_decodes_array(self):
        assert JsonBodyDecoder().decode(b"[1, 2]") == [1, 2]

    @pytest.mark.parametrize(
        "body, expected",
        [(b"42", 42), (b'"text"', "text"), (b"false", False), (b"0", 0)],
    )
    def test_fragments_allowed_by_default(self, body, expected):
        assert JsonBodyDecoder().decode(body) == expected

    @pytest.mark.parametrize("body", [b"42", b'"text"', b"true"])
    def test_fragments_rejected_when_disallowed(self, body):
        decoder = JsonBodyDecoder(DecoderConfig(allow_fragments=False))

        with pytest.raises(BodyParseError, match="fragment"):
            decoder.decode(body)

    @pytest.mark.parametrize("body", [None, b"", b"\n\t "])
    def test_empty_body(self, body):
        with pytest.raises(BodyParseError, match="empty"):
            JsonBodyDecoder().decode(body)

    def test_null_is_no_value(self):
        with pytest.raises(BodyParseError, match="nil"):
            JsonBodyDecoder().decode(b"null")

    def test_malformed_json(self):
        with pytest.raises(BodyParseError, match="invalid JSON") as exc_info:
            JsonBodyDecoder().decode(b"{not json")

        assert exc_info.value.__cause__ is not None

    def test_wrong_encoding(self):
        with pytest.raises(BodyParseError, match="utf-8"):
            JsonBodyDecoder().decode(b'{"name": "\xe9"}')

    def test_configured_encoding(self):
        decoder = JsonBodyDecoder(DecoderConfig(encoding="latin-1"))

        assert decoder.decode(b'{"name": "\xe9"}') == {"name": "é"}
