"""JSON body decoder.

Parses response bytes into a plain JSON value. Parsing is delegated to the
standard json module; this class only decides what counts as "no value".
"""

import json
from typing import Any

from modelizer.decoding.config.value_objects import DecoderConfig
from modelizer.decoding.exceptions import BodyParseError
from modelizer.decoding.ports.decoders import IBodyDecoder


class JsonBodyDecoder(IBodyDecoder):
    """Decode a response body as JSON."""

    def __init__(self, config: DecoderConfig | None = None):
        """Initialize decoder.

        Args:
            config: Decoder configuration (fragments policy, text encoding)
        """
        self.config = config or DecoderConfig()

    def decode(self, body: bytes | None) -> Any:
        """Parse body bytes into a JSON value.

        Args:
            body: Raw body bytes

        Returns:
            Parsed JSON value

        Raises:
            BodyParseError: Empty body, undecodable text, invalid JSON,
                a top-level fragment when fragments are disallowed, or null
        """
        if body is None or not body.strip():
            raise BodyParseError("empty response body")

        try:
            text = body.decode(self.config.encoding)
        except UnicodeDecodeError as e:
            raise BodyParseError(
                f"body is not valid {self.config.encoding}: {e}"
            ) from e

        try:
            value = json.loads(text)
        except json.JSONDecodeError as e:
            raise BodyParseError(f"invalid JSON: {e}") from e

        if value is None:
            raise BodyParseError("json parsing returned nil")

        if not self.config.allow_fragments and not isinstance(value, (dict, list)):
            raise BodyParseError(
                f"top-level JSON fragment not allowed, got {type(value).__name__}"
            )

        return value
