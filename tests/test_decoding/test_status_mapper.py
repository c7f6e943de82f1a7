"""Tests for StatusErrorMapper."""

import pytest

from modelizer.decoding import UnacceptableStatusError
from modelizer.decoding.serializers import StatusErrorMapper

URL = "https://api.example.test/listings/1"


class TestStatusErrorMapper:
    @pytest.mark.parametrize(
        "status_code, fragment",
        [
            (400, "Bad request"),
            (401, "Unauthorized"),
            (404, "not found"),
            (429, "Rate limit"),
            (503, "Server error 503"),
            (302, "Unacceptable status 302"),
        ],
    )
    def test_message_per_status(self, status_code, fragment):
        error = StatusErrorMapper.map_error(status_code, b"oops", URL)

        assert isinstance(error, UnacceptableStatusError)
        assert fragment in error.message
        assert error.status_code == status_code
        assert error.url == URL

    def test_retry_after_is_reported(self):
        error = StatusErrorMapper.map_error(
            429, None, URL, headers={"Retry-After": "30"}
        )

        assert "retry after 30s" in error.message
        assert "no body" in error.message

    @pytest.mark.parametrize("name", ["Retry-After", "retry-after", "RETRY-AFTER"])
    def test_retry_after_lookup_ignores_case(self, name):
        error = StatusErrorMapper.map_error(429, b"slow down", URL, headers={name: "7"})

        assert "retry after 7s" in error.message

    def test_header_missing(self):
        assert StatusErrorMapper.header({"Content-Type": "text/plain"}, "Retry-After") is None
        assert StatusErrorMapper.header(None, "Retry-After") is None

    def test_long_body_is_truncated(self):
        error = StatusErrorMapper.map_error(500, b"z" * 1000, URL)

        assert error.message.count("z") == 200

    @pytest.mark.parametrize(
        "status_code, expected",
        [(199, False), (200, True), (250, True), (299, True), (300, False)],
    )
    def test_is_acceptable(self, status_code, expected):
        assert StatusErrorMapper.is_acceptable(status_code, (200, 299)) is expected
