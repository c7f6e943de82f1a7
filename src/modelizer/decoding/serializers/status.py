"""
Status Error Mapper

Maps unacceptable HTTP status codes to UnacceptableStatusError with a
context-rich message. Only consulted when a serializer is configured with an
acceptable status range.
"""

from collections.abc import Mapping
from typing import Any

from modelizer.decoding.exceptions import UnacceptableStatusError


class StatusErrorMapper:
    """Maps HTTP status codes to status errors."""

    @staticmethod
    def extract_error_message(body: bytes | None) -> str:
        """Extract a short error message from a raw body."""
        if not body:
            return "no body"
        text = body.decode("utf-8", errors="replace").strip()
        return text[:200]

    @staticmethod
    def header(headers: Mapping[str, Any] | None, name: str) -> Any:
        """Case-insensitive header lookup."""
        if not headers:
            return None
        wanted = name.lower()
        for key, value in headers.items():
            if key.lower() == wanted:
                return value
        return None

    @staticmethod
    def is_acceptable(status_code: int, acceptable: tuple[int, int]) -> bool:
        low, high = acceptable
        return low <= status_code <= high

    @staticmethod
    def map_error(
        status_code: int,
        body: bytes | None,
        url: str,
        headers: Mapping[str, Any] | None = None,
    ) -> UnacceptableStatusError:
        """
        Map HTTP status code to an error with context.

        Args:
            status_code: HTTP status code
            body: Raw response body
            url: URL that was called
            headers: Response headers (Retry-After is surfaced for 429)

        Returns:
            UnacceptableStatusError describing the status
        """
        error_msg = StatusErrorMapper.extract_error_message(body)

        if status_code == 400:
            message = f"Bad request for {url}: {error_msg}"
        elif status_code == 401:
            message = f"Unauthorized for {url}: {error_msg}"
        elif status_code == 404:
            message = f"Resource not found for {url}: {error_msg}"
        elif status_code == 429:
            retry_after = StatusErrorMapper.header(headers, "Retry-After")
            message = f"Rate limit exceeded for {url}: {error_msg}"
            if retry_after:
                message += f" (retry after {retry_after}s)"
        elif status_code >= 500:
            message = f"Server error {status_code} for {url}: {error_msg}"
        else:
            message = f"Unacceptable status {status_code} for {url}: {error_msg}"

        return UnacceptableStatusError(message, url=url, status_code=status_code)
