"""
Exception types raised by the DUPR API client.
"""

from typing import Optional

import httpx


class DuprError(Exception):
    """Base class for all DUPR client errors."""


class HttpError(DuprError):
    """The API answered with a non-200 status code."""

    def __init__(self, message: str, status_code: int, response_body: str):
        self.message = message
        self.status_code = status_code
        self.response_body = response_body
        super().__init__(f"{message}, status_code={status_code}, text={response_body}")

    @classmethod
    def from_response(cls, message: str, response: httpx.Response) -> "HttpError":
        return cls(message, response.status_code, response.text)


class AuthenticationFailed(DuprError):
    """No usable credential was available to obtain a token."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Authentication failed: {message}")


class InvalidToken(DuprError):
    """A cached or returned token is structurally malformed."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Invalid token: {message}")


class InvalidInput(DuprError):
    """The caller supplied an unsupported combination of arguments."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Invalid input: {message}")


class NetworkError(DuprError):
    """Transport-level failure (DNS, connection, timeout)."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Network error: {cause}")


class DecodingError(DuprError):
    """The response body does not have the expected JSON shape."""

    def __init__(self, cause: "Exception | str", body: Optional[str] = None):
        self.cause = cause
        self.body = body
        super().__init__(f"Decoding error: {cause}")
