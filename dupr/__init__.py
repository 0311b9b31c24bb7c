"""
DUPR API client

An async Python client for the DUPR pickleball rating API: player and club
lookup, paginated search streams and match submission, with cached token
handling for email/password or refresh-token logins.
"""

__version__ = "0.1.0"

from .auth import AuthSession, EmailPassword, RefreshToken, TokenPair, TokenStore

# Main client for easy access
from .client import DuprClient
from .config import Settings
from .errors import (
    AuthenticationFailed,
    DecodingError,
    DuprError,
    HttpError,
    InvalidInput,
    InvalidToken,
    NetworkError,
)
from .http import DuprHTTP
from .pagination import PageStream

__all__ = [
    "Settings",
    "AuthSession",
    "EmailPassword",
    "RefreshToken",
    "TokenPair",
    "TokenStore",
    "DuprHTTP",
    "DuprClient",
    "PageStream",
    "DuprError",
    "HttpError",
    "AuthenticationFailed",
    "InvalidToken",
    "InvalidInput",
    "NetworkError",
    "DecodingError",
]
