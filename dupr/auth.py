"""
Authentication and token lifecycle for the DUPR API.
"""

import asyncio
import json
import logging
import os
import time
from enum import Enum
from pathlib import Path
from typing import Optional, Union

import httpx
from jose import JWTError, jwt
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import (
    AuthenticationFailed,
    DecodingError,
    HttpError,
    InvalidToken,
    NetworkError,
)

logger = logging.getLogger(__name__)

REFRESH_PATH = "/auth/v1.0/refresh"
LOGIN_PATH = "/auth/v1.0/login"

# Tokens expiring within this many seconds are treated as already expired
EXPIRY_MARGIN = 60


class EmailPassword(BaseModel):
    """Log in with an account email and password."""

    model_config = ConfigDict(frozen=True)

    email: str
    password: str = Field(repr=False)


class RefreshToken(BaseModel):
    """Authenticate with a previously issued refresh token."""

    model_config = ConfigDict(frozen=True)

    refresh_token: str = Field(repr=False)


Credential = Union[EmailPassword, RefreshToken]


class TokenPair(BaseModel):
    """Access and refresh token pair, serialised as the API names them."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    access_token: str = Field(alias="accessToken", repr=False)
    refresh_token: str = Field(alias="refreshToken", repr=False)


def token_expiry(token: str) -> float:
    """
    Extract the ``exp`` claim of a JWT without verifying its signature.

    Args:
        token: Token in ``header.payload.signature`` form

    Returns:
        Expiry as seconds since the epoch
    """
    if len(token.split(".")) != 3:
        raise InvalidToken("Invalid token format")

    try:
        claims = jwt.get_unverified_claims(token)
    except JWTError as e:
        raise InvalidToken(f"Could not decode token payload: {e}") from e

    exp = claims.get("exp")
    if isinstance(exp, bool) or not isinstance(exp, (int, float)):
        raise InvalidToken("Token payload has no expiry claim")

    return float(exp)


def is_fresh(token: str, now: Optional[float] = None) -> bool:
    """Check that a token is valid for longer than the expiry margin."""
    if now is None:
        now = time.time()
    return token_expiry(token) > now + EXPIRY_MARGIN


class TokenStore:
    """File-backed cache of the last issued token pair."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    expiry_of = staticmethod(token_expiry)

    def load(self) -> Optional[TokenPair]:
        """Load the cached pair; any read or parse failure is a cache miss."""
        if not self.path.exists():
            return None

        try:
            with open(self.path) as f:
                return TokenPair.model_validate(json.load(f))
        except (OSError, ValueError) as e:
            # ValidationError and JSONDecodeError are both ValueErrors
            logger.debug("Ignoring unreadable token cache %s: %s", self.path, e)
            return None

    def save(self, tokens: TokenPair) -> None:
        """Write the pair to disk. Failures are logged, never raised."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            if hasattr(os, "chmod"):
                try:
                    os.chmod(self.path.parent, 0o700)
                except (OSError, NotImplementedError):
                    pass

            with open(self.path, "w") as f:
                json.dump(tokens.model_dump(by_alias=True), f, indent=2)

            if hasattr(os, "chmod"):
                try:
                    os.chmod(self.path, 0o600)
                except (OSError, NotImplementedError):
                    pass
        except OSError as e:
            logger.warning("Could not write token cache %s: %s", self.path, e)

    def clear(self) -> None:
        """Remove the cache file if present."""
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning("Could not remove token cache %s: %s", self.path, e)


class AuthState(str, Enum):
    NO_TOKEN = "no_token"
    HAVE_ACCESS_ONLY = "have_access_only"
    HAVE_BOTH = "have_both"
    FAILED = "failed"


class AuthSession:
    """
    Owns the token state of a single DUPR account.

    Tokens come from, in order: the on-disk cache, a refresh call, or a login
    call. All state transitions run under one lock so concurrent requests on the
    same session never mutate the tokens at the same time.
    """

    def __init__(
        self,
        credential: Optional[Credential],
        client: httpx.AsyncClient,
        token_store: Optional[TokenStore] = None,
    ):
        self.client = client
        self.token_store = token_store

        self._email: Optional[str] = None
        self._password: Optional[str] = None
        self._access_token: Optional[str] = None
        self._refresh_token: Optional[str] = None
        self._failed = False
        self._lock = asyncio.Lock()

        if isinstance(credential, EmailPassword):
            self._email = credential.email
            self._password = credential.password
        elif isinstance(credential, RefreshToken):
            self._refresh_token = credential.refresh_token

    @property
    def cache_tokens(self) -> bool:
        return self.token_store is not None

    @property
    def state(self) -> AuthState:
        if self._failed:
            return AuthState.FAILED
        if self._access_token and self._refresh_token:
            return AuthState.HAVE_BOTH
        if self._access_token:
            return AuthState.HAVE_ACCESS_ONLY
        return AuthState.NO_TOKEN

    async def get_valid_tokens(self) -> TokenPair:
        """Return a usable token pair, refreshing or logging in as needed."""
        async with self._lock:
            try:
                tokens = await self._obtain_tokens()
            except Exception:
                self._failed = True
                raise
            self._failed = False
            return tokens

    async def get_refresh_token(self) -> str:
        """Current refresh token, e.g. for storing in a keyring."""
        tokens = await self.get_valid_tokens()
        return tokens.refresh_token

    async def _obtain_tokens(self) -> TokenPair:
        if self._access_token and self._known_expired(self._access_token):
            self._access_token = None
        if self._refresh_token and self._known_expired(self._refresh_token):
            self._refresh_token = None

        # The cache file is only read when memory cannot serve the request
        have_both = self._access_token and self._refresh_token
        if self.token_store is not None and not have_both:
            self._adopt_cached_tokens()

        if self._access_token and self._refresh_token:
            return TokenPair(
                access_token=self._access_token, refresh_token=self._refresh_token
            )

        if self._refresh_token:
            return await self._refresh(self._refresh_token)

        if not (self._email and self._password):
            raise AuthenticationFailed("No credentials available")

        return await self._login(self._email, self._password)

    def _adopt_cached_tokens(self) -> None:
        cached = self.token_store.load()
        if cached is None:
            return

        # Access and refresh are judged independently; a stale one is dropped
        now = time.time()
        if self._cached_token_fresh(cached.access_token, now):
            self._access_token = cached.access_token
        if self._cached_token_fresh(cached.refresh_token, now):
            self._refresh_token = cached.refresh_token

    @staticmethod
    def _cached_token_fresh(token: str, now: float) -> bool:
        try:
            return is_fresh(token, now)
        except InvalidToken as e:
            logger.debug("Discarding cached token: %s", e)
            return False

    @staticmethod
    def _known_expired(token: str) -> bool:
        # Opaque tokens carry no readable expiry and are kept until the API rejects them
        try:
            return not is_fresh(token)
        except InvalidToken:
            return False

    async def _refresh(self, refresh_token: str) -> TokenPair:
        logger.info("Refreshing DUPR access token")
        response = await self._send(
            "GET", REFRESH_PATH, headers={"x-refresh-token": refresh_token}
        )
        if response.status_code != 200:
            raise HttpError.from_response("Failed to refresh token", response)

        body = _json_body(response)
        access_token = body.get("result") if isinstance(body, dict) else None
        if not isinstance(access_token, str):
            raise DecodingError("Refresh response has no access token", response.text)

        self._access_token = access_token
        tokens = TokenPair(access_token=access_token, refresh_token=refresh_token)
        if self.token_store is not None:
            self.token_store.save(tokens)
        return tokens

    async def _login(self, email: str, password: str) -> TokenPair:
        logger.info("Logging in to DUPR as %s", email)
        response = await self._send(
            "POST",
            LOGIN_PATH,
            headers={"Content-Type": "application/json"},
            json={"email": email, "password": password},
        )
        if response.status_code != 200:
            raise HttpError.from_response("Failed to authenticate", response)

        body = _json_body(response)
        result = body.get("result") if isinstance(body, dict) else None
        try:
            tokens = TokenPair.model_validate(result)
        except ValidationError as e:
            raise DecodingError(e, response.text) from e

        self._access_token = tokens.access_token
        self._refresh_token = tokens.refresh_token
        if self.token_store is not None:
            self.token_store.save(tokens)
        return tokens

    async def _send(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            return await self.client.request(method, path, **kwargs)
        except httpx.DecodingError as e:
            raise DecodingError(e) from e
        except httpx.RequestError as e:
            raise NetworkError(e) from e


def _json_body(response: httpx.Response):
    try:
        return response.json()
    except ValueError as e:
        raise DecodingError(e, response.text) from e
