"""
Authenticated HTTP transport for the DUPR API.
"""

import logging
from typing import Any, Optional

import httpx

from .auth import AuthSession
from .config import Settings
from .errors import DecodingError, HttpError, NetworkError

logger = logging.getLogger(__name__)


def create_http_client(settings: Settings, **kwargs: Any) -> httpx.AsyncClient:
    """Build the shared async client used for auth and API calls."""
    return httpx.AsyncClient(
        base_url=settings.base_url,
        timeout=httpx.Timeout(settings.timeout),
        limits=httpx.Limits(max_connections=10, max_keepalive_connections=5),
        headers={"User-Agent": settings.user_agent},
        **kwargs,
    )


class DuprHTTP:
    """
    Sends authenticated requests and returns raw response bodies.

    Every call first asks the AuthSession for a valid token pair. There is no
    retry: a token that expires mid-flight surfaces as an HttpError (401).
    """

    def __init__(self, auth: AuthSession, client: httpx.AsyncClient):
        self.auth = auth
        self.client = client

    def _get_headers(self, access_token: str, json_body: bool) -> dict[str, str]:
        headers = {"Authorization": f"Bearer {access_token}"}
        if json_body:
            headers["Accept"] = "application/json"
            headers["Content-Type"] = "application/json"
        return headers

    async def _make_request(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, Any]] = None,
        data: Optional[Any] = None,
        json_body: bool = False,
    ) -> bytes:
        tokens = await self.auth.get_valid_tokens()

        logger.debug("%s %s", method, path)
        try:
            response = await self.client.request(
                method,
                path,
                headers=self._get_headers(tokens.access_token, json_body),
                params=params,
                json=data,
            )
        except httpx.DecodingError as e:
            # Body could not be decompressed
            raise DecodingError(e) from e
        except httpx.RequestError as e:
            raise NetworkError(e) from e

        if response.status_code != 200:
            raise HttpError.from_response(f"{method} request failed", response)

        return response.content

    async def get(self, path: str, params: Optional[dict[str, Any]] = None) -> bytes:
        """
        Make an authenticated GET request.

        Args:
            path: API path, e.g. ``/player/v1.0/42``
            params: Query parameters

        Returns:
            Raw response body
        """
        return await self._make_request("GET", path, params=params)

    async def post(self, path: str, data: Optional[Any] = None) -> bytes:
        """Make an authenticated POST request with an optional JSON body."""
        return await self._make_request("POST", path, data=data, json_body=True)

    async def put(self, path: str, data: Optional[Any] = None) -> bytes:
        """Make an authenticated PUT request with an optional JSON body."""
        return await self._make_request("PUT", path, data=data, json_body=True)
