"""
Main client for the DUPR API.
"""

from typing import Any, Optional, Union

import httpx

from .auth import AuthSession, Credential, TokenStore
from .config import Settings
from .endpoints.clubs import ClubsAPI
from .endpoints.matches import MatchesAPI
from .endpoints.players import PlayersAPI
from .http import DuprHTTP, create_http_client
from .models.club import Club
from .models.match import Match
from .models.player import Player
from .pagination import PageStream


class DuprClient:
    """
    Main client for the DUPR API.

    Provides access to all API endpoints through a unified interface.
    """

    def __init__(
        self,
        credential: Optional[Credential] = None,
        settings: Optional[Settings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the DUPR API client.

        Args:
            credential: Email/password or refresh token (read from settings if not provided)
            settings: Configuration settings (will load from environment if not provided)
            http_client: Pre-built async HTTP client; the caller keeps ownership of it
        """

        if settings is None:
            settings = Settings()
        if credential is None:
            credential = settings.credential()

        self.settings = settings
        self._owns_client = http_client is None
        self.client = http_client or create_http_client(settings)

        token_store = TokenStore(settings.token_path) if settings.cache_tokens else None
        self.auth = AuthSession(credential, self.client, token_store)
        self.http = DuprHTTP(self.auth, self.client)

        self.players = PlayersAPI(self.http)
        self.clubs = ClubsAPI(self.http)
        self.matches = MatchesAPI(self.http)

    async def __aenter__(self):
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - cleanup resources."""
        await self.close()

    async def close(self) -> None:
        """Close HTTP connections the client opened itself."""
        if self._owns_client:
            await self.client.aclose()

    async def get_player(self, player_id: int) -> Player:
        return await self.players.get_player(player_id)

    def search_players(self, query: str) -> PageStream[Player]:
        return self.players.search_players(query)

    async def get_user_id_from_dupr_id(self, dupr_id: str) -> int:
        return await self.players.get_user_id(dupr_id)

    def search_clubs(self, query: str) -> PageStream[Club]:
        return self.clubs.search_clubs(query)

    def get_club_members(self, club_id: int) -> PageStream[Player]:
        return self.clubs.get_club_members(club_id)

    async def submit_match(
        self, club_id: Optional[int], match: Union[Match, dict[str, Any]]
    ) -> dict[str, Any]:
        return await self.matches.submit_match(club_id, match)

    async def get_refresh_token(self) -> str:
        """
        Get the current refresh token.

        Useful for storing it so later runs can authenticate without a password.
        """
        return await self.auth.get_refresh_token()
