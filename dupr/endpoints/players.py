"""
Player-related endpoints for the DUPR API.
"""

from ..errors import DecodingError
from ..http import DuprHTTP
from ..models.common import decode_json, get_result
from ..models.player import Player
from ..pagination import Page, PageStream, Termination


class PlayersAPI:
    """API wrapper for player-related endpoints."""

    def __init__(self, http_client: DuprHTTP):
        self.http = http_client

    async def get_player(self, player_id: int) -> Player:
        """
        Get a player's details.

        Args:
            player_id: Player user ID. This is not the same as the DUPR ID.

        Returns:
            Player object
        """
        body = await self.http.get(f"/player/v1.0/{player_id}")
        response = decode_json(body)
        return Player.from_api_data(
            get_result(response, "Failed to decode player response")
        )

    def search_players(self, query: str) -> PageStream[Player]:
        """
        Search for players by name.

        Args:
            query: Search text

        Returns:
            Stream of every matching player, fetched page by page
        """

        async def fetch_page(offset: int, limit: int) -> Page:
            body = await self.http.post(
                "/player/v1.0/search",
                {"filter": {}, "limit": limit, "offset": offset, "query": query},
            )
            return Page.from_envelope(decode_json(body))

        return PageStream(fetch_page, Player.from_api_data, Termination.EMPTY_PAGE)

    async def get_user_id(self, dupr_id: str) -> int:
        """
        Convert a 6-character DUPR ID to a user ID.

        Args:
            dupr_id: DUPR ID as shown in the app, e.g. ``ABC456``

        Returns:
            The player's user ID
        """
        body = await self.http.post("/player/search/byDuprId", {"duprId": dupr_id})
        response = decode_json(body)

        results = response.get("results")
        if not isinstance(results, list) or not results:
            raise DecodingError("Failed to get result from DUPR ID response")

        first = results[0]
        user_id = first.get("userId") if isinstance(first, dict) else None
        if isinstance(user_id, bool) or not isinstance(user_id, int):
            raise DecodingError("Failed to get user ID from DUPR ID response")

        return user_id
