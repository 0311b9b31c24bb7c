"""
Club-related endpoints for the DUPR API.
"""

from ..http import DuprHTTP
from ..models.club import Club
from ..models.common import decode_json
from ..models.player import Player
from ..pagination import Page, PageStream, Termination


class ClubsAPI:
    """API wrapper for club listings and membership."""

    def __init__(self, http_client: DuprHTTP):
        self.http = http_client

    def search_clubs(self, query: str, own: bool = False) -> PageStream[Club]:
        """
        Search for clubs.

        The club listing reports ``hasMore`` on each page; the stream ends when
        it is false or absent.

        Args:
            query: Search text
            own: Only clubs the authenticated user belongs to

        Returns:
            Stream of matching clubs
        """

        async def fetch_page(offset: int, limit: int) -> Page:
            body = await self.http.get(
                "/club/v1.0/all",
                {
                    "q": query,
                    "own": "true" if own else "false",
                    "offset": offset,
                    "limit": limit,
                },
            )
            return Page.from_envelope(decode_json(body))

        return PageStream(fetch_page, Club.from_api_data, Termination.HAS_MORE)

    def get_club_members(self, club_id: int) -> PageStream[Player]:
        """
        Get all members of a club.

        Args:
            club_id: The ID of the club

        Returns:
            Stream of every club member
        """

        async def fetch_page(offset: int, limit: int) -> Page:
            body = await self.http.post(
                f"/club/{club_id}/members/v1.0/all",
                {"offset": offset, "limit": limit, "query": "*"},
            )
            return Page.from_envelope(decode_json(body))

        return PageStream(fetch_page, Player.from_api_data, Termination.EMPTY_PAGE)
