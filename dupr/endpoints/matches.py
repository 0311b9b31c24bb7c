"""
Match submission endpoint for the DUPR API.
"""

from typing import Any, Optional, Union

from ..errors import InvalidInput
from ..http import DuprHTTP
from ..models.common import decode_json
from ..models.match import Match


class MatchesAPI:
    """API wrapper for match submission."""

    def __init__(self, http_client: DuprHTTP):
        self.http = http_client

    async def submit_match(
        self, club_id: Optional[int], match: Union[Match, dict[str, Any]]
    ) -> dict[str, Any]:
        """
        Submit a match result to a club.

        Args:
            club_id: Club the match is recorded under; falls back to the
                match's own ``clubId``
            match: Match model or raw match payload

        Returns:
            The decoded API response
        """
        if isinstance(match, Match):
            payload = match.to_api_data()
            if club_id is None:
                club_id = match.club_id
        else:
            payload = match

        if club_id is None:
            raise InvalidInput("Club ID is required for match submission")

        body = await self.http.put(f"/club/{club_id}/match/v1.0/save", payload)
        return decode_json(body)
