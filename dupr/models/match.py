"""
Match submission models for the DUPR API.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import Field

from .common import DuprResource


class MatchFormat(str, Enum):
    SINGLES = "SINGLES"
    DOUBLES = "DOUBLES"


class MatchType(str, Enum):
    SIDE_ONLY = "SIDE_ONLY"
    RALLY = "RALLY"


class Team(DuprResource):
    """One side of a match: player user IDs and per-game scores."""

    player1: int = Field(alias="player1")
    player2: Optional[int] = Field(None, alias="player2")
    game1: int = Field(alias="game1")
    game2: Optional[int] = Field(None, alias="game2")
    game3: Optional[int] = Field(None, alias="game3")
    game4: Optional[int] = Field(None, alias="game4")
    game5: Optional[int] = Field(None, alias="game5")
    winner: bool = Field(alias="winner")


class Match(DuprResource):
    """Match result as submitted to a club."""

    event_date: str = Field(alias="eventDate", description="Date of play, YYYY-MM-DD")
    format: MatchFormat = Field(alias="format")
    match_type: MatchType = Field(alias="matchType")
    team1: Team = Field(alias="team1")
    team2: Team = Field(alias="team2")
    scores: list[dict[str, Any]] = Field(default_factory=list, alias="scores")
    club_id: Optional[int] = Field(None, alias="clubId")
    notify: bool = Field(False, alias="notify")
    metadata: dict[str, str] = Field(default_factory=dict, alias="metadata")
