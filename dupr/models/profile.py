"""
Condensed player profile model.
"""

from typing import Optional

from pydantic import Field

from .common import DuprResource


class Profile(DuprResource):
    """Summary of a player keyed by user ID and DUPR ID."""

    user_id: int = Field(alias="userId")
    dupr_id: Optional[str] = Field(None, alias="duprId")
    full_name: str = Field(alias="fullName")
    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")
    singles_rating: Optional[float] = Field(None, alias="singlesRating")
    doubles_rating: Optional[float] = Field(None, alias="doublesRating")
    profile_image_url: Optional[str] = Field(None, alias="profileImageUrl")

    @property
    def display_rating(self) -> Optional[float]:
        """Doubles rating, falling back to singles."""
        if self.doubles_rating is not None:
            return self.doubles_rating
        return self.singles_rating

    @property
    def display_name(self) -> str:
        if self.first_name and self.last_name:
            return f"{self.first_name} {self.last_name}"
        return self.full_name
