"""
Player-related models for the DUPR API.
"""

from typing import Optional

from pydantic import Field

from .common import DuprResource


class Sponsor(DuprResource):
    """Sponsor attached to a player profile."""

    id: Optional[int] = Field(None, alias="id")
    button_text: Optional[str] = Field(None, alias="buttonText")
    description: Optional[str] = Field(None, alias="description")
    image_url: Optional[str] = Field(None, alias="imageURL")
    popup_heading: Optional[str] = Field(None, alias="sponsorPopupHeading")
    redirect_url: Optional[str] = Field(None, alias="sponsorRedirectUrl")


class Player(DuprResource):
    """DUPR player as returned by player lookup, search and club member listings."""

    id: int = Field(alias="id", description="Player user ID (not the DUPR ID)")
    full_name: str = Field(alias="fullName")
    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")
    username: Optional[str] = Field(None, alias="username")
    display_username: Optional[bool] = Field(None, alias="displayUsername")

    # Contact; email is documented as required but often absent
    email: Optional[str] = Field(None, alias="email")
    phone: Optional[str] = Field(None, alias="phone")
    verified_email: bool = Field(False, alias="verifiedEmail")
    verified_phone: Optional[bool] = Field(None, alias="verifiedPhone")
    enable_privacy: bool = Field(False, alias="enablePrivacy")

    # Demographics
    age: Optional[int] = Field(None, alias="age")
    birthdate: Optional[str] = Field(None, alias="birthdate")
    gender: Optional[str] = Field(None, alias="gender")
    hand: Optional[str] = Field(None, alias="hand")
    image_url: Optional[str] = Field(None, alias="imageUrl")

    # Location
    distance: Optional[str] = Field(None, alias="distance")
    distance_in_miles: Optional[float] = Field(None, alias="distanceInMiles")
    formatted_address: Optional[str] = Field(None, alias="formattedAddress")
    short_address: Optional[str] = Field(None, alias="shortAddress")
    location: Optional[str] = Field(None, alias="location")
    latitude: Optional[float] = Field(None, alias="latitude")
    longitude: Optional[float] = Field(None, alias="longitude")
    iso_alpha2_code: Optional[str] = Field(None, alias="isoAlpha2Code")

    # Ratings
    default_rating: Optional[str] = Field(None, alias="defaultRating")
    doubles: Optional[str] = Field(None, alias="doubles")
    doubles_provisional: Optional[bool] = Field(None, alias="doublesProvisional")
    doubles_reliability: Optional[float] = Field(None, alias="doublesReliability")
    doubles_verified: Optional[str] = Field(None, alias="doublesVerified")
    provisional_doubles_rating: Optional[float] = Field(
        None, alias="provisionalDoublesRating"
    )
    singles: Optional[str] = Field(None, alias="singles")
    singles_provisional: Optional[bool] = Field(None, alias="singlesProvisional")
    singles_reliability: Optional[float] = Field(None, alias="singlesReliability")
    singles_verified: Optional[str] = Field(None, alias="singlesVerified")
    provisional_singles_rating: Optional[float] = Field(
        None, alias="provisionalSinglesRating"
    )
    reliability_score: Optional[int] = Field(None, alias="reliabilityScore")

    # Account
    created: Optional[str] = Field(None, alias="created")
    registered: Optional[bool] = Field(None, alias="registered")
    registration_type: Optional[str] = Field(None, alias="registrationType")
    referral_code: Optional[str] = Field(None, alias="referralCode")
    lucra_connected: Optional[bool] = Field(None, alias="lucraConnected")
    status: Optional[str] = Field(None, alias="status")
    sponsor: Optional[Sponsor] = Field(None, alias="sponsor")
