"""
Club-related models for the DUPR API.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import ConfigDict, Field

from .common import DuprResource


class ClubJoinType(str, Enum):
    """How new members join a club."""

    INVITATION = "INVITATION"
    REQUEST = "REQUEST"
    INVITATION_CSV = "INVITATION_CSV"
    PARTNER_INVITE = "PARTNER_INVITE"


class Address(DuprResource):
    """Geocoded club address."""

    id: int = Field(alias="id")
    address_line: Optional[str] = Field(None, alias="addressLine")
    short_address: Optional[str] = Field(None, alias="shortAddress")
    formatted_address: Optional[str] = Field(None, alias="formattedAddress")
    latitude: Optional[float] = Field(None, alias="latitude")
    longitude: Optional[float] = Field(None, alias="longitude")
    place_id: Optional[str] = Field(None, alias="placeId")
    precision: Optional[str] = Field(None, alias="precision")
    status: Optional[str] = Field(None, alias="status")
    types: Optional[str] = Field(None, alias="types")
    create: Optional[str] = Field(None, alias="create")


class Club(DuprResource):
    """
    DUPR club.

    Several server keys are renamed: ``clubId`` -> ``id``, ``clubName`` ->
    ``name``, ``clubType`` -> ``type``, ``mediaUrl`` -> ``icon_url``,
    ``clubMemberCount`` -> ``member_count`` and ``created`` -> ``created_date``.
    """

    # model_type and model_value are server field names
    model_config = ConfigDict(protected_namespaces=())

    id: int = Field(alias="clubId")
    name: str = Field(alias="clubName")
    type: Optional[str] = Field(None, alias="clubType")
    icon_url: Optional[str] = Field(None, alias="mediaUrl")
    address: Optional[Address] = Field(None, alias="address")
    short_address: Optional[str] = Field(None, alias="shortAddress")
    member_count: Optional[int] = Field(None, alias="clubMemberCount")
    role: Optional[str] = Field(None, alias="role")
    is_payment_setup: Optional[bool] = Field(None, alias="isPaymentSetup")
    account_status: Optional[str] = Field(None, alias="accountStatus")
    model_type: Optional[str] = Field(None, alias="modelType")
    model_value: Optional[float] = Field(None, alias="modelValue")
    currency_details: Optional[dict[str, Any]] = Field(None, alias="currencyDetails")
    created_date: Optional[str] = Field(None, alias="created")
    requested_by: Optional[int] = Field(None, alias="requestedBy")
    club_join_type: Optional[ClubJoinType] = Field(None, alias="clubJoinType")
    pending_request_list: Optional[list[int]] = Field(None, alias="pendingRequestList")
    distance_in_miles: Optional[float] = Field(None, alias="distanceInMiles")

    @property
    def display_location(self) -> str:
        """Best available human-readable location."""
        if self.short_address:
            return self.short_address
        if self.address is not None:
            return self.address.short_address or self.address.formatted_address or ""
        return ""
