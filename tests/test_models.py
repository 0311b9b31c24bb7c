"""
Tests for response models and decoding helpers.
"""

import pytest

from dupr.errors import DecodingError
from dupr.models import (
    Club,
    ClubJoinType,
    Match,
    MatchFormat,
    MatchType,
    Player,
    Profile,
    decode_json,
    get_result,
)


class TestPlayer:
    """Test Player model."""

    def test_from_api_data(self, sample_player_data):
        player = Player.from_api_data(sample_player_data)

        assert player.id == 42
        assert player.full_name == "Jane Doe"
        assert player.first_name == "Jane"
        assert player.verified_email is True
        assert player.doubles == "4.512"
        assert player.doubles_reliability == 87.5
        assert player.short_address == "Austin, TX, US"
        assert player.sponsor is not None
        assert player.sponsor.image_url == "https://example.com/sponsor.png"
        assert player.sponsor.button_text == "Shop"

    def test_minimal_record(self):
        player = Player.from_api_data({"id": 1, "fullName": "Player 1"})

        assert player.email is None
        assert player.enable_privacy is False
        assert player.verified_email is False
        assert player.sponsor is None

    def test_missing_required_field(self):
        with pytest.raises(DecodingError):
            Player.from_api_data({"fullName": "No Id"})

    def test_wrong_type(self):
        with pytest.raises(DecodingError):
            Player.from_api_data({"id": "not-a-number", "fullName": "X"})

    def test_not_an_object(self):
        with pytest.raises(DecodingError):
            Player.from_api_data(["id", 1])

    def test_populate_by_field_name(self):
        player = Player(id=3, full_name="By Name")

        assert player.to_api_data() == {
            "id": 3,
            "fullName": "By Name",
            "verifiedEmail": False,
            "enablePrivacy": False,
        }


class TestClub:
    """Test Club model and its renamed keys."""

    def test_renamed_keys(self, sample_club_data):
        club = Club.from_api_data(sample_club_data)

        assert club.id == 123
        assert club.name == "Downtown Picklers"
        assert club.type == "PUBLIC"
        assert club.icon_url == "https://example.com/club.png"
        assert club.member_count == 58
        assert club.created_date == "2023-04-01T12:00:00Z"
        assert club.club_join_type is ClubJoinType.REQUEST
        assert club.pending_request_list == [5, 6]
        assert club.address.formatted_address.startswith("100 Main St")

    def test_round_trip_keys(self, sample_club_data):
        data = Club.from_api_data(sample_club_data).to_api_data()

        assert data["clubId"] == 123
        assert data["clubName"] == "Downtown Picklers"
        assert data["mediaUrl"] == "https://example.com/club.png"
        assert data["clubMemberCount"] == 58
        assert data["created"] == "2023-04-01T12:00:00Z"

    def test_unknown_join_type(self, sample_club_data):
        sample_club_data["clubJoinType"] = "TELEPATHY"

        with pytest.raises(DecodingError):
            Club.from_api_data(sample_club_data)

    def test_display_location(self, sample_club_data):
        club = Club.from_api_data(sample_club_data)
        assert club.display_location == "Austin, TX"

        club = Club.from_api_data({**sample_club_data, "shortAddress": "Downtown"})
        assert club.display_location == "Downtown"

        club = Club.from_api_data({"clubId": 1, "clubName": "Nowhere"})
        assert club.display_location == ""


class TestProfile:
    """Test Profile model."""

    def test_display_values(self):
        profile = Profile.from_api_data(
            {
                "userId": 1,
                "duprId": "ABC456",
                "fullName": "jdoe",
                "firstName": "Jane",
                "lastName": "Doe",
                "singlesRating": 3.9,
            }
        )

        assert profile.display_name == "Jane Doe"
        assert profile.display_rating == 3.9

    def test_doubles_rating_preferred(self):
        profile = Profile(user_id=1, full_name="jdoe", singles_rating=3.9, doubles_rating=4.2)

        assert profile.display_rating == 4.2
        assert profile.display_name == "jdoe"


class TestMatch:
    """Test match payload serialisation."""

    def test_to_api_data(self):
        match = Match.from_api_data(
            {
                "eventDate": "2024-06-01",
                "format": "DOUBLES",
                "matchType": "SIDE_ONLY",
                "team1": {"player1": 1, "player2": 2, "game1": 11, "winner": True},
                "team2": {"player1": 3, "player2": 4, "game1": 7, "winner": False},
                "clubId": 123,
                "notify": True,
                "metadata": {"source": "test"},
            }
        )

        assert match.format is MatchFormat.DOUBLES
        assert match.match_type is MatchType.SIDE_ONLY
        assert match.club_id == 123

        payload = match.to_api_data()
        assert payload["eventDate"] == "2024-06-01"
        assert payload["format"] == "DOUBLES"
        assert payload["matchType"] == "SIDE_ONLY"
        assert payload["team1"] == {"player1": 1, "player2": 2, "game1": 11, "winner": True}
        assert payload["clubId"] == 123
        assert payload["scores"] == []

    def test_invalid_format(self):
        with pytest.raises(DecodingError):
            Match.from_api_data(
                {
                    "eventDate": "2024-06-01",
                    "format": "TRIPLES",
                    "matchType": "RALLY",
                    "team1": {"player1": 1, "game1": 11, "winner": True},
                    "team2": {"player1": 2, "game1": 3, "winner": False},
                }
            )


class TestDecodingHelpers:
    """Test JSON body helpers."""

    def test_decode_json(self):
        assert decode_json(b'{"result": {"id": 1}}') == {"result": {"id": 1}}

    def test_decode_invalid_json(self):
        with pytest.raises(DecodingError) as exc_info:
            decode_json(b"<html>gateway error</html>")

        assert exc_info.value.body == "<html>gateway error</html>"

    def test_decode_non_object(self):
        with pytest.raises(DecodingError):
            decode_json(b"[1, 2, 3]")

    def test_get_result(self):
        assert get_result({"result": {"id": 1}}) == {"id": 1}

        with pytest.raises(DecodingError) as exc_info:
            get_result({"result": "nope"}, "Failed to decode player response")
        assert "Failed to decode player response" in str(exc_info.value)

