"""Tests for the operation table, format parsing and dotted-path lookup."""

import pytest

from steam_webapi.client.operations import (
    ENDPOINTS,
    RESPONSE_PREFIXES,
    Operation,
    ResponseFormat,
    build_selector_path,
    parse_format,
    parse_operation,
)
from steam_webapi.client.results import PathNotFound, resolve_path


class TestOperationTable:
    """Tests for the static per-operation tables."""

    def test_every_operation_has_endpoint_and_prefix(self):
        assert set(ENDPOINTS) == set(Operation)
        assert set(RESPONSE_PREFIXES) == set(Operation)

    def test_response_prefixes(self):
        assert {op.value: prefix for op, prefix in RESPONSE_PREFIXES.items()} == {
            "getNewsForApp": "appnews",
            "getGlobalAchievementPercentagesForApp": "achievementpercentages",
            "getPlayerSummaries": "response",
            "getFriendList": "friendslist",
            "getPlayerAchievements": "playerstats",
            "getUserStatsForGame": "playerstats",
            "getOwnedGames": "response",
            "getRecentlyPlayedGames": "response",
        }

    def test_endpoint_path(self):
        assert ENDPOINTS[Operation.NEWS].path == "/ISteamNews/GetNewsForApp/v0002/"


class TestParseOperation:
    def test_parses_identifier(self):
        assert parse_operation("getFriendList") is Operation.FRIEND_LIST

    def test_passes_enum_through(self):
        assert parse_operation(Operation.NEWS) is Operation.NEWS

    def test_unknown_identifier_returns_none(self):
        assert parse_operation("getSchemaForGame") is None


class TestParseFormat:
    @pytest.mark.parametrize("value", ["", None, "json"])
    def test_json_and_empty(self, value):
        assert parse_format(value) is ResponseFormat.JSON

    def test_raw_formats(self):
        assert parse_format("xml") is ResponseFormat.XML
        assert parse_format("vdf") is ResponseFormat.VDF

    @pytest.mark.parametrize("value", ["yaml", "JSON", "text"])
    def test_unknown_format_returns_none(self, value):
        assert parse_format(value) is None


class TestBuildSelectorPath:
    def test_prefix_only(self):
        assert build_selector_path(Operation.FRIEND_LIST) == "friendslist"

    def test_prefix_and_selector(self):
        assert (
            build_selector_path(Operation.FRIEND_LIST, "friends")
            == "friendslist.friends"
        )

    def test_empty_selector_means_prefix_only(self):
        assert build_selector_path(Operation.OWNED_GAMES, "") == "response"


class TestResolvePath:
    """Tests for resolve_path()."""

    DATA = {
        "playerstats": {
            "steamID": "76561197960435530",
            "achievements": [
                {"apiname": "FIRST_BLOOD", "achieved": 1},
                {"apiname": "ACE", "achieved": 0},
            ],
            "success": False,
        }
    }

    def test_single_segment(self):
        assert resolve_path(self.DATA, "playerstats") is self.DATA["playerstats"]

    def test_nested_list_index(self):
        assert (
            resolve_path(self.DATA, "playerstats.achievements.1.apiname") == "ACE"
        )

    def test_falsy_values_are_found(self):
        assert resolve_path(self.DATA, "playerstats.success") is False

    def test_missing_key_reports_segment_and_parent(self):
        with pytest.raises(PathNotFound) as exc_info:
            resolve_path(self.DATA, "playerstats.stats.kills")

        assert exc_info.value.segment == "stats"
        assert exc_info.value.resolved == "playerstats"
        assert "under 'playerstats'" in str(exc_info.value)

    def test_missing_root_key(self):
        with pytest.raises(PathNotFound) as exc_info:
            resolve_path({}, "response")

        assert "response root" in str(exc_info.value)

    @pytest.mark.parametrize("index", ["2", "-1", "first", "²", "١"])
    def test_bad_list_index(self, index):
        with pytest.raises(PathNotFound):
            resolve_path(self.DATA, f"playerstats.achievements.{index}")

    def test_cannot_descend_into_scalar(self):
        with pytest.raises(PathNotFound):
            resolve_path(self.DATA, "playerstats.steamID.length")
