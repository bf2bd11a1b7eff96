"""Tests for ISteamUser endpoints."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from steam_webapi.client import SteamResult
from steam_webapi.endpoints.steam_user import ISteamUser


STEAM_ID = "76561197960435530"


@pytest.fixture
def mock_client():
    """Create mock Steam client."""
    client = MagicMock()
    client.get_player_summaries = AsyncMock(
        return_value=SteamResult.success(
            {"players": [{"steamid": STEAM_ID, "personaname": "Robin"}]}
        )
    )
    client.get_friend_list = AsyncMock(
        return_value=SteamResult.success({"friends": []})
    )
    return client


@pytest.fixture
def steam_user(mock_client):
    """Create ISteamUser instance with mock client."""
    return ISteamUser(mock_client)


class TestGetPlayerSummaries:
    @pytest.mark.asyncio
    async def test_forwards_id_list(self, steam_user, mock_client):
        ids = [STEAM_ID, "76561198000000000"]

        result = await steam_user.get_player_summaries(steam_ids=ids, selector="players")

        mock_client.get_player_summaries.assert_awaited_once_with(ids, "json", "players")
        assert result.value["players"][0]["personaname"] == "Robin"

    def test_schema_declares_array(self):
        tools = {tool.name: tool for tool in ISteamUser.get_tools()}
        steam_ids = tools["get_player_summaries"].inputSchema["properties"]["steam_ids"]

        assert steam_ids["type"] == "array"
        assert steam_ids["items"] == {"type": "string"}


class TestGetFriendList:
    @pytest.mark.asyncio
    async def test_default_relationship(self, steam_user, mock_client):
        await steam_user.get_friend_list(steam_id=STEAM_ID)

        mock_client.get_friend_list.assert_awaited_once_with(
            STEAM_ID, "friend", "json", None
        )

    @pytest.mark.asyncio
    async def test_custom_relationship(self, steam_user, mock_client):
        await steam_user.get_friend_list(steam_id=STEAM_ID, relationship="all")

        mock_client.get_friend_list.assert_awaited_once_with(
            STEAM_ID, "all", "json", None
        )
