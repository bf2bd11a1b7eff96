"""ISteamUser API endpoints.

This module provides MCP tools for the ISteamUser Steam API interface,
which handles player profiles and friend lists.

Reference: https://partner.steamgames.com/doc/webapi/ISteamUser
"""

from steam_webapi.client import SteamResult
from steam_webapi.endpoints.base import BaseEndpoint, endpoint


class ISteamUser(BaseEndpoint):
    """ISteamUser API endpoints for player identity and profile data."""

    @endpoint(
        name="get_player_summaries",
        description=(
            "Get profile information for one or more Steam users: display name, "
            "avatar, profile URL, online status and visibility."
        ),
        params={
            "steam_ids": {
                "type": "array",
                "description": "SteamID64s to look up",
                "items": {"type": "string"},
                "required": True,
            },
        },
    )
    async def get_player_summaries(
        self,
        steam_ids: list[str],
        format: str = "json",
        selector: str | None = None,
    ) -> SteamResult:
        return await self.client.get_player_summaries(steam_ids, format, selector)

    @endpoint(
        name="get_friend_list",
        description=(
            "Get the friend list for a Steam user. Note: This only works for "
            "users with public profiles."
        ),
        params={
            "steam_id": {
                "type": "string",
                "description": "SteamID64 of the player",
                "required": True,
            },
            "relationship": {
                "type": "string",
                "description": "Relationship filter",
                "enum": ["all", "friend"],
                "default": "friend",
                "required": False,
            },
        },
    )
    async def get_friend_list(
        self,
        steam_id: str,
        relationship: str = "friend",
        format: str = "json",
        selector: str | None = None,
    ) -> SteamResult:
        """Get friend list for a Steam user."""
        return await self.client.get_friend_list(
            steam_id, relationship, format, selector
        )
