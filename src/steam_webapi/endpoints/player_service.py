"""IPlayerService API endpoints.

This module provides MCP tools for the IPlayerService Steam API interface,
which handles player game libraries and playtime.

Reference: https://partner.steamgames.com/doc/webapi/IPlayerService
"""

from steam_webapi.client import SteamResult
from steam_webapi.endpoints.base import BaseEndpoint, endpoint


class IPlayerService(BaseEndpoint):
    """IPlayerService API endpoints for player game data."""

    @endpoint(
        name="get_owned_games",
        description=(
            "Get a player's owned games with playtime information. "
            "Note: Only works for public profiles unless querying your own profile."
        ),
        params={
            "steam_id": {
                "type": "string",
                "description": "SteamID64 of the player",
                "required": True,
            },
            "include_app_info": {
                "type": "boolean",
                "description": "Include game names and icon hashes",
                "required": False,
                "default": True,
            },
            "include_played_free_games": {
                "type": "boolean",
                "description": "Include free-to-play games like TF2, Dota 2, etc.",
                "required": False,
                "default": True,
            },
        },
    )
    async def get_owned_games(
        self,
        steam_id: str,
        include_app_info: bool = True,
        include_played_free_games: bool = True,
        format: str = "json",
        selector: str | None = None,
    ) -> SteamResult:
        """Get owned games for a Steam user."""
        return await self.client.get_owned_games(
            steam_id,
            format,
            selector,
            include_app_info=include_app_info,
            include_played_free_games=include_played_free_games,
        )

    @endpoint(
        name="get_recently_played_games",
        description="Get games a player has played in the last 2 weeks.",
        params={
            "steam_id": {
                "type": "string",
                "description": "SteamID64 of the player",
                "required": True,
            },
            "count": {
                "type": "integer",
                "description": "Maximum number of games to return (0 = all)",
                "required": False,
                "default": 0,
                "minimum": 0,
            },
        },
    )
    async def get_recently_played_games(
        self,
        steam_id: str,
        count: int = 0,
        format: str = "json",
        selector: str | None = None,
    ) -> SteamResult:
        return await self.client.get_recently_played_games(
            steam_id, format, count or None, selector
        )
