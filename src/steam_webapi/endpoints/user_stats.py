"""ISteamUserStats API endpoints.

This module provides MCP tools for the ISteamUserStats Steam API interface,
which handles achievements, game stats, and global achievement percentages.

Reference: https://partner.steamgames.com/doc/webapi/ISteamUserStats
"""

from steam_webapi.client import SteamResult
from steam_webapi.endpoints.base import BaseEndpoint, endpoint


STEAM_ID_PARAM = {
    "type": "string",
    "description": "SteamID64 of the player (e.g., 76561197960435530)",
    "required": True,
}

APP_ID_PARAM = {
    "type": "integer",
    "description": "Steam App ID of the game (e.g., 440 for TF2, 730 for CS2)",
    "required": True,
}


class ISteamUserStats(BaseEndpoint):
    """ISteamUserStats API endpoints for achievements and game statistics."""

    @endpoint(
        name="get_global_achievement_percentages",
        description=(
            "Get the global unlock percentage of every achievement in a game. "
            "No API key is sent for this call."
        ),
        params={"app_id": APP_ID_PARAM},
    )
    async def get_global_achievement_percentages(
        self,
        app_id: int,
        format: str = "json",
        selector: str | None = None,
    ) -> SteamResult:
        return await self.client.get_global_achievement_percentages_for_app(
            app_id, format, selector
        )

    @endpoint(
        name="get_player_achievements",
        description=(
            "Get a player's achievement progress for a specific game. "
            "Note: Requires the player's game details to be public."
        ),
        params={"steam_id": STEAM_ID_PARAM, "app_id": APP_ID_PARAM},
    )
    async def get_player_achievements(
        self,
        steam_id: str,
        app_id: int,
        format: str = "json",
        selector: str | None = None,
    ) -> SteamResult:
        return await self.client.get_player_achievements(
            steam_id, app_id, format, selector
        )

    @endpoint(
        name="get_user_stats_for_game",
        description="Get a player's recorded stats and achievements for a game.",
        params={"steam_id": STEAM_ID_PARAM, "app_id": APP_ID_PARAM},
    )
    async def get_user_stats_for_game(
        self,
        steam_id: str,
        app_id: int,
        format: str = "json",
        selector: str | None = None,
    ) -> SteamResult:
        return await self.client.get_user_stats_for_game(
            steam_id, app_id, format, selector
        )
