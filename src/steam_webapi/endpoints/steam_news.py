"""ISteamNews API endpoints.

Reference: https://partner.steamgames.com/doc/webapi/ISteamNews

Note: This API does not require an API key.
"""

from steam_webapi.client import SteamResult
from steam_webapi.endpoints.base import BaseEndpoint, endpoint


class ISteamNews(BaseEndpoint):
    """ISteamNews API endpoints for game news and announcements."""

    @endpoint(
        name="get_news_for_app",
        description=(
            "Get news articles and announcements for a specific game. "
            "Returns the 'appnews' payload (appid, newsitems, count)."
        ),
        params={
            "app_id": {
                "type": "integer",
                "description": "Steam App ID of the game (e.g., 440 for TF2, 730 for CS2)",
                "required": True,
            },
            "count": {
                "type": "integer",
                "description": "Number of news items to retrieve (default: 3)",
                "required": False,
                "default": 3,
                "minimum": 1,
            },
            "max_length": {
                "type": "integer",
                "description": "Maximum length of each item's contents (0 = full content)",
                "required": False,
                "default": 300,
                "minimum": 0,
            },
        },
    )
    async def get_news_for_app(
        self,
        app_id: int,
        count: int = 3,
        max_length: int = 300,
        format: str = "json",
        selector: str | None = None,
    ) -> SteamResult:
        """Get news for a specific game."""
        return await self.client.get_news_for_app(
            app_id, count, max_length, format, selector
        )
