"""Steam API endpoint modules.

Each endpoint module represents a Steam API interface (ISteamUser, IPlayerService, etc.)
and exposes MCP tools for the client operations on that interface.
"""

from .base import BaseEndpoint, EndpointManager, endpoint
from .player_service import IPlayerService
from .steam_news import ISteamNews
from .steam_user import ISteamUser
from .user_stats import ISteamUserStats

ENDPOINT_CLASSES: tuple[type[BaseEndpoint], ...] = (
    ISteamNews,
    ISteamUserStats,
    ISteamUser,
    IPlayerService,
)

__all__ = ["BaseEndpoint", "EndpointManager", "endpoint", "ENDPOINT_CLASSES"]
