"""Static operation table for the supported Steam Web API calls.

Each operation maps to a fixed endpoint path and to the top-level key under
which Steam wraps its payload. Steam is inconsistent about that wrapper:
- Most use: {"response": {...}}
- Stats use: {"playerstats": {...}}
- News uses: {"appnews": {...}}
"""

from dataclasses import dataclass
from enum import Enum


class Operation(str, Enum):
    """Identifiers for the supported Steam Web API calls."""

    NEWS = "getNewsForApp"
    ACHIEVEMENT_PERCENTAGES = "getGlobalAchievementPercentagesForApp"
    PLAYER_SUMMARIES = "getPlayerSummaries"
    FRIEND_LIST = "getFriendList"
    PLAYER_ACHIEVEMENTS = "getPlayerAchievements"
    USER_STATS_FOR_GAME = "getUserStatsForGame"
    OWNED_GAMES = "getOwnedGames"
    RECENTLY_PLAYED_GAMES = "getRecentlyPlayedGames"


class ResponseFormat(str, Enum):
    """Response encodings Steam can return."""

    JSON = "json"
    XML = "xml"
    VDF = "vdf"


@dataclass(frozen=True)
class EndpointDescriptor:
    """Location of a Steam Web API method."""

    interface: str
    method: str
    version: str

    @property
    def path(self) -> str:
        return f"/{self.interface}/{self.method}/{self.version}/"


ENDPOINTS: dict[Operation, EndpointDescriptor] = {
    Operation.NEWS: EndpointDescriptor("ISteamNews", "GetNewsForApp", "v0002"),
    Operation.ACHIEVEMENT_PERCENTAGES: EndpointDescriptor(
        "ISteamUserStats", "GetGlobalAchievementPercentagesForApp", "v002"
    ),
    Operation.PLAYER_SUMMARIES: EndpointDescriptor(
        "ISteamUser", "GetPlayerSummaries", "v0002"
    ),
    Operation.FRIEND_LIST: EndpointDescriptor("ISteamUser", "GetFriendList", "v0001"),
    Operation.PLAYER_ACHIEVEMENTS: EndpointDescriptor(
        "ISteamUserStats", "GetPlayerAchievements", "v0001"
    ),
    Operation.USER_STATS_FOR_GAME: EndpointDescriptor(
        "ISteamUserStats", "GetUserStatsForGame", "v0002"
    ),
    Operation.OWNED_GAMES: EndpointDescriptor("IPlayerService", "GetOwnedGames", "v0001"),
    Operation.RECENTLY_PLAYED_GAMES: EndpointDescriptor(
        "IPlayerService", "GetRecentlyPlayedGames", "v0001"
    ),
}

# Top-level wrapper key of each operation's JSON response
RESPONSE_PREFIXES: dict[Operation, str] = {
    Operation.NEWS: "appnews",
    Operation.ACHIEVEMENT_PERCENTAGES: "achievementpercentages",
    Operation.PLAYER_SUMMARIES: "response",
    Operation.FRIEND_LIST: "friendslist",
    Operation.PLAYER_ACHIEVEMENTS: "playerstats",
    Operation.USER_STATS_FOR_GAME: "playerstats",
    Operation.OWNED_GAMES: "response",
    Operation.RECENTLY_PLAYED_GAMES: "response",
}


def parse_operation(operation: "Operation | str") -> Operation | None:
    """Return the Operation for an identifier, or None if it is not supported."""
    if isinstance(operation, Operation):
        return operation
    try:
        return Operation(operation)
    except ValueError:
        return None


def parse_format(format: str | None) -> ResponseFormat | None:
    """
    Return the ResponseFormat for a format string.

    An empty or missing format means JSON. Unrecognized strings return None.
    """
    if not format:
        return ResponseFormat.JSON
    try:
        return ResponseFormat(format)
    except ValueError:
        return None


def build_selector_path(operation: Operation, selector: str | None = None) -> str:
    """Join an operation's response prefix with an optional dotted selector."""
    prefix = RESPONSE_PREFIXES[operation]
    if selector:
        return f"{prefix}.{selector}"
    return prefix
