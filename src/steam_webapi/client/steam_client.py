"""Steam Web API client.

This client provides one method per supported Steam Web API call. Every
method follows the same shape:
- Build the request URL from a fixed path and the caller's parameters
- Fetch it
- Decode the body per the requested format (json, xml or vdf)
- Return the whole payload or the value at a dotted selector path

Failures are never raised past the client; they come back as a
SteamResult tagged with a FailureReason.
"""

import logging
import os
import re
from typing import Any

import httpx
from dotenv import load_dotenv

from steam_webapi.client.operations import (
    ENDPOINTS,
    Operation,
    ResponseFormat,
    build_selector_path,
    parse_format,
    parse_operation,
)
from steam_webapi.client.results import (
    ConfigurationError,
    FailureReason,
    PathNotFound,
    SteamResult,
    resolve_path,
)


logger = logging.getLogger(__name__)

API_KEY_PATTERN = re.compile(r"[A-Za-z0-9]{32}")

# Log tag used for non-success responses, per raw format
_RAW_ERROR_TAGS = {
    ResponseFormat.XML: "The server returned an error",
    ResponseFormat.VDF: "Error fetching VDF",
}


def validate_api_key(api_key: str | None) -> str:
    """
    Check that an API key has the shape Steam issues.

    Args:
        api_key: Candidate Steam Web API key

    Returns:
        The key, unchanged

    Raises:
        ConfigurationError: If the key is missing or not 32 alphanumerics
    """
    if not api_key:
        raise ConfigurationError("A Steam Web API key was not found.")
    if not API_KEY_PATTERN.fullmatch(api_key):
        raise ConfigurationError(
            "The Steam Web API key provided is invalid. It must be a "
            "32-character alphanumeric string with no special characters."
        )
    return api_key


class SteamClient:
    """Async client for the Steam Web API."""

    BASE_URL = "http://api.steampowered.com"

    def __init__(
        self,
        api_key: str | None,
        base_url: str | None = None,
        timeout: float | None = 30.0,
    ):
        """
        Initialize Steam API client.

        Args:
            api_key: Steam Web API key (32 alphanumeric characters).
            base_url: Origin to send requests to. Defaults to BASE_URL.
            timeout: Request timeout in seconds, or None to wait indefinitely.

        Raises:
            ConfigurationError: If the API key is missing or malformed.
        """
        self._api_key = validate_api_key(api_key)
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self._client = httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_env(cls, **kwargs: Any) -> "SteamClient":
        """
        Build a client from the STEAM_API_KEY (or legacy STEAM_KEY) env var.

        A .env file in the working directory is loaded first.
        """
        load_dotenv()
        api_key = os.getenv("STEAM_API_KEY") or os.getenv("STEAM_KEY")
        return cls(api_key=api_key, **kwargs)

    @property
    def api_key(self) -> str:
        return self._api_key

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "SteamClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    def _build_url(self, operation: Operation, query: str, format: str | None) -> str:
        """Build Steam API URL; the format parameter always comes last."""
        path = ENDPOINTS[operation].path
        return f"{self.base_url}{path}?{query}&format={format or ''}"

    def _redact(self, url: str) -> str:
        return url.replace(self._api_key, "***")

    async def resolve(
        self,
        format: str | None,
        url: str,
        operation: Operation | str,
        selector: str | None = None,
    ) -> SteamResult:
        """
        Fetch a URL and extract the requested part of the response.

        Args:
            format: "json", "xml", "vdf", or empty for json
            url: Fully built request URL
            operation: Operation whose response prefix anchors the selector
            selector: Optional dotted path below the prefix (JSON only)

        Returns:
            SteamResult with the selected JSON value or raw XML/VDF text
        """
        op = parse_operation(operation)
        if op is None:
            logger.error(f"Invalid method: {operation}")
            return SteamResult.failure(
                FailureReason.UNKNOWN_OPERATION, f"Invalid method: {operation}"
            )

        fmt = parse_format(format)
        if fmt is None:
            logger.error(
                f"An unknown format was specified: {format!r}. Format is optional "
                "and defaults to json."
            )
            return SteamResult.failure(
                FailureReason.UNKNOWN_FORMAT, f"Unknown format: {format}"
            )

        logger.debug(f"GET {self._redact(url)}")
        try:
            response = await self._client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"The server returned an error: {e}")
            return SteamResult.failure(FailureReason.NETWORK_ERROR, f"HTTP error: {e}")

        if fmt is ResponseFormat.JSON:
            return self._select_json(response, op, selector)
        return self._raw_text(response, fmt)

    def _select_json(
        self,
        response: httpx.Response,
        operation: Operation,
        selector: str | None,
    ) -> SteamResult:
        """Decode a JSON response and walk the operation's selector path."""
        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"The server returned an error: {e}")
            return SteamResult.failure(
                FailureReason.DECODE_ERROR,
                f"Invalid JSON response: {e}",
                response.status_code,
            )

        path = build_selector_path(operation, selector)
        try:
            return SteamResult.success(resolve_path(data, path))
        except PathNotFound as e:
            logger.warning(f"Selector '{path}' did not match response: {e}")
            return SteamResult.failure(
                FailureReason.NOT_FOUND, str(e), response.status_code
            )

    def _raw_text(self, response: httpx.Response, fmt: ResponseFormat) -> SteamResult:
        """Return an XML or VDF body verbatim, failing on non-success status."""
        if not response.is_success:
            tag = _RAW_ERROR_TAGS[fmt]
            logger.error(f"{tag}: {response.status_code}")
            return SteamResult.failure(
                FailureReason.HTTP_ERROR,
                f"{tag}: {response.status_code}",
                response.status_code,
            )
        return SteamResult.success(response.text)

    # Steam Web API operations

    async def get_news_for_app(
        self,
        appid: int | str,
        count: int = 3,
        maxlength: int = 300,
        format: str | None = "json",
        selector: str | None = None,
    ) -> SteamResult:
        """
        Get news items for an app (ISteamNews/GetNewsForApp). No key is sent.

        Args:
            appid: Steam App ID
            count: Number of news entries
            maxlength: Maximum length of each entry's contents
            format: Response format
            selector: Dotted path below "appnews"
        """
        query = f"appid={appid}&count={count}&maxlength={maxlength}"
        url = self._build_url(Operation.NEWS, query, format)
        return await self.resolve(format, url, Operation.NEWS, selector)

    async def get_global_achievement_percentages_for_app(
        self,
        gameid: int | str,
        format: str | None = "json",
        selector: str | None = None,
    ) -> SteamResult:
        """Get global unlock percentages for a game's achievements. No key is sent."""
        query = f"gameid={gameid}"
        url = self._build_url(Operation.ACHIEVEMENT_PERCENTAGES, query, format)
        return await self.resolve(
            format, url, Operation.ACHIEVEMENT_PERCENTAGES, selector
        )

    async def get_player_summaries(
        self,
        steamids: str | list[str],
        format: str | None = "json",
        selector: str | None = None,
    ) -> SteamResult:
        """
        Get profile summaries for one or more players.

        Args:
            steamids: Comma-separated SteamID64s, or a list of them
            format: Response format
            selector: Dotted path below "response", e.g. "players"
        """
        if not isinstance(steamids, str):
            steamids = ",".join(str(sid) for sid in steamids)
        query = f"key={self._api_key}&steamids={steamids}"
        url = self._build_url(Operation.PLAYER_SUMMARIES, query, format)
        return await self.resolve(format, url, Operation.PLAYER_SUMMARIES, selector)

    async def get_friend_list(
        self,
        steamid: int | str,
        relationship: str = "friend",
        format: str | None = "json",
        selector: str | None = None,
    ) -> SteamResult:
        """Get a player's friend list. Only works for public profiles."""
        query = (
            f"key={self._api_key}&steamid={steamid}"
            f"&relationship={relationship}"
        )
        url = self._build_url(Operation.FRIEND_LIST, query, format)
        return await self.resolve(format, url, Operation.FRIEND_LIST, selector)

    async def get_player_achievements(
        self,
        steamid: int | str,
        appid: int | str,
        format: str | None = "json",
        selector: str | None = None,
    ) -> SteamResult:
        """Get a player's achievement progress for one game."""
        query = f"appid={appid}&key={self._api_key}&steamid={steamid}"
        url = self._build_url(Operation.PLAYER_ACHIEVEMENTS, query, format)
        return await self.resolve(format, url, Operation.PLAYER_ACHIEVEMENTS, selector)

    async def get_user_stats_for_game(
        self,
        steamid: int | str,
        appid: int | str,
        format: str | None = "json",
        selector: str | None = None,
    ) -> SteamResult:
        """Get a player's stats and achievements for one game."""
        query = f"appid={appid}&key={self._api_key}&steamid={steamid}"
        url = self._build_url(Operation.USER_STATS_FOR_GAME, query, format)
        return await self.resolve(format, url, Operation.USER_STATS_FOR_GAME, selector)

    async def get_owned_games(
        self,
        steamid: int | str,
        format: str | None = "json",
        selector: str | None = None,
        include_app_info: bool = True,
        include_played_free_games: bool = True,
    ) -> SteamResult:
        """
        Get the games a player owns.

        Args:
            steamid: SteamID64 of the player
            format: Response format
            selector: Dotted path below "response", e.g. "games"
            include_app_info: Ask Steam for names and icons
            include_played_free_games: Include played free-to-play games

        Note:
            The include flags are only ever sent as "true"; a false flag
            leaves the parameter out so Steam applies its own default.
        """
        flags = ""
        if include_app_info:
            flags += "&include_appinfo=true"
        if include_played_free_games:
            flags += "&include_played_free_games=true"

        query = f"key={self._api_key}&steamid={steamid}{flags}"
        url = self._build_url(Operation.OWNED_GAMES, query, format)
        return await self.resolve(format, url, Operation.OWNED_GAMES, selector)

    async def get_recently_played_games(
        self,
        steamid: int | str,
        format: str | None = "json",
        count: int | None = None,
        selector: str | None = None,
    ) -> SteamResult:
        """Get games played in the last two weeks, optionally capped at count."""
        count_param = f"&count={count}" if count else ""
        query = f"key={self._api_key}&steamid={steamid}{count_param}"
        url = self._build_url(Operation.RECENTLY_PLAYED_GAMES, query, format)
        return await self.resolve(
            format, url, Operation.RECENTLY_PLAYED_GAMES, selector
        )
