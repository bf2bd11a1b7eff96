"""Async client for a fixed set of Steam Web API calls."""

from steam_webapi.client import (
    ConfigurationError,
    FailureReason,
    Operation,
    ResponseFormat,
    SteamAPIError,
    SteamClient,
    SteamResult,
)

__version__ = "0.1.0"

__all__ = [
    "SteamClient",
    "SteamAPIError",
    "ConfigurationError",
    "FailureReason",
    "SteamResult",
    "Operation",
    "ResponseFormat",
]
