"""Steam API client module."""

from .operations import Operation, ResponseFormat
from .results import ConfigurationError, FailureReason, SteamAPIError, SteamResult
from .steam_client import SteamClient

__all__ = [
    "SteamClient",
    "SteamAPIError",
    "ConfigurationError",
    "FailureReason",
    "SteamResult",
    "Operation",
    "ResponseFormat",
]
