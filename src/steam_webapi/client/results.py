"""Typed call results and dotted-path lookup into decoded responses."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class SteamAPIError(Exception):
    """Base exception for Steam API errors."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ConfigurationError(SteamAPIError, ValueError):
    """Raised when the client is constructed without a usable API key."""

    pass


class FailureReason(Enum):
    """Why a call produced no value."""

    UNKNOWN_OPERATION = "unknown_operation"
    UNKNOWN_FORMAT = "unknown_format"
    NETWORK_ERROR = "network_error"
    HTTP_ERROR = "http_error"
    DECODE_ERROR = "decode_error"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class SteamResult:
    """Outcome of a Steam Web API call.

    Exactly one of ``value`` (on success) or ``error`` (on failure) is
    meaningful. A successful call may still carry ``None`` as its value when
    Steam itself returned ``null`` at the selected path.
    """

    value: Any = None
    error: FailureReason | None = None
    message: str = ""
    status_code: int | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Any) -> "SteamResult":
        return cls(value=value)

    @classmethod
    def failure(
        cls,
        reason: FailureReason,
        message: str,
        status_code: int | None = None,
    ) -> "SteamResult":
        return cls(error=reason, message=message, status_code=status_code)

    def unwrap(self) -> Any:
        """
        Return the value, raising on failure.

        Raises:
            SteamAPIError: If the call failed
        """
        if self.error is not None:
            raise SteamAPIError(
                f"{self.error.value}: {self.message}", self.status_code
            )
        return self.value


class PathNotFound(Exception):
    """Raised by resolve_path when a segment is missing."""

    def __init__(self, segment: str, resolved: str):
        super().__init__(segment, resolved)
        self.segment = segment
        self.resolved = resolved

    def __str__(self) -> str:
        where = f"'{self.resolved}'" if self.resolved else "the response root"
        return f"Key '{self.segment}' not found under {where}"


def resolve_path(data: Any, path: str) -> Any:
    """
    Walk a dotted path into a decoded JSON structure.

    Mapping segments are looked up by key; list segments must be a
    non-negative integer index.

    Args:
        data: Decoded JSON (dicts, lists and scalars)
        path: Dotted path, e.g. "appnews.newsitems.0.title"

    Returns:
        The value at the end of the path

    Raises:
        PathNotFound: If any segment does not exist
    """
    current = data
    walked: list[str] = []

    for segment in path.split("."):
        if isinstance(current, dict) and segment in current:
            current = current[segment]
        elif (
            isinstance(current, list)
            and segment.isascii()
            and segment.isdigit()
            and int(segment) < len(current)
        ):
            current = current[int(segment)]
        else:
            raise PathNotFound(segment, ".".join(walked))
        walked.append(segment)

    return current
