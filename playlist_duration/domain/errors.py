# playlist_duration/domain/errors.py
from dataclasses import dataclass


@dataclass(frozen=True)
class AppError:
    """Base class for application errors."""
    message: str


@dataclass(frozen=True)
class InvalidReferenceError(AppError):
    """The input is neither a playlist ID nor a URL carrying one."""
    pass


@dataclass(frozen=True)
class InvalidRangeError(AppError):
    """The requested item range cannot be applied to the playlist.

    ``reason`` is one of ``not_a_number``, ``below_one``, ``exceeds_total``,
    ``start_after_end`` or ``empty``.
    """
    reason: str = "empty"


@dataclass(frozen=True)
class ConfigError(AppError):
    """Missing or malformed configuration."""
    pass


@dataclass(frozen=True)
class YouTubeApiError(AppError):
    """Error while talking to the YouTube Data API."""
    pass


@dataclass(frozen=True)
class NotFoundError(YouTubeApiError):
    """The playlist or its items do not exist or are not accessible."""
    pass


@dataclass(frozen=True)
class TransportError(YouTubeApiError):
    """Network or HTTP failure during an API exchange."""
    pass
