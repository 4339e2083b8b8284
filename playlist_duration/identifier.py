import logging
import re

from pymonad.either import Either, Left, Right

from .domain.errors import InvalidReferenceError

logger = logging.getLogger(__name__)

PLAYLIST_ID_RE = re.compile(r"^[A-Za-z0-9_-]{34}$")

# Tried in order, first match wins.
PLAYLIST_URL_PATTERNS = (
    re.compile(r"[&?]list=([^&#]+)"),
    re.compile(r"playlist\?list=([^&#]+)"),
    re.compile(r"embed/videoseries\?list=([^&#]+)"),
)


def resolve_playlist_id(raw_input: str) -> Either[InvalidReferenceError, str]:
    """
    Extracts the playlist ID from a raw ID or a YouTube URL.

    Args:
        raw_input: A 34-character playlist ID, or a URL with a ``list`` parameter.

    Returns:
        Either: A Right(playlist_id), or a Left(InvalidReferenceError).
    """
    candidate = (raw_input or "").strip()

    if PLAYLIST_ID_RE.match(candidate):
        return Right(candidate)

    for pattern in PLAYLIST_URL_PATTERNS:
        match = pattern.search(candidate)
        if match:
            logger.info(f"Playlist ID '{match.group(1)}' extracted from URL.")
            return Right(match.group(1))

    logger.error(f"Could not extract a playlist ID from '{candidate}'.")
    return Left(InvalidReferenceError("Invalid YouTube playlist URL or ID."))
