import json
import logging
from typing import Iterator, List, Optional, Sequence

from pymonad.either import Either, Left, Right
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from . import logger_config
from .domain.errors import NotFoundError, TransportError, YouTubeApiError
from .domain.models import ItemDetail, PlaylistEntry, PlaylistInfo
from .duration import parse_duration

logger = logging.getLogger(__name__)

MAX_RESULTS = 50  # YouTube API maximum per request
THUMBNAIL_PREFERENCE = ("medium", "default")
NOT_FOUND_REASONS = frozenset(
    {"playlistNotFound", "playlistItemsNotAccessible", "playlistForbidden", "videoNotFound"}
)


def build_service(api_key: str) -> Either[TransportError, object]:
    """Builds a YouTube Data API v3 client authenticated by an API key."""
    try:
        logger.info("Building YouTube service with API key.")
        return Right(build("youtube", "v3", developerKey=api_key))
    except Exception as e:
        logger.error(f"Could not build the YouTube service: {e}")
        return Left(TransportError(f"Could not build the YouTube service: {e}"))


def _error_reasons(content: str) -> List[str]:
    """Reasons listed in a YouTube API error body, e.g. ``quotaExceeded``."""
    try:
        errors = json.loads(content)["error"]["errors"]
        return [error.get("reason", "") for error in errors if isinstance(error, dict)]
    except (ValueError, KeyError, TypeError):
        return []


def _api_error(e: HttpError, context: str) -> YouTubeApiError:
    """Converts an HttpError; only a 404 or a not-found reason means the resource is missing."""
    content = e.content.decode("utf-8") if isinstance(e.content, bytes) else str(e.content)
    status = getattr(e.resp, "status", None)
    message = f"API error during {context}: {content}"
    if status == 404 or NOT_FOUND_REASONS.intersection(_error_reasons(content)):
        return NotFoundError(message)
    return TransportError(message)


def get_playlist_info(youtube, playlist_id: str) -> Either[YouTubeApiError, PlaylistInfo]:
    """
    Retrieves the title and channel of a playlist.

    Args:
        youtube: A YouTube API client, see build_service.
        playlist_id: The playlist ID.

    Returns:
        Either: A Right(PlaylistInfo), or a Left(NotFoundError) when the playlist
        does not exist or is private, or a Left(TransportError).
    """
    try:
        logger.info(f"Fetching metadata of playlist '{playlist_id}'.")
        response = youtube.playlists().list(
            part="snippet,contentDetails",
            id=playlist_id,
        ).execute()

        items = response.get("items") or []
        if not items:
            error_message = f"Playlist '{playlist_id}' not found or is private."
            logger.error(f"Failed to fetch playlist metadata: {error_message}")
            return Left(NotFoundError(error_message))

        snippet = items[0].get("snippet", {})
        info = PlaylistInfo(
            playlist_id=playlist_id,
            title=snippet.get("title", ""),
            channel_name=snippet.get("channelTitle", ""),
            item_count=int(items[0].get("contentDetails", {}).get("itemCount", 0)),
        )
        logger.info(f"Playlist '{playlist_id}' found: '{info.title}'.")
        return Right(info)

    except HttpError as e:
        error = _api_error(e, "playlist lookup")
        logger.error(f"Failed to fetch playlist '{playlist_id}': {error.message}")
        return Left(error)
    except Exception as e:
        logger.error(f"An unexpected error occurred during playlist lookup: {e}")
        return Left(TransportError(f"An unexpected error occurred: {e}"))


def _iter_playlist_pages(youtube, playlist_id: str) -> Iterator[dict]:
    """Yields playlistItems pages until one comes back without a nextPageToken."""
    page_token: Optional[str] = None
    page_num = 0

    while True:
        page_num += 1
        logger.info(f"Fetching page {page_num} of playlist '{playlist_id}'.")
        response = youtube.playlistItems().list(
            part="contentDetails",
            playlistId=playlist_id,
            maxResults=MAX_RESULTS,
            pageToken=page_token,
        ).execute()
        yield response

        page_token = response.get("nextPageToken")
        if not page_token:
            return


def list_playlist_items(youtube, playlist_id: str) -> Either[YouTubeApiError, List[PlaylistEntry]]:
    """
    Retrieves every item ID of a playlist, following pagination.

    Positions are 1-based over the concatenation of all pages, in server order.

    Returns:
        Either: A Right(list of PlaylistEntry), or a Left(YouTubeApiError) if any
        page request fails.
    """
    entries: List[PlaylistEntry] = []
    try:
        for page in _iter_playlist_pages(youtube, playlist_id):
            for item in page.get("items", []):
                entries.append(
                    PlaylistEntry(
                        item_id=item["contentDetails"]["videoId"],
                        position=len(entries) + 1,
                    )
                )
    except HttpError as e:
        error = _api_error(e, "playlist item listing")
        logger.error(f"Failed to list items of playlist '{playlist_id}': {error.message}")
        return Left(error)
    except Exception as e:
        logger.error(f"An unexpected error occurred during item listing: {e}")
        return Left(TransportError(f"An unexpected error occurred: {e}"))

    logger.info(f"Found {len(entries)} items in playlist '{playlist_id}'.")
    return Right(entries)


def _thumbnail_url(snippet: dict) -> str:
    thumbnails = snippet.get("thumbnails") or {}
    for resolution in THUMBNAIL_PREFERENCE:
        url = (thumbnails.get(resolution) or {}).get("url")
        if url:
            return url
    return ""


def _fetch_batch(youtube, batch: Sequence[PlaylistEntry]) -> List[ItemDetail]:
    ids = [entry.item_id for entry in batch]
    response = youtube.videos().list(
        part="snippet,contentDetails",
        id=",".join(ids),
    ).execute()

    by_id = {item["id"]: item for item in response.get("items", [])}
    details = []
    for entry in batch:
        item = by_id.get(entry.item_id)
        if item is None:
            logger.warning(
                f"Video '{entry.item_id}' at position {entry.position} is unavailable, skipping."
            )
            continue
        snippet = item.get("snippet", {})
        details.append(
            ItemDetail(
                id=entry.item_id,
                title=snippet.get("title", ""),
                duration_seconds=parse_duration(item.get("contentDetails", {}).get("duration")),
                thumbnail_url=_thumbnail_url(snippet),
                position=entry.position,
            )
        )
    return details


def fetch_item_details(
    youtube, entries: Sequence[PlaylistEntry]
) -> Either[YouTubeApiError, List[ItemDetail]]:
    """
    Retrieves title, duration and thumbnail of each entry, 50 per request.

    Results come back in the order of ``entries`` and keep their positions.

    Returns:
        Either: A Right(list of ItemDetail), or a Left(YouTubeApiError) if any
        batch request fails.
    """
    details: List[ItemDetail] = []
    try:
        for offset in range(0, len(entries), MAX_RESULTS):
            batch = entries[offset:offset + MAX_RESULTS]
            logger.info(f"Fetching details of items {offset + 1} to {offset + len(batch)}.")
            details.extend(_fetch_batch(youtube, batch))
    except HttpError as e:
        error = _api_error(e, "video details lookup")
        logger.error(f"Failed to fetch video details: {error.message}")
        return Left(error)
    except Exception as e:
        logger.error(f"An unexpected error occurred during video details lookup: {e}")
        return Left(TransportError(f"An unexpected error occurred: {e}"))

    logger.info(f"Fetched details of {len(details)} videos.")
    return Right(details)
