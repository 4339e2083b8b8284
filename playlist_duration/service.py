import logging
from typing import Optional, Union

from pymonad.either import Either

from . import youtube_api
from .aggregator import aggregate
from .domain.errors import AppError
from .domain.models import PlaylistInfo, PlaylistResult
from .identifier import resolve_playlist_id
from .range_selector import select_range, validate_range

logger = logging.getLogger(__name__)

Bound = Optional[Union[int, str]]


def _build_result(info: PlaylistInfo, total_count: int, selection, details) -> PlaylistResult:
    summary = aggregate(details)
    return PlaylistResult(
        reference_id=info.playlist_id,
        title=info.title,
        channel_name=info.channel_name,
        items=tuple(details),
        total_duration_seconds=summary.total_duration_seconds,
        playlist_item_count=total_count,
        average_duration_seconds=summary.average_duration_seconds,
        first_item=summary.first_item,
        last_item=summary.last_item,
        selection=selection,
    )


def _calculate(youtube, info: PlaylistInfo, start: Bound, end: Bound) -> Either[AppError, PlaylistResult]:
    def with_entries(entries):
        return validate_range(start, end, len(entries)).bind(
            lambda selection: select_range(entries, selection)
            .bind(lambda selected: youtube_api.fetch_item_details(youtube, selected))
            .map(lambda details: _build_result(info, len(entries), selection, details))
        )

    return youtube_api.list_playlist_items(youtube, info.playlist_id).bind(with_entries)


def fetch_playlist_data(
    raw_input: str, start: Bound = None, end: Bound = None, *, api_key: str
) -> Either[AppError, PlaylistResult]:
    """
    Computes the duration of a playlist, or of a range of its items.

    Args:
        raw_input: Playlist URL or ID.
        start: First position of the range (1-based), None for the beginning.
        end: Last position of the range (inclusive), None for the end.
        api_key: YouTube Data API key.

    Returns:
        Either: A Right(PlaylistResult), or a Left with an InvalidReferenceError,
        NotFoundError, InvalidRangeError or TransportError.
    """
    def with_playlist_id(playlist_id: str):
        logger.info(f"Calculating duration of playlist '{playlist_id}'.")
        return youtube_api.build_service(api_key).bind(
            lambda youtube: youtube_api.get_playlist_info(youtube, playlist_id).bind(
                lambda info: _calculate(youtube, info, start, end)
            )
        )

    result = resolve_playlist_id(raw_input).bind(with_playlist_id)
    if result.is_right():
        logger.info(
            f"Playlist '{result.value.reference_id}': {result.value.item_count} items, "
            f"{result.value.total_duration_seconds} seconds."
        )
    return result
