from dataclasses import dataclass
from typing import Optional, Tuple

WATCH_URL = "https://www.youtube.com/watch?v={video_id}"


@dataclass(frozen=True)
class PlaylistEntry:
    """One enumerated playlist item and its 1-based position."""
    item_id: str
    position: int


@dataclass(frozen=True)
class PlaylistInfo:
    """Metadata of a YouTube playlist."""
    playlist_id: str
    title: str
    channel_name: str
    item_count: int = 0


@dataclass(frozen=True)
class ItemDetail:
    """Details of one video of a playlist."""
    id: str
    title: str
    duration_seconds: int
    thumbnail_url: str
    position: int

    @property
    def watch_url(self) -> str:
        return WATCH_URL.format(video_id=self.id)


@dataclass(frozen=True)
class RangeSelection:
    """1-based inclusive range of playlist positions."""
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start + 1


@dataclass(frozen=True)
class Aggregate:
    total_duration_seconds: int
    first_item: Optional[ItemDetail]
    last_item: Optional[ItemDetail]
    item_count: int
    average_duration_seconds: int


@dataclass(frozen=True)
class PlaylistResult:
    """Outcome of a duration calculation over a playlist."""
    reference_id: str
    title: str
    channel_name: str
    items: Tuple[ItemDetail, ...]
    total_duration_seconds: int
    playlist_item_count: int
    average_duration_seconds: int = 0
    first_item: Optional[ItemDetail] = None
    last_item: Optional[ItemDetail] = None
    selection: Optional[RangeSelection] = None

    @property
    def item_count(self) -> int:
        return len(self.items)
