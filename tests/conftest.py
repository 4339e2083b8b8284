from unittest.mock import MagicMock

import pytest

from playlist_duration.i18n import set_lang


@pytest.fixture(autouse=True)
def english_messages():
    """Tests assert on English messages whatever the system locale."""
    set_lang("en")
    yield
    set_lang("en")


def playlist_page(video_ids, next_page_token=None):
    """Builds a playlistItems.list response."""
    page = {"items": [{"contentDetails": {"videoId": video_id}} for video_id in video_ids]}
    if next_page_token:
        page["nextPageToken"] = next_page_token
    return page


def video_item(video_id, duration="PT1M", title=None, thumbnails=None):
    """Builds one item of a videos.list response."""
    if thumbnails is None:
        thumbnails = {
            "default": {"url": f"https://i.ytimg.com/vi/{video_id}/default.jpg"},
            "medium": {"url": f"https://i.ytimg.com/vi/{video_id}/mqdefault.jpg"},
        }
    return {
        "id": video_id,
        "snippet": {"title": title or f"Video {video_id}", "thumbnails": thumbnails},
        "contentDetails": {"duration": duration},
    }


@pytest.fixture
def make_youtube():
    """
    Returns a factory for a mocked YouTube client.

    ``durations`` maps each video ID to its ISO 8601 duration; videos.list
    answers with the requested IDs that are present in it.
    """
    def factory(pages, durations, title="My Playlist", channel="My Channel"):
        youtube = MagicMock()

        youtube.playlists.return_value.list.return_value.execute.return_value = {
            "items": [
                {
                    "snippet": {"title": title, "channelTitle": channel},
                    "contentDetails": {"itemCount": sum(len(p["items"]) for p in pages)},
                }
            ]
        }
        youtube.playlistItems.return_value.list.return_value.execute.side_effect = list(pages)

        def videos_list(part, id):
            request = MagicMock()
            request.execute.return_value = {
                "items": [
                    video_item(video_id, durations[video_id])
                    for video_id in id.split(",")
                    if video_id in durations
                ]
            }
            return request

        youtube.videos.return_value.list.side_effect = videos_list
        return youtube

    return factory
