import pytest

from playlist_duration.identifier import resolve_playlist_id
from playlist_duration.domain.errors import InvalidReferenceError

RAW_ID = "PLrAXtmErZgOeiKm4sgNOknGvNjby9efdf"


def test_raw_identifier_is_returned_unchanged():
    assert len(RAW_ID) == 34
    result = resolve_playlist_id(RAW_ID)

    assert result.is_right()
    assert result.value == RAW_ID


def test_raw_identifier_is_trimmed():
    result = resolve_playlist_id(f"  {RAW_ID}\n")

    assert result.value == RAW_ID


def test_raw_identifier_with_dash_and_underscore():
    raw = "PL_" + "-" * 31
    assert resolve_playlist_id(raw).value == raw


@pytest.mark.parametrize(
    "url",
    [
        "https://x/playlist?list=ABC",
        "https://x/embed/videoseries?list=ABC",
        "https://x/y?list=ABC&z=1",
        "https://www.youtube.com/watch?v=dQw4w9WgXcQ&list=ABC&index=2",
        "https://www.youtube.com/playlist?list=ABC#comments",
    ],
)
def test_list_parameter_is_extracted_from_url(url):
    result = resolve_playlist_id(url)

    assert result.is_right()
    assert result.value == "ABC"


def test_full_url_with_real_identifier():
    result = resolve_playlist_id(f"https://www.youtube.com/playlist?list={RAW_ID}")

    assert result.value == RAW_ID


@pytest.mark.parametrize(
    "raw",
    ["", "   ", "https://www.youtube.com/watch?v=dQw4w9WgXcQ", "not a playlist", RAW_ID[:-1]],
)
def test_invalid_input_is_rejected(raw, caplog):
    """
    LDD: Verifies the error log.
    """
    result = resolve_playlist_id(raw)

    assert result.is_left()
    error_value, _ = result.monoid
    assert isinstance(error_value, InvalidReferenceError)
    assert "Could not extract a playlist ID" in caplog.text
