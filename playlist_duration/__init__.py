"""Total watch time of YouTube playlists."""

from .service import fetch_playlist_data

__version__ = "0.1.0"

__all__ = ["fetch_playlist_data", "__version__"]
