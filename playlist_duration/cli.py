import typer
import logging
from pathlib import Path
from typing import Optional, Tuple
from rich.console import Console
from rich.markup import escape
from toolz import pipe
from pymonad.either import Either

# App-specific imports
from .logger_config import setup_logger
from .config import Settings, load_settings
from .domain.errors import AppError
from .domain.models import ItemDetail, PlaylistResult
from .duration import format_duration
from .aggregator import project_speeds
from .identifier import resolve_playlist_id
from .service import fetch_playlist_data
from .i18n import get_message, set_lang, get_default_lang

# Initialization
console = Console()
logger = logging.getLogger(__name__)

# Create the Typer app object
app = typer.Typer(
    name="playlist-duration",
    help="Calculate the total watch time of a YouTube playlist.",
    add_completion=False,
)

# --- State and Callbacks ---

state = {"lang": get_default_lang(), "lang_explicit": False}
set_lang(state["lang"])


@app.callback()
def main_callback(
    lang: Optional[str] = typer.Option(
        None,
        "--lang",
        help=get_message("help_lang"),
        show_default=False,
    ),
    quiet: bool = typer.Option(False, "--quiet", help=get_message("help_quiet")),
):
    """Calculate the duration of YouTube playlists from the command line."""
    setup_logger(logging.WARNING if quiet else logging.INFO)
    state["lang_explicit"] = bool(lang)
    if lang:
        set_lang(lang)
        state["lang"] = lang
        logger.info(f"Language explicitly set to: {lang}")


# --- Helper Functions ---


def _handle_error(error: AppError) -> None:
    """Displays a formatted error message and exits the application."""
    console.print(f"[bold red]{get_message('error')}:[/bold red] {escape(error.message)}")
    raise typer.Exit(code=1)


def _print_item(key: str, item: ItemDetail) -> None:
    console.print(
        get_message(key, position=item.position, title=escape(item.title), url=item.watch_url),
        highlight=False,
    )


def _print_result(settings: Settings, data: PlaylistResult, show_days: bool) -> None:
    def fmt(seconds: int) -> str:
        return format_duration(seconds, show_days)

    console.print(f"[bold]{get_message('playlist_title', title=escape(data.title))}[/bold]")
    console.print(get_message("playlist_channel", channel=escape(data.channel_name)))
    console.print(
        get_message("video_count", count=data.item_count, total=data.playlist_item_count)
    )
    if data.selection:
        console.print(
            get_message("video_range", start=data.selection.start, end=data.selection.end)
        )
    else:
        console.print(get_message("video_range_all"))

    console.print(
        f"[bold green]✓ {get_message('total_duration', duration=fmt(data.total_duration_seconds))}[/bold green]"
    )
    console.print(get_message("average_duration", duration=fmt(data.average_duration_seconds)))

    if data.first_item and data.last_item:
        _print_item("first_video", data.first_item)
        _print_item("last_video", data.last_item)
    else:
        console.print(f"[yellow]{get_message('no_videos')}[/yellow]")

    for speed, seconds in project_speeds(data.total_duration_seconds, settings.speeds).items():
        console.print(get_message("speed_duration", speed=f"{speed:g}", duration=fmt(seconds)))


# --- CLI Commands ---


@app.command(name="calculate")
def calculate(
    playlist: str = typer.Argument(..., help=get_message("help_playlist")),
    start: Optional[str] = typer.Option(None, "--from", "-f", help=get_message("help_from")),
    end: Optional[str] = typer.Option(None, "--to", "-t", help=get_message("help_to")),
    api_key: Optional[str] = typer.Option(
        None, "--api-key", "-k", help=get_message("help_api_key")
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help=get_message("help_config"),
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    days: bool = typer.Option(False, "--days", help=get_message("help_days")),
):
    """Calculates the total duration of a playlist or of a range of its videos."""
    logger.info(f"Command 'calculate' initiated for: {playlist}")

    def apply_settings(settings: Settings) -> Settings:
        if not state["lang_explicit"]:
            set_lang(settings.lang)
        return settings

    def calculate_flow(settings: Settings) -> Either[AppError, Tuple[Settings, PlaylistResult]]:
        console.print(f"📡 {get_message('fetching_playlist', playlist_id=escape(playlist))}", highlight=False)
        return fetch_playlist_data(playlist, start, end, api_key=settings.api_key).map(
            lambda data: (settings, data)
        )

    result = pipe(
        load_settings(config_file, api_key),
        lambda e: e.map(apply_settings),
        lambda e: e.bind(calculate_flow),
    )

    if result.is_left():
        error, _ = result.monoid
        _handle_error(error)

    settings, data = result.value
    _print_result(settings, data, days or settings.show_days)


@app.command(name="resolve")
def resolve(
    playlist: str = typer.Argument(..., help=get_message("help_playlist")),
):
    """Prints the playlist ID found in a URL, without calling the API."""
    logger.info(f"Command 'resolve' initiated for: {playlist}")

    result = resolve_playlist_id(playlist)
    if result.is_left():
        error, _ = result.monoid
        _handle_error(error)

    console.print(get_message("playlist_id", playlist_id=result.value), highlight=False)


if __name__ == "__main__":
    app()
