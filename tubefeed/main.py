"""CLI for tubefeed using Typer."""

import asyncio
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from .client import Innertube
from .config import get_settings, show_settings
from .core.feed import Feed
from .core.filterable_feed import FilterableFeed
from .errors import InnertubeError, NoContinuationError, NotFoundError
from .utils import setup_logging
from .youtube.channel import Channel
from .youtube.settings import Settings

# Load .env from the working directory only
load_dotenv(Path.cwd() / ".env", override=False)

# CLI styles
STYLE_HEADER = "bold blue"
STYLE_SUCCESS = "bold green"
STYLE_WARNING = "bold yellow"
STYLE_ERROR = "bold red"

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="tubefeed",
    help="tubefeed - Browse channel feeds and settings pages from the command line.",
    add_completion=False,
)
console = Console()


def _configure_logging(verbose: Optional[bool]) -> None:
    """Configure logging from the flag, falling back to the configured default."""
    setup_logging(verbose if verbose is not None else get_settings().verbose)


def _print_not_found(e: NotFoundError) -> None:
    console.print(f"[{STYLE_ERROR}]{e}[/{STYLE_ERROR}]")
    if e.available:
        console.print(f"Available: {', '.join(e.available)}")


def _print_videos(feed: Feed, page_number: int) -> None:
    table = Table(title=f"Page {page_number}", show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Title")
    table.add_column("Views", justify="right")
    table.add_column("Published")
    for index, video in enumerate(feed.videos, start=1):
        table.add_row(str(index), str(video.title), str(video.short_view_count), str(video.published))
    console.print(table)


async def _show_channel(channel_id: str, tab: Optional[str], filter_text: Optional[str], pages: int) -> None:
    async with Innertube() as yt:
        channel = await yt.get_channel(channel_id)
        title = channel.metadata.get("title") or channel_id
        console.print(f"[{STYLE_HEADER}]{title}[/{STYLE_HEADER}]")
        console.print(f"Tabs: {', '.join(channel.tabs) or '(none)'}")

        if tab:
            opened = await channel.get_tab_by_url(tab)
            channel = Channel(channel.actions, opened.page, True)

        feed: Feed = channel
        if filter_text:
            feed = await channel.apply_filter(filter_text)

        if isinstance(feed, FilterableFeed):
            console.print(f"Filters: {', '.join(feed.filters) or '(none)'}")
            if feed.applied_filter is not None:
                console.print(f"Applied filter: {feed.applied_filter.text}")

        for page_number in range(1, pages + 1):
            _print_videos(feed, page_number)
            if page_number == pages:
                break
            try:
                feed = await feed.get_continuation()
            except NoContinuationError:
                console.print(f"[{STYLE_WARNING}]End of feed reached.[/{STYLE_WARNING}]")
                break


async def _show_settings(item: Optional[str]) -> None:
    async with Innertube() as yt:
        page: Settings = await yt.get_settings()
        if item:
            page = await page.select_sidebar_item(item)

        if page.introduction is not None:
            console.print(f"[{STYLE_HEADER}]{page.introduction.header_text}[/{STYLE_HEADER}]")
        if page.sidebar is not None:
            console.print(f"Sidebar: {', '.join(page.sidebar_items)}")
        for section in page.sections:
            console.print(f"\n[{STYLE_HEADER}]{section.title or '(untitled)'}[/{STYLE_HEADER}]")
        options = page.setting_options
        if options:
            console.print("\nOptions:")
            for option in options:
                console.print(f"  - {option}")


@app.command()
def channel(
    channel_id: Annotated[str, typer.Argument(help="Channel ID, e.g. UC...")],
    tab: Annotated[Optional[str], typer.Option(help="Tab URL fragment, e.g. videos")] = None,
    filter_text: Annotated[Optional[str], typer.Option("--filter", help="Filter chip to apply")] = None,
    pages: Annotated[int, typer.Option(min=1, help="Number of pages to fetch")] = 1,
    verbose: Annotated[Optional[bool], typer.Option(help="Verbose output")] = None,
):
    """
    Show a channel's tabs, filters and videos.

    Follows continuations for up to --pages pages, keeping the applied filter.
    """
    _configure_logging(verbose)
    try:
        asyncio.run(_show_channel(channel_id, tab, filter_text, pages))
    except NotFoundError as e:
        _print_not_found(e)
        raise typer.Exit(1)
    except InnertubeError as e:
        console.print(f"[{STYLE_ERROR}]Error: {e}[/{STYLE_ERROR}]")
        raise typer.Exit(1)


@app.command()
def settings(
    item: Annotated[Optional[str], typer.Option(help="Sidebar item to open")] = None,
    verbose: Annotated[Optional[bool], typer.Option(help="Verbose output")] = None,
):
    """
    Show the account settings page.

    Needs TUBEFEED_COOKIE set to the cookie of a signed-in session.
    """
    _configure_logging(verbose)
    try:
        asyncio.run(_show_settings(item))
    except NotFoundError as e:
        _print_not_found(e)
        raise typer.Exit(1)
    except InnertubeError as e:
        console.print(f"[{STYLE_ERROR}]Error: {e}[/{STYLE_ERROR}]")
        raise typer.Exit(1)


# Config subcommand group
config_app = typer.Typer(help="Configuration commands.")
app.add_typer(config_app, name="config")


@config_app.command("show")
def config_show():
    """
    Show current configuration.

    Displays settings resolved from environment variables, .env and defaults.
    """
    console.print(show_settings(get_settings()))


if __name__ == "__main__":
    app()
