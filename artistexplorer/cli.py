"""Command-line interface using Click."""

from __future__ import annotations

import json
import sys
from concurrent.futures import wait
from typing import List, Optional

import click
from rich.table import Table

from . import __version__
from .exceptions import ArtistExplorerError, CredentialsError
from .logger import console, get_logger, set_verbose
from .session import SearchSession
from .sources.base import Artist
from .sources.spotify.client import SpotifyClient, artists_as_dicts

logger = get_logger(__name__)

EMPTY_QUERY_MESSAGE = "Please enter an artist name."
NO_RESULTS_MESSAGE = "No artists found."


def clean_query(query: str) -> str:
    """Trim the query, rejecting it when nothing is left."""
    query = query.strip()
    if not query:
        raise click.BadParameter(EMPTY_QUERY_MESSAGE, param_hint="QUERY")
    return query


def format_followers(followers: int) -> str:
    return f"Followers: {followers:,}"


def build_results_table(artists: List[Artist]) -> Table:
    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Artist")
    table.add_column("Followers", justify="right")
    table.add_column("Image")
    for i, artist in enumerate(artists):
        table.add_row(str(i), artist.name, f"{artist.followers:,}", artist.image_url or "-")
    return table


def show_results(query: str, artists: List[Artist]) -> None:
    click.echo(f"Showing Results For: {query}")
    if not artists:
        click.echo(NO_RESULTS_MESSAGE)
        return
    console.print(build_results_table(artists))


def run_search(credentials_path: Optional[str], query: str) -> Optional[List[Artist]]:
    """Run one search; errors are logged and reported as ``None``."""
    try:
        client = SpotifyClient(properties_path=credentials_path)
        return client.search_artists(query)
    except CredentialsError as e:
        logger.error(f"Credentials unavailable: {e}")
    except ArtistExplorerError as e:
        logger.error(f"{type(e).__name__}: {e}")
    return None


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--credentials",
    "credentials_path",
    type=click.Path(dir_okay=False),
    envvar="ARTISTEXPLORER_CREDENTIALS",
    help="Properties file with client_id and client_secret",
)
@click.pass_context
def cli(ctx, verbose, credentials_path):
    """Search the Spotify catalog for artists."""
    set_verbose(verbose)
    ctx.ensure_object(dict)
    ctx.obj["credentials_path"] = credentials_path


@cli.command()
@click.argument("query")
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON")
@click.pass_context
def search(ctx, query, as_json):
    """Search for artists matching QUERY."""
    query = clean_query(query)
    artists = run_search(ctx.obj["credentials_path"], query)
    if artists is None:
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(artists_as_dicts(artists), indent=2))
        return

    show_results(query, artists)


@cli.command()
@click.argument("query")
@click.option("--index", "-i", type=click.IntRange(min=0), default=0, help="Result to show (0 = first)")
@click.pass_context
def details(ctx, query, index):
    """Show details for one artist from the results for QUERY."""
    query = clean_query(query)
    artists = run_search(ctx.obj["credentials_path"], query)
    if artists is None:
        sys.exit(1)
    if index >= len(artists):
        raise click.BadParameter(f"only {len(artists)} results for '{query}'", param_hint="--index")

    artist = artists[index]
    click.echo(artist.name)
    click.echo(format_followers(artist.followers))
    if artist.image_url:
        click.echo(f"Image: {artist.image_url}")


@cli.command()
@click.pass_context
def shell(ctx):
    """Search interactively until 'quit' is entered."""
    try:
        client = SpotifyClient(properties_path=ctx.obj["credentials_path"])
    except CredentialsError as e:
        logger.error(f"Credentials unavailable: {e}")
        sys.exit(1)

    session = SearchSession(client)
    while True:
        query = click.prompt("Artist", default="", show_default=False).strip()
        if query.lower() in ("quit", "exit"):
            return
        if not query:
            click.echo(EMPTY_QUERY_MESSAGE)
            continue

        wait([session.submit(query)])
        if session.query == query and session.last_error is None:
            show_results(query, session.artists)


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
