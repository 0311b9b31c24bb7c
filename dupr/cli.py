"""
Command-line interface for the DUPR API client.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from .auth import TokenStore
from .client import DuprClient
from .config import Settings
from .errors import DuprError
from .models.match import Match
from .models.player import Player

app = typer.Typer(
    name="dupr",
    help="DUPR API client - Command Line Interface",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """DUPR ratings from the command line."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


def get_client() -> DuprClient:
    """Get configured client instance."""
    try:
        return DuprClient(settings=Settings())
    except Exception as e:
        console.print(f"[red]Error creating client: {e}[/red]")
        raise typer.Exit(1)


def run(coro):
    """Run a coroutine, turning client errors into a red message and exit code 1."""
    try:
        return asyncio.run(coro)
    except DuprError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)


def players_table(title: str, players: list[Player]) -> Table:
    table = Table(title=title)
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="white")
    table.add_column("Doubles", justify="right")
    table.add_column("Singles", justify="right")
    table.add_column("Location", style="dim")

    for player in players:
        table.add_row(
            str(player.id),
            player.full_name,
            player.doubles or "NR",
            player.singles or "NR",
            player.short_address or "",
        )
    return table


@app.command()
def player(player_id: int = typer.Argument(help="Player user ID")) -> None:
    """Show a player's profile and ratings."""

    async def _run():
        async with get_client() as client:
            return await client.get_player(player_id)

    result = run(_run())

    info_text = "\n".join(
        [
            f"[white]ID:[/white] {result.id}",
            f"[white]Doubles:[/white] {result.doubles or 'NR'}",
            f"[white]Singles:[/white] {result.singles or 'NR'}",
            f"[white]Location:[/white] {result.short_address or 'Unknown'}",
        ]
    )
    console.print(Panel(info_text, title=result.full_name, border_style="blue"))


@app.command()
def lookup(dupr_id: str = typer.Argument(help="6-character DUPR ID")) -> None:
    """Convert a DUPR ID to a player user ID."""

    async def _run():
        async with get_client() as client:
            return await client.get_user_id_from_dupr_id(dupr_id)

    user_id = run(_run())
    console.print(f"[green]{dupr_id}[/green] -> user ID [cyan]{user_id}[/cyan]")


@app.command()
def search_players(
    query: str = typer.Argument(help="Name to search for"),
    limit: int = typer.Option(25, "--limit", "-n", help="Maximum players to show"),
) -> None:
    """Search for players by name."""

    async def _run():
        async with get_client() as client:
            return await client.search_players(query).collect(limit)

    players = run(_run())
    if not players:
        console.print(f"[yellow]No players found for '{query}'.[/yellow]")
        return
    console.print(players_table(f"Players matching '{query}'", players))


@app.command()
def search_clubs(
    query: str = typer.Argument("", help="Club name to search for"),
    limit: int = typer.Option(25, "--limit", "-n", help="Maximum clubs to show"),
) -> None:
    """Search for clubs."""

    async def _run():
        async with get_client() as client:
            return await client.search_clubs(query).collect(limit)

    clubs = run(_run())
    if not clubs:
        console.print(f"[yellow]No clubs found for '{query}'.[/yellow]")
        return

    table = Table(title="Clubs")
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="white")
    table.add_column("Members", justify="right")
    table.add_column("Location", style="dim")
    for club in clubs:
        table.add_row(
            str(club.id),
            club.name,
            str(club.member_count) if club.member_count is not None else "",
            club.display_location,
        )
    console.print(table)


@app.command()
def club_members(
    club_id: int = typer.Argument(help="Club ID"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", help="Maximum members to show"),
) -> None:
    """List the members of a club."""

    async def _run():
        async with get_client() as client:
            return await client.get_club_members(club_id).collect(limit)

    members = run(_run())
    if not members:
        console.print(f"[yellow]Club {club_id} has no members.[/yellow]")
        return
    console.print(players_table(f"Club {club_id} members", members))


@app.command()
def submit_match(
    match_file: Path = typer.Argument(help="JSON file with the match payload"),
    club_id: Optional[int] = typer.Option(None, "--club-id", help="Club to record the match under"),
) -> None:
    """Submit a match result to a club."""

    try:
        payload = json.loads(match_file.read_text())
    except (OSError, ValueError) as e:
        console.print(f"[red]Could not read match file: {e}[/red]")
        raise typer.Exit(1)

    async def _run():
        match = Match.from_api_data(payload)
        async with get_client() as client:
            return await client.submit_match(club_id, match)

    response = run(_run())
    console.print("[green]✓ Match submitted[/green]")
    console.print_json(data=response)


@app.command()
def refresh_token() -> None:
    """Authenticate and print the current refresh token."""

    async def _run():
        async with get_client() as client:
            return await client.get_refresh_token()

    console.print(run(_run()))


@app.command()
def logout() -> None:
    """Remove the cached token pair."""
    settings = Settings()
    TokenStore(settings.token_path).clear()
    console.print(f"[green]✓ Removed cached tokens at {settings.token_path}[/green]")


if __name__ == "__main__":
    app()
