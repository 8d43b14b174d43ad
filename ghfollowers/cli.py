"""Command-line interface for ghfollowers."""

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ghfollowers import AppConfig, AppContext, __version__
from ghfollowers.exceptions import GHFollowersError
from ghfollowers.core.follower_list import FollowerListController

app = typer.Typer(
    name="ghfollowers",
    help="Browse GitHub followers and keep favorites",
    add_completion=False,
)
favorites_app = typer.Typer(help="Manage favorite users")
app.add_typer(favorites_app, name="favorites")

console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"ghfollowers version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """ghfollowers - GitHub followers browser."""
    pass


@app.command()
def followers(
    username: str = typer.Argument(..., help="GitHub username"),
    filter_term: Optional[str] = typer.Option(
        None, "--filter", "-f", help="Only show logins containing this text"
    ),
    pages: int = typer.Option(1, "--pages", "-p", min=1, help="Number of pages to load"),
    all_pages: bool = typer.Option(False, "--all", "-a", help="Load every page"),
    favorite: bool = typer.Option(
        False, "--favorite", help="Add the user to favorites after listing"
    ),
):
    """List a user's followers."""
    username = _require_username(username)
    config = AppConfig()

    async def run():
        async with AppContext(config) as ctx:
            controller = ctx.follower_list()
            await controller.start(username)
            while controller.has_more and (all_pages or controller.page < pages):
                await controller.load_next_page()

            if filter_term:
                controller.set_filter(filter_term)
            _print_followers(controller)

            if favorite:
                added = await controller.add_target_to_favorites()
                console.print(f"[green]Success![/green] You have successfully favorited {escape(added.login)}!")

    _run(run())


@app.command()
def info(
    username: str = typer.Argument(..., help="GitHub username"),
):
    """Show profile details for a user."""
    username = _require_username(username)
    config = AppConfig()

    async def run():
        async with AppContext(config) as ctx:
            user = await ctx.client.fetch_profile(username)

        table = Table(title=escape(user.login), show_header=False)
        table.add_column("Field", style="dim")
        table.add_column("Value")

        table.add_row("Name", escape(user.name or "-"))
        table.add_row("Location", escape(user.location or "-"))
        table.add_row("Bio", escape(user.bio or "No bio available"))
        table.add_row("Public Repos", f"{user.public_repos:,}")
        table.add_row("Public Gists", f"{user.public_gists:,}")
        table.add_row("Followers", f"{user.followers:,}")
        table.add_row("Following", f"{user.following:,}")
        table.add_row("Profile", escape(user.html_url))
        console.print(table)
        console.print(f"GitHub since {user.member_since}")

        if not user.has_followers:
            console.print("[dim]This user has no followers. What a shame[/dim]")

    _run(run())


@app.command()
def avatar(
    username: str = typer.Argument(..., help="GitHub username"),
    output: Path = typer.Option(..., "--output", "-o", help="File to write the image to"),
):
    """Download a user's avatar."""
    username = _require_username(username)
    config = AppConfig()

    async def run():
        async with AppContext(config) as ctx:
            user = await ctx.client.fetch_profile(username)
            image = await ctx.client.fetch_image(user.avatar_url)

        if image is None:
            console.print(f"[yellow]No avatar available for {escape(user.login)}[/yellow]")
            raise typer.Exit(1)

        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_bytes(image.data)
        console.print(f"[dim]Saved {image.size:,} bytes ({image.content_type}) to {escape(str(output))}[/dim]")

    _run(run())


@favorites_app.command("list")
def favorites_list():
    """Show saved favorites."""
    config = AppConfig()

    async def run():
        async with AppContext(config) as ctx:
            favorites = await ctx.favorites.retrieve()

        if not favorites:
            console.print("No Favorites?\nAdd one on the follower screen.")
            return

        table = Table(title=f"Favorites ({len(favorites)})")
        table.add_column("Login")
        table.add_column("Avatar", style="dim")
        for favorite in favorites:
            table.add_row(escape(favorite.login), escape(favorite.avatar_url))
        console.print(table)

    _run(run())


@favorites_app.command("add")
def favorites_add(
    username: str = typer.Argument(..., help="GitHub username"),
):
    """Add a user to favorites."""
    username = _require_username(username)
    config = AppConfig()

    async def run():
        async with AppContext(config) as ctx:
            user = await ctx.client.fetch_profile(username)
            await ctx.favorites.add(user.to_follower())
        console.print(f"[green]Success![/green] You have successfully favorited {escape(user.login)}!")

    _run(run())


@favorites_app.command("remove")
def favorites_remove(
    username: str = typer.Argument(..., help="GitHub username"),
):
    """Remove a user from favorites."""
    username = _require_username(username)
    config = AppConfig()

    async def run():
        async with AppContext(config) as ctx:
            await ctx.favorites.remove(username)
        console.print(f"[green]✓[/green] Removed {escape(username)} from favorites")

    _run(run())


def _require_username(username: str) -> str:
    """Normalize username input, exiting when nothing usable is left."""
    username = username.strip().lstrip("@")
    if not username:
        _print_error("Empty Username", "Please enter a username. We need to know who to look for.")
        raise typer.Exit(1)
    return username


def _run(coro) -> None:
    """Run a command coroutine, turning library errors into alerts."""
    try:
        asyncio.run(coro)
    except GHFollowersError as e:
        _print_error(e.title, e.message)
        raise typer.Exit(1)


def _print_error(title: str, message: str) -> None:
    console.print(f"[red bold]{title}[/red bold]\n{message}")


def _print_followers(controller: FollowerListController):
    """Print the controller's active view."""
    if controller.is_empty:
        console.print("[bold]No Followers[/bold]\nThis user has no followers. Go follow them!")
        return

    if controller.no_filter_results:
        console.print(f"[dim]No followers match '{escape(controller.filter_term)}'[/dim]")
        return

    view = controller.active_view
    table = Table(title=f"{escape(controller.username)}'s followers")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Login")
    for i, follower in enumerate(view, start=1):
        table.add_row(str(i), escape(follower.login))
    console.print(table)

    more = " (more available)" if controller.has_more else ""
    console.print(f"[dim]{len(view)} of {len(controller.followers)} loaded{more}[/dim]")


if __name__ == "__main__":
    app()
