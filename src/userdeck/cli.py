"""CLI interface using typer."""

import asyncio
import logging

import typer

from .app import create_app
from .config import settings
from .models import Success
from .output import TerminalView

app = typer.Typer(
    name="userdeck",
    help="Searchable user directory from a remote JSON endpoint",
    no_args_is_help=True,
)


async def _show(endpoint: str | None, search: str | None, view: TerminalView) -> bool:
    """Load once, optionally filter, and report whether the load succeeded."""
    config = settings
    if endpoint:
        config = settings.model_copy(update={"endpoint_url": endpoint})

    async with create_app(view, config) as deck:
        outcome = await deck.start()
        if search:
            deck.search(search)

    return isinstance(outcome, Success)


@app.command()
def show(
    search: str = typer.Option(None, "-s", "--search", help="Filter by name, email, username or company"),
    endpoint: str = typer.Option(None, "-e", "--endpoint", help="Override the endpoint URL"),
    as_json: bool = typer.Option(False, "--json", help="Print cards as JSON"),
):
    """Fetch users and print them as cards."""
    logging.basicConfig(level=settings.log_level.upper())

    view = TerminalView(as_json=as_json)
    ok = asyncio.run(_show(endpoint, search, view))
    if not ok:
        raise typer.Exit(code=1)

    view.flush()


@app.command()
def version():
    """Show version."""
    from . import __version__

    typer.echo(f"userdeck {__version__}")


if __name__ == "__main__":
    app()
