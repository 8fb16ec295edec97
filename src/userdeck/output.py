"""Terminal rendering of user cards."""

import json
from collections.abc import Sequence
from dataclasses import asdict

import typer

from .presenter import Card


class TerminalView:
    """View that keeps the latest display state and prints it on demand."""

    def __init__(self, as_json: bool = False):
        self.as_json = as_json
        self.loading = False
        self.refresh_enabled = True
        self.cards: list[Card] = []
        self.no_results = False
        self.error: str | None = None
        self.count = 0
        self.timestamp: str | None = None

    def set_loading(self, active: bool) -> None:
        self.loading = active

    def set_refresh_enabled(self, enabled: bool) -> None:
        self.refresh_enabled = enabled

    def render_cards(self, cards: Sequence[Card]) -> None:
        self.cards = list(cards)

    def clear_cards(self) -> None:
        self.cards = []

    def set_no_results(self, visible: bool) -> None:
        self.no_results = visible

    def show_error(self, message: str) -> None:
        self.error = message
        typer.echo(f"Error: {message}", err=True)

    def hide_error(self) -> None:
        self.error = None

    def set_count(self, count: int) -> None:
        self.count = count

    def set_timestamp(self, text: str) -> None:
        self.timestamp = text

    def to_json(self) -> str:
        """Serialize the rendered cards."""
        return json.dumps([asdict(card) for card in self.cards], indent=2, ensure_ascii=False)

    def flush(self):
        """Print the current display state."""
        if self.as_json:
            typer.echo(self.to_json())
            return

        if self.no_results:
            typer.echo("No users found.")
        for card in self.cards:
            typer.echo(format_card(card))
            typer.echo("")
        typer.echo(f"Users: {self.count}")
        if self.timestamp:
            typer.echo(f"Last updated: {self.timestamp}")


def format_card(card: Card) -> str:
    """Plain-text block for one card."""
    return "\n".join([
        f"[{card.avatar}] {card.name} ({card.handle})",
        f"  Email:   {card.email}",
        f"  Phone:   {card.phone}",
        f"  Address: {card.address}",
        f"  Website: {card.website_link}",
        f"  Company: {card.company}",
    ])
