"""Projection of pipeline state onto an abstract view."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from .models import UserRecord

TIMESTAMP_FORMAT = "%H:%M:%S"


@dataclass(frozen=True)
class Card:
    """Display-ready fields for one user card."""

    user_id: int
    avatar: str
    name: str
    handle: str
    email: str
    email_link: str
    phone: str
    phone_link: str
    address: str
    website: str
    website_link: str
    company: str
    reveal_delay: float


class View(Protocol):
    """Rendering capability the presenter drives."""

    def set_loading(self, active: bool) -> None: ...

    def set_refresh_enabled(self, enabled: bool) -> None: ...

    def render_cards(self, cards: Sequence[Card]) -> None: ...

    def clear_cards(self) -> None: ...

    def set_no_results(self, visible: bool) -> None: ...

    def show_error(self, message: str) -> None: ...

    def hide_error(self) -> None: ...

    def set_count(self, count: int) -> None: ...

    def set_timestamp(self, text: str) -> None: ...


def normalize_phone(phone: str) -> str:
    """Keep the part of a phone number before the first space."""
    return phone.split(" ", 1)[0]


def build_card(record: UserRecord, index: int = 0, reveal_step: float = 0.1) -> Card:
    """Turn a record into card fields; delay grows with position."""
    phone = normalize_phone(record.phone)
    return Card(
        user_id=record.id,
        avatar=record.name[:1].upper(),
        name=record.name,
        handle=f"@{record.username}",
        email=record.email,
        email_link=f"mailto:{record.email}",
        phone=phone,
        phone_link=f"tel:{phone}",
        address=record.address.formatted(),
        website=record.website,
        website_link=f"http://{record.website}",
        company=record.company_name,
        reveal_delay=round(index * reveal_step, 6),
    )


class Presenter:
    """Stateless adapter from results and errors to view calls."""

    def __init__(self, view: View, reveal_step: float = 0.1):
        self.view = view
        self.reveal_step = reveal_step

    def show_loading(self, active: bool):
        """Toggle the loading indicator; refresh is disabled while loading."""
        self.view.set_loading(active)
        self.view.set_refresh_enabled(not active)

    def render_results(self, records: Sequence[UserRecord]):
        """Render cards, or the no-results state for an empty view."""
        if not records:
            self.view.clear_cards()
            self.view.set_no_results(True)
            return

        self.view.set_no_results(False)
        self.view.render_cards([
            build_card(record, index, self.reveal_step)
            for index, record in enumerate(records)
        ])

    def hide_no_results(self):
        """Hide the no-results indicator."""
        self.view.set_no_results(False)

    def clear_results(self):
        """Remove all rendered cards."""
        self.view.clear_cards()

    def show_error(self, message: str):
        """Show the error banner with a message."""
        self.view.show_error(message)

    def hide_error(self):
        """Hide the error banner."""
        self.view.hide_error()

    def update_stats(self, count: int):
        """Show the current result count."""
        self.view.set_count(count)

    def update_timestamp(self, now: datetime):
        """Show the time of the latest successful fetch."""
        self.view.set_timestamp(now.strftime(TIMESTAMP_FORMAT))
