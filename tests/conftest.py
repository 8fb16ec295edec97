"""Shared fixtures: a recording view and scripted user sources."""

import asyncio

import pytest

from userdeck.models import Address, FetchOutcome, Success, UserRecord


def make_user(user_id: int, name: str, username: str, email: str, company: str, **overrides) -> UserRecord:
    fields = dict(
        id=user_id,
        name=name,
        username=username,
        email=email,
        phone="1-770-736-8031 x56442",
        address=Address(street="Kulas Light", suite="Apt. 556", city="Gwenborough", zipcode="92998-3874"),
        website="hildegard.org",
        company_name=company,
    )
    fields.update(overrides)
    return UserRecord(**fields)


class RecordingView:
    """View that records every call and mirrors the latest display state."""

    def __init__(self):
        self.calls: list[tuple] = []
        self.loading = False
        self.refresh_enabled = True
        self.cards = []
        self.no_results = False
        self.error = None
        self.count = None
        self.timestamp = None

    def set_loading(self, active):
        self.calls.append(("set_loading", active))
        self.loading = active

    def set_refresh_enabled(self, enabled):
        self.calls.append(("set_refresh_enabled", enabled))
        self.refresh_enabled = enabled

    def render_cards(self, cards):
        self.calls.append(("render_cards", len(cards)))
        self.cards = list(cards)

    def clear_cards(self):
        self.calls.append(("clear_cards",))
        self.cards = []

    def set_no_results(self, visible):
        self.calls.append(("set_no_results", visible))
        self.no_results = visible

    def show_error(self, message):
        self.calls.append(("show_error", message))
        self.error = message

    def hide_error(self):
        self.calls.append(("hide_error",))
        self.error = None

    def set_count(self, count):
        self.calls.append(("set_count", count))
        self.count = count

    def set_timestamp(self, text):
        self.calls.append(("set_timestamp", text))
        self.timestamp = text


class ScriptedSource:
    """Returns queued outcomes in order; counts calls."""

    def __init__(self, *outcomes: FetchOutcome):
        self.outcomes = list(outcomes)
        self.calls = 0
        self.closed = False

    async def fetch_users(self) -> FetchOutcome:
        self.calls += 1
        return self.outcomes.pop(0)

    async def close(self):
        self.closed = True


class BlockingSource:
    """Holds every fetch until ``release`` is called."""

    def __init__(self, outcome: FetchOutcome):
        self.outcome = outcome
        self.calls = 0
        self.started = asyncio.Event()
        self._gate = asyncio.Event()

    def release(self):
        self._gate.set()

    async def fetch_users(self) -> FetchOutcome:
        self.calls += 1
        self.started.set()
        await self._gate.wait()
        return self.outcome

    async def close(self):
        pass


@pytest.fixture
def ann_and_bo():
    return (
        make_user(1, "Ann Lee", "ann", "a@x.com", "Acme"),
        make_user(2, "Bo Kim", "bo", "b@y.com", "Zenith"),
    )


@pytest.fixture
def view():
    return RecordingView()


@pytest.fixture
def success(ann_and_bo):
    return Success(ann_and_bo)
