"""Fetch/filter/render pipeline for one user-directory session."""

import enum
import logging
from collections.abc import Callable
from datetime import datetime

from .config import UserDeckSettings, settings
from .core import HttpUserFetcher, UserSource
from .dataset import DatasetController
from .models import FetchOutcome, Success
from .presenter import Presenter, View

logger = logging.getLogger(__name__)


class PipelineState(enum.Enum):
    IDLE = "idle"
    LOADING = "loading"
    RENDERED_SUCCESS = "rendered_success"
    RENDERED_ERROR = "rendered_error"


class UserDeckApp:
    """Session context owning the fetcher, dataset controller and presenter.

    User actions arrive as plain method calls: ``refresh``, ``search``,
    ``clear`` and ``shortcut``. Only one fetch is ever in flight; a refresh
    issued while loading is dropped.
    """

    def __init__(
        self,
        source: UserSource,
        view: View,
        reveal_step: float = 0.1,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.source = source
        self.controller = DatasetController()
        self.presenter = Presenter(view, reveal_step=reveal_step)
        self.clock = clock
        self.fetches_issued = 0
        self._state = PipelineState.IDLE
        self._in_flight = False

    @property
    def state(self) -> PipelineState:
        if self._in_flight:
            return PipelineState.LOADING
        return self._state

    @property
    def is_loading(self) -> bool:
        return self._in_flight

    async def start(self) -> FetchOutcome | None:
        """Initial load."""
        return await self.refresh()

    async def refresh(self) -> FetchOutcome | None:
        """Fetch and render. Returns None if a fetch was already running."""
        if self._in_flight:
            logger.debug("Refresh ignored: fetch already in flight")
            return None

        self._in_flight = True
        self.fetches_issued += 1
        self.presenter.show_loading(True)
        self.presenter.hide_error()

        try:
            outcome = await self.source.fetch_users()
            self._apply(outcome)
        finally:
            self._in_flight = False
            self.presenter.show_loading(False)

        return outcome

    def _apply(self, outcome: FetchOutcome):
        if isinstance(outcome, Success):
            view, count = self.controller.apply_success(outcome.records)
            self.presenter.hide_error()
            self.presenter.render_results(view)
            self.presenter.update_stats(count)
            self.presenter.update_timestamp(self.clock())
            self._state = PipelineState.RENDERED_SUCCESS
        else:
            logger.info("Showing fetch error: %s", outcome.message)
            self.presenter.show_error(outcome.message)
            self._state = PipelineState.RENDERED_ERROR

    async def shortcut(self, key: str, ctrl: bool = False) -> FetchOutcome | None:
        """Keyboard shortcut handler; Ctrl+R refreshes."""
        if ctrl and key == "r":
            return await self.refresh()
        return None

    def search(self, term: str) -> int:
        """Filter resident data by term and re-render. Returns the match count."""
        view, count = self.controller.set_search_term(term)
        self.presenter.render_results(view)
        self.presenter.update_stats(count)
        return count

    def clear(self):
        """Drop all data and reset the display to an empty list."""
        self.controller.clear()
        self.presenter.clear_results()
        self.presenter.update_stats(0)
        self.presenter.hide_error()
        self.presenter.hide_no_results()
        self._state = PipelineState.RENDERED_SUCCESS

    async def close(self):
        await self.source.close()

    async def __aenter__(self) -> "UserDeckApp":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()


def create_app(view: View, config: UserDeckSettings | None = None) -> UserDeckApp:
    """Build an app wired to the HTTP fetcher from settings."""
    config = config or settings
    fetcher = HttpUserFetcher(
        endpoint_url=config.endpoint_url,
        timeout=config.timeout,
        user_agent=config.user_agent,
    )
    return UserDeckApp(fetcher, view, reveal_step=config.reveal_step)
