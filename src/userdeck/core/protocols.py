"""Protocol definitions for pipeline collaborators."""

from typing import Protocol

from ..models import FetchOutcome


class UserSource(Protocol):
    """Protocol for anything that can produce a classified fetch outcome."""

    async def fetch_users(self) -> FetchOutcome:
        """Fetch the user list and classify the result."""
        ...

    async def close(self) -> None:
        """Release any held connections."""
        ...
