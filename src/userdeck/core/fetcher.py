"""HTTP fetcher implementation using httpx."""

import json
import logging

import httpx

from ..models import (
    FetchOutcome,
    HttpError,
    NetworkError,
    ParseError,
    RecordShapeError,
    Success,
    UserRecord,
)

DEFAULT_USER_AGENT = "UserDeck/0.1"

NETWORK_ERROR_MESSAGE = "Network error: Please check your internet connection"

STATUS_MESSAGES = {
    404: "404: Users data not found",
    500: "500: Internal server error",
}

logger = logging.getLogger(__name__)


def status_message(status_code: int) -> str:
    """User-facing message for a failed HTTP status."""
    if status_code in STATUS_MESSAGES:
        return STATUS_MESSAGES[status_code]
    return f"Server error: HTTP Error: {status_code}"


class HttpUserFetcher:
    """Async user-list fetcher using httpx with connection reuse."""

    def __init__(
        self,
        endpoint_url: str,
        timeout: float = 10.0,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self.endpoint_url = endpoint_url
        self.timeout = httpx.Timeout(timeout)
        self.user_agent = user_agent
        self._client: httpx.AsyncClient | None = None

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client; the app runs one fetch at a time."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers={"User-Agent": self.user_agent},
                follow_redirects=True,
            )
        return self._client

    async def fetch_users(self) -> FetchOutcome:
        """Fetch the endpoint once and classify what came back."""
        client = self._get_client()

        try:
            resp = await client.get(self.endpoint_url)
        except httpx.DecodingError as e:
            logger.warning("Fetch error: undecodable body from %s: %s", self.endpoint_url, e)
            return ParseError(f"Invalid response data: {e}")
        except httpx.RequestError as e:
            logger.warning("Fetch error: %s: %s", type(e).__name__, e)
            return NetworkError(NETWORK_ERROR_MESSAGE)

        if not resp.is_success:
            logger.warning("Fetch error: %s returned %d", self.endpoint_url, resp.status_code)
            return HttpError(resp.status_code, status_message(resp.status_code))

        try:
            records = parse_users(resp.content)
        except (json.JSONDecodeError, UnicodeDecodeError, RecursionError, RecordShapeError) as e:
            logger.warning("Fetch error: unparseable body from %s: %s", self.endpoint_url, e)
            return ParseError(f"Invalid response data: {e}")

        logger.info("Fetched %d users from %s", len(records), self.endpoint_url)
        return Success(records)

    async def close(self):
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None


def parse_users(content: bytes) -> tuple[UserRecord, ...]:
    """Decode a JSON array of user objects, preserving order."""
    payload = json.loads(content)
    if not isinstance(payload, list):
        raise RecordShapeError(f"expected a JSON array, got {type(payload).__name__}")
    return tuple(UserRecord.from_dict(item) for item in payload)
