"""Core fetch components."""

from .fetcher import HttpUserFetcher, status_message
from .protocols import UserSource

__all__ = ["HttpUserFetcher", "UserSource", "status_message"]
