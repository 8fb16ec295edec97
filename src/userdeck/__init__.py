"""Searchable user directory backed by a remote JSON endpoint."""

__version__ = "0.1.0"
