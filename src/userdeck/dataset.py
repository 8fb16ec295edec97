"""Canonical user dataset and live search filtering."""

from collections.abc import Iterable

from .models import UserRecord


def matches(record: UserRecord, folded_term: str) -> bool:
    """Check if a case-folded term occurs in any searchable field."""
    return any(
        folded_term in field.casefold()
        for field in (record.name, record.email, record.username, record.company_name)
    )


class DatasetController:
    """Owns the last fetched records and the active search term."""

    def __init__(self):
        self._records: tuple[UserRecord, ...] = ()
        self._search_term = ""
        self._filtered: tuple[UserRecord, ...] = ()

    def _refilter(self) -> tuple[tuple[UserRecord, ...], int]:
        folded = self._search_term.casefold()
        if folded:
            self._filtered = tuple(r for r in self._records if matches(r, folded))
        else:
            self._filtered = self._records
        return self._filtered, len(self._filtered)

    def apply_success(self, records: Iterable[UserRecord]) -> tuple[tuple[UserRecord, ...], int]:
        """Replace the dataset and return the refiltered view with its count."""
        self._records = tuple(records)
        return self._refilter()

    def set_search_term(self, term: str) -> tuple[tuple[UserRecord, ...], int]:
        """Store a new search term and return the refiltered view with its count."""
        self._search_term = term
        return self._refilter()

    def clear(self):
        """Drop all records and the search term."""
        self._records = ()
        self._search_term = ""
        self._filtered = ()

    def record_count(self) -> int:
        """Number of records in the filtered view."""
        return len(self._filtered)

    def total_count(self) -> int:
        """Number of records in the full dataset."""
        return len(self._records)

    @property
    def records(self) -> tuple[UserRecord, ...]:
        return self._records

    @property
    def filtered(self) -> tuple[UserRecord, ...]:
        return self._filtered

    @property
    def search_term(self) -> str:
        return self._search_term
