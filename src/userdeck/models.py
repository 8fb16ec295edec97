"""User record types and fetch outcome variants."""

from dataclasses import dataclass
from typing import Any


class RecordShapeError(ValueError):
    """Raised when a payload item does not have the expected user shape."""


@dataclass(frozen=True)
class Address:
    """Postal address of a user."""

    street: str
    suite: str
    city: str
    zipcode: str

    def formatted(self) -> str:
        """Single-line "street, suite, city, zipcode" form."""
        return f"{self.street}, {self.suite}, {self.city}, {self.zipcode}"


@dataclass(frozen=True)
class UserRecord:
    """One user as returned by the remote endpoint."""

    id: int
    name: str
    username: str
    email: str
    phone: str
    address: Address
    website: str
    company_name: str

    @classmethod
    def from_dict(cls, data: Any) -> "UserRecord":
        """Build a record from decoded JSON, rejecting anything ill-shaped."""
        if not isinstance(data, dict):
            raise RecordShapeError(f"expected object, got {type(data).__name__}")

        user_id = data.get("id")
        # bool is an int subclass but never a valid id
        if not isinstance(user_id, int) or isinstance(user_id, bool):
            raise RecordShapeError(f"invalid id: {user_id!r}")

        address = _require_dict(data, "address")
        company = _require_dict(data, "company")

        return cls(
            id=user_id,
            name=_require_str(data, "name"),
            username=_require_str(data, "username"),
            email=_require_str(data, "email"),
            phone=_require_str(data, "phone"),
            address=Address(
                street=_require_str(address, "street"),
                suite=_require_str(address, "suite"),
                city=_require_str(address, "city"),
                zipcode=_require_str(address, "zipcode"),
            ),
            website=_require_str(data, "website"),
            company_name=_require_str(company, "name"),
        )


def _require_str(data: dict, key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise RecordShapeError(f"field {key!r} must be a string, got {value!r}")
    return value


def _require_dict(data: dict, key: str) -> dict:
    value = data.get(key)
    if not isinstance(value, dict):
        raise RecordShapeError(f"field {key!r} must be an object, got {value!r}")
    return value


@dataclass(frozen=True)
class Success:
    """Fetch completed with a parsed payload."""

    records: tuple[UserRecord, ...]


@dataclass(frozen=True)
class HttpError:
    """Server answered with a non-success status code."""

    status_code: int
    message: str


@dataclass(frozen=True)
class NetworkError:
    """Request never got a response."""

    message: str


@dataclass(frozen=True)
class ParseError:
    """Response body was not a valid user list."""

    message: str


FetchOutcome = Success | HttpError | NetworkError | ParseError
