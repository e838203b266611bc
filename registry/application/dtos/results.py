"""Result values returned across the store and service boundaries.

Expected outcomes (rejected input, conflicts, unique-constraint violations
reported by the store) are values the caller must inspect, not exceptions.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Created[T]:
    """Create succeeded; value carries any store-assigned key."""

    value: T


@dataclass(frozen=True)
class Conflict:
    """A uniqueness constraint would be (pre-check) or was (store) violated."""

    field: str
    value: str | int | None


@dataclass(frozen=True)
class Rejected:
    """Input failed field-level validation; nothing was read or written."""

    errors: tuple[str, ...]


type CreateResult[T] = Created[T] | Conflict | Rejected


@dataclass(frozen=True)
class Saved[E]:
    """Store write succeeded; entity reflects store-assigned values."""

    entity: E


@dataclass(frozen=True)
class UniqueViolation:
    """Store rejected the write because a unique constraint was violated."""

    constraint: str | None = None


type SaveResult[E] = Saved[E] | UniqueViolation
