"""Predicate-based linear search over in-memory collections."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

from orderdesk.domain.exceptions import EntityNotFoundError, InvalidArgumentError

T = TypeVar("T")


@dataclass(frozen=True)
class Lookup(Generic[T]):
    """Result of ``find``: either a found value or an explicit miss."""

    found: bool
    value: T | None = None

    def get(self) -> T:
        """Return the found value, raising EntityNotFoundError on a miss."""
        if not self.found:
            raise EntityNotFoundError("No matching element found")
        return self.value  # type: ignore[return-value]


def find(collection: Iterable[T] | None, predicate: Callable[[T], bool]) -> Lookup[T]:
    """Return the first element of *collection* matching *predicate*."""
    if collection is None:
        raise InvalidArgumentError("argument collection is None")
    for element in collection:
        if predicate(element):
            return Lookup(found=True, value=element)
    return Lookup(found=False)
