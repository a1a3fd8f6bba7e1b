"""Collection protocol for ordered, index-addressed person containers.

Usage:
    def report(people: PersonCollection) -> None:
        for index in range(people.count()):
            print(people.get(index))
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol

from personlist.core.person import Person


class PersonCollection(Protocol):
    """Ordered sequence of persons addressed by 0-based index."""

    def add(self, person: Person) -> None:
        """Append person to the end."""
        ...

    def count(self) -> int:
        """Number of stored persons."""
        ...

    def get(self, index: int, copy: bool = False) -> Person:
        """Person at index. Raises PersonIndexError outside [0, count-1]."""
        ...

    def remove_at(self, index: int) -> None:
        """Remove person at index, shifting later ones left."""
        ...

    def clear(self) -> None:
        """Remove all persons."""
        ...

    def __len__(self) -> int: ...

    def __iter__(self) -> Iterator[Person]: ...
