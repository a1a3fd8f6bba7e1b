"""In-memory person list backed by a Python list.

Usage:
    people = PersonList()
    people.add(Person("Roboute", "Crybaby", 19))
    first = people.get(0)
    people.remove_at(0)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from personlist.core.person import Person

logger = logging.getLogger(__name__)


class PersonIndexError(IndexError):
    """Raised when an index is outside [0, count-1]."""

    def __init__(self, index: int, count: int):
        if count:
            message = f"Index {index} is out of range [0:{count - 1}]."
        else:
            message = f"Index {index} is out of range: list is empty."
        super().__init__(message)
        self.index = index
        self.count = count


class PersonList:
    """Ordered, index-addressed list of persons.

    Insertion order is kept and duplicates are allowed. Negative indices are
    rejected rather than counted from the end.

    Args:
        people: Optional initial persons, appended in order.
    """

    def __init__(self, people: Iterable[Person] | None = None):
        self._people: list[Person] = []
        for person in people or ():
            self.add(person)

    def _check_index(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"Expected int index, got {type(index).__name__}")
        if not 0 <= index < len(self._people):
            raise PersonIndexError(index, len(self._people))

    def add(self, person: Person) -> None:
        """Append person to the end of the list.

        Args:
            person: Person to store. The list keeps this reference.

        Raises:
            TypeError: If person is not a Person.
        """
        if not isinstance(person, Person):
            raise TypeError(f"Expected Person, got {type(person).__name__}")
        self._people.append(person)
        logger.debug("Added %s at index %d", person, len(self._people) - 1)

    def count(self) -> int:
        """Return number of stored persons."""
        return len(self._people)

    def get(self, index: int, copy: bool = False) -> Person:
        """Get person at index.

        Args:
            index: Position in [0, count-1].
            copy: Return an independent copy instead of the stored person.

        Returns:
            Person at index.

        Raises:
            PersonIndexError: If index is out of range.
        """
        self._check_index(index)
        person = self._people[index]
        return person.copy() if copy else person

    def remove_at(self, index: int) -> None:
        """Remove person at index. Later persons shift one position left.

        Raises:
            PersonIndexError: If index is out of range.
        """
        self._check_index(index)
        removed = self._people.pop(index)
        logger.debug("Removed %s from index %d", removed, index)

    def clear(self) -> None:
        """Remove all persons."""
        self._people.clear()
        logger.debug("Cleared person list")

    def __len__(self) -> int:
        return len(self._people)

    def __iter__(self) -> Iterator[Person]:
        return iter(list(self._people))

    def __getitem__(self, index: int) -> Person:
        return self.get(index)

    def __repr__(self) -> str:
        return f"PersonList({self._people!r})"
