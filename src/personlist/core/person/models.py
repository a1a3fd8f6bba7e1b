"""Person record with validated fields.

Usage:
    person = Person("roboute", "crybaby", 19, Gender.MALE)
    str(person)  # "Roboute Crybaby; Age - 19; Gender - Male"
    person.age = 20
    person.surname = "Иванов"  # raises LanguageMismatchError, surname unchanged
"""

from __future__ import annotations

import random
from enum import Enum
from typing import Any

from personlist.core.person.validation import (
    check_age,
    check_same_script,
    stage_name,
)

DEFAULT_AGE = 18


class Gender(Enum):
    """Gender of a person. Values are the display labels."""

    MALE = "Male"
    FEMALE = "Female"

    @property
    def label(self) -> str:
        return self.value


def check_gender(value: Gender) -> Gender:
    """Return value if it is a Gender, else raise TypeError."""
    if not isinstance(value, Gender):
        raise TypeError(f"Expected Gender, got {type(value).__name__}")
    return value


class Person:
    """Person with name, surname, age and gender.

    Every field assignment is validated. A failed assignment raises and leaves
    the field as it was, so a Person is never observable in an invalid state.

    Args:
        name: Latin or Cyrillic name, empty allowed.
        surname: Surname in the same script as name, empty allowed.
        age: Age within [MIN_AGE, MAX_AGE].
        gender: Gender.MALE or Gender.FEMALE.

    Raises:
        InvalidFormatError: If name or surname is malformed.
        LanguageMismatchError: If name and surname use different scripts.
        AgeOutOfRangeError: If age is out of range.
        TypeError: If a value has the wrong type.
    """

    __slots__ = ("_name", "_surname", "_age", "_gender")

    def __init__(
        self,
        name: str = "",
        surname: str = "",
        age: int = DEFAULT_AGE,
        gender: Gender = Gender.MALE,
    ):
        """Stage all fields, then run the cross-field check once."""
        self._name = stage_name(name)
        self._surname = stage_name(surname)
        self._age = check_age(age)
        self._gender = check_gender(gender)
        self.validate()

    def validate(self) -> None:
        """Run cross-field checks on the stored values.

        Raises:
            LanguageMismatchError: If name and surname use different scripts.
        """
        check_same_script(self._name, self._surname)

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        staged = stage_name(value)
        check_same_script(staged, self._surname)
        self._name = staged

    @property
    def surname(self) -> str:
        return self._surname

    @surname.setter
    def surname(self, value: str) -> None:
        staged = stage_name(value)
        check_same_script(self._name, staged)
        self._surname = staged

    @property
    def age(self) -> int:
        return self._age

    @age.setter
    def age(self, value: int) -> None:
        self._age = check_age(value)

    @property
    def gender(self) -> Gender:
        return self._gender

    @gender.setter
    def gender(self, value: Gender) -> None:
        self._gender = check_gender(value)

    @classmethod
    def random(cls, rng: random.Random | None = None) -> Person:
        """Create a random person. See generator.random_person."""
        from personlist.core.person.generator import random_person

        return random_person(rng)

    def copy(self) -> Person:
        """Return an independent person with the same field values."""
        clone = type(self).__new__(type(self))
        clone._name = self._name
        clone._surname = self._surname
        clone._age = self._age
        clone._gender = self._gender
        return clone

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Person):
            return NotImplemented
        return (self._name, self._surname, self._age, self._gender) == (
            other._name,
            other._surname,
            other._age,
            other._gender,
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"{self._name} {self._surname}; Age - {self._age}; Gender - {self._gender.label}"

    def __repr__(self) -> str:
        return (
            f"Person(name={self._name!r}, surname={self._surname!r}, "
            f"age={self._age}, gender=Gender.{self._gender.name})"
        )
