"""Staged construction of Person records.

Useful when field values arrive one at a time (e.g. interactive input) and
each one should be rejected as soon as it is given.

Usage:
    person = (
        PersonBuilder()
        .with_name("celestina")
        .with_surname("holy")
        .with_age(7)
        .with_gender(Gender.FEMALE)
        .build()
    )
"""

from __future__ import annotations

from personlist.core.person.models import DEFAULT_AGE, Gender, Person, check_gender
from personlist.core.person.validation import check_age, check_same_script, stage_name


class PersonBuilder:
    """Collects validated field values and builds a Person.

    Each with_* call validates immediately and leaves the staged value
    unchanged when it raises. Unset fields fall back to Person defaults.
    """

    def __init__(self) -> None:
        self._name = ""
        self._surname = ""
        self._age = DEFAULT_AGE
        self._gender = Gender.MALE

    def with_name(self, value: str) -> PersonBuilder:
        """Stage a name, cross-checked against the staged surname."""
        staged = stage_name(value)
        check_same_script(staged, self._surname)
        self._name = staged
        return self

    def with_surname(self, value: str) -> PersonBuilder:
        """Stage a surname, cross-checked against the staged name."""
        staged = stage_name(value)
        check_same_script(self._name, staged)
        self._surname = staged
        return self

    def with_age(self, value: int) -> PersonBuilder:
        self._age = check_age(value)
        return self

    def with_gender(self, value: Gender) -> PersonBuilder:
        self._gender = check_gender(value)
        return self

    def build(self) -> Person:
        """Create the Person. Runs the full validation once more."""
        return Person(self._name, self._surname, self._age, self._gender)
