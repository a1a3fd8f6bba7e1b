"""Random person generation.

Usage:
    person = random_person()
    person = random_person(random.Random(42))  # deterministic
"""

from __future__ import annotations

import random

from personlist.core.person.models import Gender, Person
from personlist.core.person.validation import MAX_AGE, MIN_AGE

MALE_NAMES = (
    "Argel",
    "Kayvaan",
    "John",
    "Vlad",
    "Salam",
    "Viktor",
    "Grimaldus",
    "Merek",
    "Archon",
)

FEMALE_NAMES = (
    "Katarina",
    "Efrael",
    "Luce",
    "Mirael",
    "Cyrene",
    "Elena",
    "Katerine",
    "Amberley",
    "Severina",
)

SURNAMES = (
    "Loyalist",
    "Fortheemperror",
    "Waaaaaagh",
    "Chaos",
    "Traitor",
    "Heresy",
)


def random_person(rng: random.Random | None = None) -> Person:
    """Create a person with random gender, name, surname and age.

    Age is drawn from [MIN_AGE, MAX_AGE), so MAX_AGE itself is never produced
    even though Person accepts it.

    Args:
        rng: Random source. A fresh random.Random() is used when omitted.

    Returns:
        New Person.
    """
    rng = rng or random.Random()
    gender = rng.choice((Gender.MALE, Gender.FEMALE))
    names = MALE_NAMES if gender is Gender.MALE else FEMALE_NAMES
    name = rng.choice(names)
    surname = rng.choice(SURNAMES)
    age = rng.randrange(MIN_AGE, MAX_AGE)
    return Person(name, surname, age, gender)
