"""PersonList: validated person records and ordered person collections.

Usage:
    from personlist import Gender, Person, PersonList

    people = PersonList()
    people.add(Person("roboute", "crybaby", 19, Gender.MALE))
    print(people.get(0))  # Roboute Crybaby; Age - 19; Gender - Male
    people.remove_at(0)
"""

__version__ = "0.1.0"

# Core primitives
from personlist.core import (
    AgeOutOfRangeError,
    Gender,
    InvalidFormatError,
    LanguageMismatchError,
    Person,
    PersonBuilder,
    PersonValidationError,
    Script,
    random_person,
)

# Collections
from personlist.storage import (
    PersonCollection,
    PersonIndexError,
    PersonList,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "Person",
    "Gender",
    "PersonBuilder",
    "Script",
    "random_person",
    "PersonValidationError",
    "InvalidFormatError",
    "LanguageMismatchError",
    "AgeOutOfRangeError",
    # Collections
    "PersonCollection",
    "PersonList",
    "PersonIndexError",
]
