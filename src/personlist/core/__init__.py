"""Core primitives: person records and their validation."""

from personlist.core.person import (
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

__all__ = [
    "Person",
    "Gender",
    "PersonBuilder",
    "Script",
    "random_person",
    "PersonValidationError",
    "InvalidFormatError",
    "LanguageMismatchError",
    "AgeOutOfRangeError",
]
