"""Person records: validated fields, staged construction, random generation."""

from personlist.core.person.builder import PersonBuilder
from personlist.core.person.generator import random_person
from personlist.core.person.models import DEFAULT_AGE, Gender, Person
from personlist.core.person.validation import (
    MAX_AGE,
    MIN_AGE,
    AgeOutOfRangeError,
    InvalidFormatError,
    LanguageMismatchError,
    PersonValidationError,
    Script,
    check_age,
    check_same_script,
    classify_script,
    normalize_name,
    stage_name,
)

__all__ = [
    "Person",
    "Gender",
    "PersonBuilder",
    "random_person",
    "DEFAULT_AGE",
    "MIN_AGE",
    "MAX_AGE",
    "Script",
    "classify_script",
    "normalize_name",
    "stage_name",
    "check_same_script",
    "check_age",
    "PersonValidationError",
    "InvalidFormatError",
    "LanguageMismatchError",
    "AgeOutOfRangeError",
]
