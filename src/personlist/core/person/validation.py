"""Field validation and normalization for person records.

Names are classified by script using explicit code-point ranges, so the
result never depends on the process locale.

Usage:
    script = classify_script("Anna-Maria")  # Script.LATIN
    name = normalize_name("aNNA-MARIA")  # "Anna-maria"
    check_same_script("Ivan", "Petrov")
    age = check_age(42)
"""

from __future__ import annotations

import logging
from enum import Enum, auto

logger = logging.getLogger(__name__)

MIN_AGE = 0
MAX_AGE = 122

HYPHEN = "-"


class Script(Enum):
    """Writing system a name is written in."""

    UNKNOWN = auto()
    """Empty value, script cannot be determined."""

    LATIN = auto()
    CYRILLIC = auto()


class PersonValidationError(ValueError):
    """Base class for rejected person field values."""

    pass


class InvalidFormatError(PersonValidationError):
    """Raised when a name is not letters of one script with at most one inner hyphen."""

    pass


class LanguageMismatchError(PersonValidationError):
    """Raised when name and surname are written in different scripts."""

    pass


class AgeOutOfRangeError(PersonValidationError):
    """Raised when age is outside [MIN_AGE, MAX_AGE]."""

    def __init__(self, value: int, minimum: int = MIN_AGE, maximum: int = MAX_AGE):
        super().__init__(f"Age value must be in range [{minimum}:{maximum}], got {value}.")
        self.value = value
        self.minimum = minimum
        self.maximum = maximum


def _is_latin(char: str) -> bool:
    return "A" <= char <= "Z" or "a" <= char <= "z"


def _is_cyrillic(char: str) -> bool:
    # U+0410..U+044F covers А..я; Ё and ё sit outside that block
    return "А" <= char <= "я" or char in ("Ё", "ё")


def _letter_script(char: str) -> Script:
    if _is_latin(char):
        return Script.LATIN
    if _is_cyrillic(char):
        return Script.CYRILLIC
    return Script.UNKNOWN


def classify_script(value: str) -> Script:
    """Determine which script a name is written in.

    Accepted shape is one or more letters of a single script, optionally split
    by one hyphen with letters on both sides.

    Args:
        value: Raw name or surname.

    Returns:
        Script.UNKNOWN for an empty string, otherwise LATIN or CYRILLIC.

    Raises:
        TypeError: If value is not a string.
        InvalidFormatError: If value has foreign characters, mixed scripts,
            or misplaced/repeated hyphens.
    """
    if not isinstance(value, str):
        raise TypeError(f"Expected str, got {type(value).__name__}")
    if not value:
        return Script.UNKNOWN

    parts = value.split(HYPHEN)
    if len(parts) > 2 or any(not part for part in parts):
        raise InvalidFormatError(f"Incorrect input {value!r}: bad hyphenation.")

    scripts = {_letter_script(char) for char in value if char != HYPHEN}
    if len(scripts) != 1 or Script.UNKNOWN in scripts:
        raise InvalidFormatError(
            f"Incorrect input {value!r}: use letters of one alphabet (Latin or Cyrillic)."
        )
    return scripts.pop()


def normalize_name(value: str) -> str:
    """Lowercase the whole value, then uppercase its first character.

    The value is treated as one word: "anna-MARIA" becomes "Anna-maria".
    """
    lowered = value.lower()
    return lowered[:1].upper() + lowered[1:]


def stage_name(value: str) -> str:
    """Validate a name format and return its normalized form.

    Raises:
        TypeError: If value is not a string.
        InvalidFormatError: If value is malformed.
    """
    classify_script(value)
    return normalize_name(value)


def check_same_script(name: str, surname: str) -> None:
    """Ensure name and surname share a script once both are set.

    Args:
        name: Name, possibly empty.
        surname: Surname, possibly empty.

    Raises:
        LanguageMismatchError: If both are non-empty and scripts differ.
        InvalidFormatError: If either value is malformed.
    """
    if not name or not surname:
        return
    name_script = classify_script(name)
    surname_script = classify_script(surname)
    if name_script != surname_script:
        logger.debug(
            "Script mismatch: %r is %s, %r is %s",
            name,
            name_script.name,
            surname,
            surname_script.name,
        )
        raise LanguageMismatchError("Name and Surname must be only in one language.")


def check_age(value: int) -> int:
    """Validate an age.

    Args:
        value: Age in years.

    Returns:
        The same value.

    Raises:
        TypeError: If value is not an int (bool is rejected too).
        AgeOutOfRangeError: If value is outside [MIN_AGE, MAX_AGE].
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected int age, got {type(value).__name__}")
    if not MIN_AGE <= value <= MAX_AGE:
        raise AgeOutOfRangeError(value)
    return value
