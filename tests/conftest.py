"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from personlist import Gender, Person, PersonList


@pytest.fixture
def roboute():
    return Person("Roboute", "Crybaby", 19, Gender.MALE)


@pytest.fixture
def celestina():
    return Person("Celestina", "Holy", 7, Gender.FEMALE)


@pytest.fixture
def abaddon():
    return Person("Abaddon", "Vredina", 14, Gender.MALE)


@pytest.fixture
def people():
    """Fresh empty PersonList."""
    return PersonList()
