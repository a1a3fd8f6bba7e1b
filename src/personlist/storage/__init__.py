"""Person collections."""

from personlist.storage.local import PersonIndexError, PersonList
from personlist.storage.protocol import PersonCollection

__all__ = [
    "PersonCollection",
    "PersonList",
    "PersonIndexError",
]
